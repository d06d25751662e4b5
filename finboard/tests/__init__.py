# finboard/tests/__init__.py
