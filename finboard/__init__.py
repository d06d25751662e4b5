# finboard/__init__.py
