# finboard/utils/__init__.py
