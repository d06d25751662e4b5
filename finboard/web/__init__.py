# finboard/web/__init__.py
