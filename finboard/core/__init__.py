# finboard/core/__init__.py
