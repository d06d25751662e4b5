# finboard/wsgi.py
# Ponto de entrada para o Gunicorn: gunicorn finboard.wsgi:wsgi_app
import sys
import traceback

from finboard.main import create_app

try:
    wsgi_app = create_app()
    print("DEBUG: Aplicação WSGI pronta.")
except Exception as e:
    print(f"ERROR: Erro crítico durante a inicialização: {e}", file=sys.stderr)
    traceback.print_exc(file=sys.stderr)
    raise
