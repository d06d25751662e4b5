# finboard/main.py
import sys
from typing import Union

from flask import Flask
from supabase import Client

from finboard import config
from finboard.core.auth import AuthProvider, SupabaseAuthProvider
from finboard.core.db import get_supabase_client
from finboard.web.app_setup import register_routes


def create_app(supabase_client: Union[Client, None] = None,
               auth_provider: Union[AuthProvider, None] = None,
               secret_key: Union[str, None] = None) -> Flask:
    """
    Monta a aplicação Flask.
    O cliente Supabase fica em app.config["SUPABASE_CLIENT"] para que as rotas possam acessá-lo.
    Sem FLASK_SECRET_KEY (ou secret_key) a aplicação não sobe.
    """
    secret_key = secret_key or config.FLASK_SECRET_KEY
    if not secret_key:
        print("ERROR: FLASK_SECRET_KEY não definida.", file=sys.stderr)
        raise RuntimeError("FLASK_SECRET_KEY is not set")

    missing = config.check_missing_env_vars()
    if missing and supabase_client is None:
        print(f"ERROR: Variáveis de ambiente ausentes: {', '.join(missing)}", file=sys.stderr)

    if supabase_client is None:
        supabase_client = get_supabase_client()
        print("DEBUG: Cliente Supabase inicializado.")

    app = Flask(__name__)
    app.config["SECRET_KEY"] = secret_key
    app.config["SUPABASE_CLIENT"] = supabase_client
    app.config["AUTH_PROVIDER"] = auth_provider or SupabaseAuthProvider(supabase_client)
    print(f"DEBUG: Configurações carregadas: {['SECRET_KEY', 'SUPABASE_CLIENT', 'AUTH_PROVIDER']}")

    register_routes(app)
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
