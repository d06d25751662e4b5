# finboard/web/routes/utils.py
import sys
from functools import wraps
from typing import Any, Dict

from flask import current_app, jsonify, request, session
from supabase import Client

from finboard.core.errors import AuthenticationError, NotFoundError, ValidationError


def get_client() -> Client:
    """Cliente Supabase guardado na configuração do app (equivalente ao bot_data do bot)."""
    return current_app.config["SUPABASE_CLIENT"]


def read_json() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def login_required(view_func):
    @wraps(view_func)
    def wrapped(*args, **kwargs):
        if not session.get("user_id"):
            return jsonify({"error": "Login required"}), 401
        return view_func(*args, **kwargs)
    return wrapped


def json_action(action_name: str):
    """
    Executa a ação do usuário e converte as falhas em {"error": mensagem}.
    Erros de validação voltam como 400; o resto é impresso no stderr e vira 500.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapped(*args, **kwargs):
            try:
                return view_func(*args, **kwargs)
            except ValidationError as e:
                print(f"DEBUG: '{action_name}' rejeitada: {e}")
                return jsonify({"error": str(e)}), 400
            except NotFoundError as e:
                print(f"DEBUG: '{action_name}': {e}")
                return jsonify({"error": str(e)}), 404
            except AuthenticationError as e:
                return jsonify({"error": str(e)}), 401
            except Exception as e:
                print(f"ERROR: Falha em '{action_name}': {e}", file=sys.stderr)
                return jsonify({"error": str(e) or "Unexpected error"}), 500
        return wrapped
    return decorator


def success(message: str, status: int = 200, **payload):
    body = {"success": True, "message": message}
    body.update(payload)
    return jsonify(body), status
