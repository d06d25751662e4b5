# finboard/core/auth.py
from typing import Any, Dict
from supabase import Client
from werkzeug.security import check_password_hash, generate_password_hash

from finboard.core.errors import AuthenticationError, ValidationError
from finboard.core.models import USERS

INVALID_CREDENTIALS = "Invalid username or password"


class AuthProvider:
    """Interface de autenticação usada pela rota de login."""

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        raise NotImplementedError


class SupabaseAuthProvider(AuthProvider):
    """Busca o usuário na tabela 'users' e confere o hash da senha (com salt)."""

    def __init__(self, supabase_client: Client):
        self.supabase_client = supabase_client

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        username = (username or "").strip()
        if not username or not password:
            raise AuthenticationError(INVALID_CREDENTIALS)
        response = self.supabase_client.table(USERS).select("id,username,password_hash").eq("username", username).limit(1).execute()
        if not response.data:
            raise AuthenticationError(INVALID_CREDENTIALS)
        user = response.data[0]
        if not check_password_hash(user["password_hash"], password):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return {"id": user["id"], "username": user["username"]}


def create_user(supabase_client: Client, username: str, password: str) -> Dict[str, Any]:
    """Cria um usuário guardando apenas o hash da senha."""
    username = (username or "").strip()
    if not username:
        raise ValidationError("Username is required")
    if len(password or "") < 6:
        raise ValidationError("Password must have at least 6 characters")
    existing = supabase_client.table(USERS).select("id").eq("username", username).execute().data
    if existing:
        raise ValidationError(f"User '{username}' already exists")
    response = supabase_client.table(USERS).insert({
        "username": username,
        "password_hash": generate_password_hash(password),
    }).execute()
    created = response.data[0] if response.data else {}
    return {"id": created.get("id"), "username": username}
