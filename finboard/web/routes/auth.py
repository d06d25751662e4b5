# finboard/web/routes/auth.py
from flask import current_app, session

from finboard.web.routes.utils import json_action, read_json, success


@json_action("login")
def login_route():
    """Confere usuário/senha e abre a sessão."""
    data = read_json()
    provider = current_app.config["AUTH_PROVIDER"]
    user = provider.authenticate(data.get("username", ""), data.get("password", ""))
    session.clear()
    session["user_id"] = user["id"]
    session["username"] = user["username"]
    return success("Logged in successfully!", user=user)


def logout_route():
    session.clear()
    return success("Logged out.")
