# scripts/create_user.py
# Uso: python scripts/create_user.py <username>   (a senha é pedida no terminal)
import getpass
import sys

from finboard.core.auth import create_user
from finboard.core.db import get_supabase_client
from finboard.core.errors import ValidationError


def main(argv: list) -> int:
    if len(argv) != 2:
        print("Usage: python scripts/create_user.py <username>")
        return 1
    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Confirm password: "):
        print("ERROR: Passwords do not match.", file=sys.stderr)
        return 1
    try:
        user = create_user(get_supabase_client(), argv[1], password)
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(f"User created successfully: {user['username']} ({user['id']})")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
