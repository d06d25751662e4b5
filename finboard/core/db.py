# finboard/core/db.py
from supabase import create_client, Client
from finboard.config import SUPABASE_URL, SUPABASE_KEY
from finboard.core.errors import NotFoundError
from typing import Any, Dict, List


def get_supabase_client() -> Client:
    """Retorna uma instância do cliente Supabase."""
    return create_client(SUPABASE_URL, SUPABASE_KEY)


# --- Funções genéricas de CRUD ---
# Os erros do PostgREST (APIError) e de rede sobem para a rota que disparou a ação.

def list_rows(supabase_client: Client, table: str, order_by: str = "created_at", desc: bool = True) -> List[Dict[str, Any]]:
    """Obtém todas as linhas de uma tabela, ordenadas."""
    response = supabase_client.table(table).select("*").order(order_by, desc=desc).execute()
    return response.data or []


def get_row(supabase_client: Client, table: str, row_id: str) -> Dict[str, Any]:
    """Obtém uma linha pelo id. Levanta NotFoundError se não existir."""
    response = supabase_client.table(table).select("*").eq("id", row_id).limit(1).execute()
    if not response.data:
        raise NotFoundError(f"{table} row '{row_id}' not found")
    return response.data[0]


def insert_row(supabase_client: Client, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
    """Insere uma linha e retorna o registro criado."""
    response = supabase_client.table(table).insert(values).execute()
    return response.data[0] if response.data else values


def update_row(supabase_client: Client, table: str, row_id: str, values: Dict[str, Any]) -> Dict[str, Any]:
    """Atualiza uma linha pelo id e retorna o registro atualizado."""
    response = supabase_client.table(table).update(values).eq("id", row_id).execute()
    if not response.data:
        raise NotFoundError(f"{table} row '{row_id}' not found")
    return response.data[0]


def delete_row(supabase_client: Client, table: str, row_id: str) -> None:
    """Remove uma linha pelo id."""
    response = supabase_client.table(table).delete().eq("id", row_id).execute()
    if not response.data:
        raise NotFoundError(f"{table} row '{row_id}' not found")
