# finboard/tests/helpers.py
from unittest.mock import MagicMock
from supabase import Client  # Importar para tipagem do mock

CHAINED_METHODS = ("select", "insert", "update", "delete", "eq", "order", "limit", "is_")


def make_supabase_mock():
    """
    Cria um cliente Supabase falso.
    Todos os métodos encadeáveis de .table(...) retornam o próprio mock, para que
    chamadas como .select().eq().limit().execute() funcionem. O .rpc(...) tem seu próprio mock.
    """
    supabase_client = MagicMock(spec=Client)

    table = MagicMock()
    for name in CHAINED_METHODS:
        getattr(table, name).return_value = table
    table.execute.return_value = MagicMock(data=[])
    supabase_client.table.return_value = table

    rpc = MagicMock()
    rpc.execute.return_value = MagicMock(data=[])
    supabase_client.rpc.return_value = rpc

    return supabase_client, table, rpc


def batch_operations(supabase_client):
    """Operações enviadas no último WriteBatch.commit."""
    args, _ = supabase_client.rpc.call_args
    return args[1]["operations"]
