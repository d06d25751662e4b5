# finboard/core/batch.py
from typing import Any, Dict, List
from supabase import Client

# Função Postgres (sql/schema.sql) que aplica todas as operações numa única transação.
APPLY_WRITE_BATCH_RPC = "apply_write_batch"


class WriteBatch:
    """
    Acumula escritas (insert/update) e as envia de uma vez para o banco.
    Ou todas as escritas são aplicadas, ou nenhuma: uma violação de CHECK
    (ex: estoque negativo) desfaz o lote inteiro.
    """

    def __init__(self):
        self.operations: List[Dict[str, Any]] = []

    def insert(self, table: str, values: Dict[str, Any]) -> "WriteBatch":
        self.operations.append({"op": "insert", "table": table, "values": values})
        return self

    def update(self, table: str, row_id: str, values: Dict[str, Any]) -> "WriteBatch":
        self.operations.append({"op": "update", "table": table, "id": row_id, "values": values})
        return self

    def commit(self, supabase_client: Client) -> List[Dict[str, Any]]:
        """Executa o lote via RPC e retorna as linhas escritas, na ordem das operações."""
        if not self.operations:
            return []
        response = supabase_client.rpc(APPLY_WRITE_BATCH_RPC, {"operations": self.operations}).execute()
        return response.data or []
