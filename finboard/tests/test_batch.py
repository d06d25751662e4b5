import unittest

from finboard.core.batch import APPLY_WRITE_BATCH_RPC, WriteBatch
from finboard.tests.helpers import make_supabase_mock


class TestWriteBatch(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, self.rpc = make_supabase_mock()

    def test_operations_keep_order(self):
        batch = WriteBatch()
        batch.update("products", "p1", {"stock_quantity": 5}).insert("incomes", {"amount": 10})
        self.assertEqual(
            batch.operations,
            [
                {"op": "update", "table": "products", "id": "p1", "values": {"stock_quantity": 5}},
                {"op": "insert", "table": "incomes", "values": {"amount": 10}},
            ],
        )

    def test_commit_sends_single_rpc(self):
        self.rpc.execute.return_value.data = [{"id": "p1"}, {"id": "i1"}]
        batch = WriteBatch().update("products", "p1", {"stock_quantity": 5}).insert("incomes", {"amount": 10})

        rows = batch.commit(self.supabase_client)

        self.assertEqual(rows, [{"id": "p1"}, {"id": "i1"}])
        self.supabase_client.rpc.assert_called_once_with(
            APPLY_WRITE_BATCH_RPC, {"operations": batch.operations}
        )
        self.supabase_client.table.assert_not_called()

    def test_empty_commit_is_noop(self):
        self.assertEqual(WriteBatch().commit(self.supabase_client), [])
        self.supabase_client.rpc.assert_not_called()

    def test_commit_failure_propagates(self):
        self.rpc.execute.side_effect = Exception("new row violates check constraint")
        batch = WriteBatch().insert("incomes", {"amount": 10})
        with self.assertRaises(Exception):
            batch.commit(self.supabase_client)


if __name__ == "__main__":
    unittest.main()
