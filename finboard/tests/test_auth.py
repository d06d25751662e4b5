import unittest

from werkzeug.security import generate_password_hash

from finboard.core.auth import SupabaseAuthProvider, create_user
from finboard.core.errors import AuthenticationError, ValidationError
from finboard.tests.helpers import make_supabase_mock


class TestSupabaseAuthProvider(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, _ = make_supabase_mock()
        self.provider = SupabaseAuthProvider(self.supabase_client)

    def test_valid_credentials(self):
        self.table.execute.return_value.data = [
            {"id": "u1", "username": "rafa", "password_hash": generate_password_hash("s3cret!")}
        ]
        user = self.provider.authenticate("rafa", "s3cret!")
        self.assertEqual(user, {"id": "u1", "username": "rafa"})
        self.table.eq.assert_called_with("username", "rafa")

    def test_wrong_password(self):
        self.table.execute.return_value.data = [
            {"id": "u1", "username": "rafa", "password_hash": generate_password_hash("s3cret!")}
        ]
        with self.assertRaises(AuthenticationError) as ctx:
            self.provider.authenticate("rafa", "wrong")
        self.assertEqual(str(ctx.exception), "Invalid username or password")

    def test_unknown_user_gives_same_message(self):
        with self.assertRaises(AuthenticationError) as ctx:
            self.provider.authenticate("ghost", "whatever")
        self.assertEqual(str(ctx.exception), "Invalid username or password")

    def test_plaintext_password_column_is_never_queried(self):
        self.table.execute.return_value.data = []
        with self.assertRaises(AuthenticationError):
            self.provider.authenticate("rafa", "s3cret!")
        for call in self.table.eq.call_args_list:
            self.assertNotEqual(call.args[0], "password")


class TestCreateUser(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, _ = make_supabase_mock()

    def test_stores_only_the_hash(self):
        self.table.execute.return_value.data = []
        create_user(self.supabase_client, "rafa", "123456")
        args, _ = self.table.insert.call_args
        self.assertEqual(args[0]["username"], "rafa")
        self.assertNotEqual(args[0]["password_hash"], "123456")
        self.assertNotIn("password", args[0])

    def test_duplicate_user(self):
        self.table.execute.return_value.data = [{"id": "u1"}]
        with self.assertRaises(ValidationError):
            create_user(self.supabase_client, "rafa", "123456")
        self.table.insert.assert_not_called()

    def test_short_password(self):
        with self.assertRaises(ValidationError):
            create_user(self.supabase_client, "rafa", "123")


if __name__ == "__main__":
    unittest.main()
