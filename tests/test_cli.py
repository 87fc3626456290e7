import unittest
from unittest.mock import patch

import typer
from typer.testing import CliRunner

from cli.main import app
from cli.core.utils import parse_size, parse_duration

runner = CliRunner()


class TestCLIAccounts(unittest.TestCase):

    def setUp(self):
        self.token = "fake_session_token"

    @patch("cli.accounts.commands.load_token")
    @patch("cli.accounts.commands.api_create_account")
    def test_create_parses_human_limits(self, mock_create, mock_load_token):
        mock_load_token.return_value = self.token
        mock_create.return_value = {"username": "alice", "token": "ab" * 16, "data_limit": 0, "time_limit": 0}

        result = runner.invoke(app, ["accounts", "create", "alice", "--data", "500M", "--time", "7d"])
        self.assertEqual(result.exit_code, 0, result.stdout)
        self.assertIn("ab" * 16, result.stdout)

        args, _ = mock_create.call_args
        self.assertEqual(args[0], self.token)
        self.assertEqual(args[1], {"username": "alice", "data_limit": 500 * 1024 ** 2, "time_limit": 7 * 86400})

    @patch("cli.accounts.commands.load_token")
    def test_create_requires_session(self, mock_load_token):
        mock_load_token.return_value = None
        result = runner.invoke(app, ["accounts", "create", "alice"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No active session", result.stdout)

    @patch("cli.accounts.commands.load_token")
    @patch("cli.accounts.commands.api_list_accounts")
    def test_list(self, mock_list, mock_load_token):
        mock_load_token.return_value = self.token
        mock_list.return_value = [
            {"username": "alice", "token": "a" * 32, "data_limit": 1000, "time_limit": 0},
        ]
        result = runner.invoke(app, ["accounts", "list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("alice", result.stdout)
        self.assertIn("1000B", result.stdout)
        self.assertIn("unlimited", result.stdout)

    @patch("cli.accounts.commands.load_token")
    @patch("cli.accounts.commands.api_delete_account")
    def test_delete(self, mock_delete, mock_load_token):
        mock_load_token.return_value = self.token

        mock_delete.return_value = 204
        result = runner.invoke(app, ["accounts", "delete", "bob", "--force"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("revoked and deleted", result.stdout)
        mock_delete.assert_called_once_with(self.token, "bob")

        mock_delete.return_value = 404
        result = runner.invoke(app, ["accounts", "delete", "bob", "--force"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("not found", result.stdout)

    @patch("cli.accounts.commands.load_token")
    @patch("cli.accounts.commands.api_delete_account")
    def test_delete_can_be_cancelled(self, mock_delete, mock_load_token):
        mock_load_token.return_value = self.token
        result = runner.invoke(app, ["accounts", "delete", "bob"], input="n\n")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("cancelled", result.stdout)
        mock_delete.assert_not_called()


class TestCLIAccess(unittest.TestCase):

    @patch("cli.access.commands.api_validate")
    def test_validate_authorized(self, mock_validate):
        mock_validate.return_value = {"authorized": True, "reason": None}
        result = runner.invoke(app, ["access", "validate", "a" * 32])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Authorized", result.stdout)

    @patch("cli.access.commands.api_validate")
    def test_validate_denied(self, mock_validate):
        mock_validate.return_value = {"authorized": False, "reason": "Revoked"}
        result = runner.invoke(app, ["access", "validate", "a" * 32])
        self.assertEqual(result.exit_code, 3)
        self.assertIn("Unauthorized: Revoked", result.stdout)

    @patch("cli.access.commands.api_report_usage")
    def test_report(self, mock_report):
        mock_report.return_value = True
        result = runner.invoke(app, ["access", "report", "a" * 32, "--data", "4K", "--time", "2m"])
        self.assertEqual(result.exit_code, 0)
        mock_report.assert_called_once_with("a" * 32, 4096, 120)


class TestHumanUnits(unittest.TestCase):

    def test_sizes(self):
        self.assertEqual(parse_size("0"), 0)
        self.assertEqual(parse_size("512"), 512)
        self.assertEqual(parse_size("2G"), 2 * 1024 ** 3)
        self.assertEqual(parse_size("10MB"), 10 * 1024 ** 2)
        self.assertEqual(parse_size("1GiB"), 1024 ** 3)

    def test_durations(self):
        self.assertEqual(parse_duration("90"), 90)
        self.assertEqual(parse_duration("30m"), 1800)
        self.assertEqual(parse_duration("12h"), 43200)
        self.assertEqual(parse_duration("2w"), 2 * 604800)

    def test_rejects_garbage(self):
        for bad in ("", "-5", "ten", "5X"):
            with self.assertRaises(typer.BadParameter):
                parse_size(bad)
        with self.assertRaises(typer.BadParameter):
            parse_duration("3y")


if __name__ == "__main__":
    unittest.main()
