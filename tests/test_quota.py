import unittest
from datetime import datetime, timedelta

from backend.app.models.Account import Account
from backend.app.models.Decision import DenyReason
from backend.app.quota.service import authorize, remaining

CREATED = datetime(2026, 1, 1, 12, 0, 0)


def make_account(**fields):
    defaults = dict(username="alice", token="a" * 32, created_at=CREATED)
    defaults.update(fields)
    return Account(**defaults)


class TestAuthorize(unittest.TestCase):

    def test_unlimited_account_is_allowed(self):
        account = make_account(data_consumed=10 ** 12, time_consumed=10 ** 6)
        decision = authorize(account, False, CREATED + timedelta(days=3650))
        self.assertTrue(decision.allowed)
        self.assertIsNone(decision.reason)

    def test_data_limit_boundary(self):
        account = make_account(data_limit=100, data_consumed=99)
        self.assertTrue(authorize(account, False, CREATED).allowed)

        account.data_consumed = 100
        decision = authorize(account, False, CREATED)
        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, DenyReason.DATA_EXCEEDED)

    def test_data_over_limit_is_denied(self):
        account = make_account(data_limit=100, data_consumed=250)
        self.assertEqual(authorize(account, False, CREATED).reason, DenyReason.DATA_EXCEEDED)

    def test_time_limit_measured_from_creation(self):
        account = make_account(time_limit=3600)
        self.assertTrue(authorize(account, False, CREATED + timedelta(seconds=3599)).allowed)

        decision = authorize(account, False, CREATED + timedelta(seconds=3600))
        self.assertEqual(decision.reason, DenyReason.TIME_EXCEEDED)

    def test_time_consumed_does_not_drive_time_limit(self):
        account = make_account(time_limit=3600, time_consumed=10 ** 6)
        self.assertTrue(authorize(account, False, CREATED + timedelta(seconds=10)).allowed)

    def test_revocation_wins_over_everything(self):
        account = make_account()
        decision = authorize(account, True, CREATED)
        self.assertEqual(decision.reason, DenyReason.REVOKED)

        exhausted = make_account(data_limit=1, data_consumed=5, time_limit=1)
        decision = authorize(exhausted, True, CREATED + timedelta(days=1))
        self.assertEqual(decision.reason, DenyReason.REVOKED)

    def test_data_checked_before_time(self):
        account = make_account(data_limit=1, data_consumed=1, time_limit=1)
        decision = authorize(account, False, CREATED + timedelta(seconds=5))
        self.assertEqual(decision.reason, DenyReason.DATA_EXCEEDED)


class TestRemaining(unittest.TestCase):

    def test_unlimited_reports_none(self):
        status = remaining(make_account(), CREATED)
        self.assertIsNone(status.data_remaining)
        self.assertIsNone(status.time_remaining)

    def test_remaining_counts_down_and_floors_at_zero(self):
        account = make_account(data_limit=1000, data_consumed=400, time_limit=60)
        status = remaining(account, CREATED + timedelta(seconds=45))
        self.assertEqual(status.data_remaining, 600)
        self.assertEqual(status.time_remaining, 15)

        account.data_consumed = 5000
        status = remaining(account, CREATED + timedelta(hours=1))
        self.assertEqual(status.data_remaining, 0)
        self.assertEqual(status.time_remaining, 0)


if __name__ == "__main__":
    unittest.main()
