import unittest

from sqlmodel import Session, select

from backend.app.core.database import engine
from backend.app.models.RevokedToken import RevokedToken
from backend.app.revocations.service import revoke, is_revoked, list_revoked


class TestRevocationRegistry(unittest.TestCase):

    def setUp(self):
        self.session = Session(engine)

    def tearDown(self):
        self.session.close()

    def test_unknown_token_is_not_revoked(self):
        self.assertFalse(is_revoked(self.session, "a" * 32))

    def test_revoke_is_idempotent(self):
        self.assertTrue(revoke(self.session, "a" * 32))
        self.session.commit()
        first = self.session.get(RevokedToken, "a" * 32).revoked_at

        self.assertFalse(revoke(self.session, "a" * 32))
        self.session.commit()

        rows = self.session.exec(select(RevokedToken)).all()
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].revoked_at, first)
        self.assertTrue(is_revoked(self.session, "a" * 32))

    def test_revoke_joins_callers_transaction(self):
        revoke(self.session, "b" * 32)
        self.session.rollback()
        self.assertFalse(is_revoked(self.session, "b" * 32))

    def test_list_revoked(self):
        for token in ("c" * 32, "d" * 32):
            revoke(self.session, token)
        self.session.commit()
        self.assertEqual({r.token for r in list_revoked(self.session)}, {"c" * 32, "d" * 32})


if __name__ == "__main__":
    unittest.main()
