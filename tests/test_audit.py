import threading
import unittest

from sqlmodel import Session

from backend.app.core.database import engine
from backend.app.audit.service import log_event, verify_chain, get_audit_logs
from backend.app.models.Audit import AuditLog, GENESIS_HASH


class TestAuditChain(unittest.TestCase):

    def setUp(self):
        self.session = Session(engine)

    def tearDown(self):
        self.session.close()

    def test_entries_link_to_predecessor(self):
        first = log_event(self.session, 1, "POST /accounts 201 Created", "Account 'alice' created")
        second = log_event(self.session, 1, "DELETE /accounts/alice 204 No Content")

        self.assertEqual(first.previous_hash, GENESIS_HASH)
        self.assertEqual(second.previous_hash, first.current_hash)
        self.assertEqual(second.details, "")
        self.assertEqual([e.id for e in get_audit_logs(self.session)], [first.id, second.id])

        status = verify_chain(self.session)
        self.assertTrue(status.valid)
        self.assertEqual(status.entries, 2)

    def test_tampering_is_detected(self):
        log_event(self.session, 1, "POST /accounts 201 Created", "Account 'alice' created")
        target = log_event(self.session, 1, "DELETE /accounts/alice 204 No Content")
        log_event(self.session, 1, "GET /accounts 200 OK")

        row = self.session.get(AuditLog, target.id)
        row.details = "nothing happened"
        self.session.add(row)
        self.session.commit()

        status = verify_chain(self.session)
        self.assertFalse(status.valid)
        self.assertEqual(status.broken_at, target.id)

    def test_concurrent_appends_keep_a_single_chain(self):
        workers = 20
        errors = []

        def append(n):
            try:
                with Session(engine) as session:
                    log_event(session, 1, "GET /accounts 200 OK", f"worker {n}")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=append, args=(n,)) for n in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        status = verify_chain(self.session)
        self.assertTrue(status.valid)
        self.assertEqual(status.entries, workers)

    def test_empty_chain_is_valid(self):
        self.assertTrue(verify_chain(self.session).valid)


if __name__ == "__main__":
    unittest.main()
