"""Unit tests for app.services.lifecycle: status updates, transition table, next step."""

import unittest
from unittest.mock import MagicMock

from app.models import SecurityReport
from app.schemas.reports import ReportStatus
from app.services.errors import (
    InvalidStatusError,
    InvalidTransitionError,
    ReportNotFoundError,
)
from app.services.lifecycle import is_allowed_transition, next_status, update_status
from tests.support import add_report, at, make_session_factory


class TestNextStatus(unittest.TestCase):
    """next_status offers exactly one forward step."""

    def test_forward_steps(self) -> None:
        self.assertIs(next_status("new"), ReportStatus.REVIEWED)
        self.assertIs(next_status(ReportStatus.REVIEWED), ReportStatus.RESOLVED)
        self.assertIsNone(next_status("resolved"))


class TestTransitionTable(unittest.TestCase):
    """Only staying put or one step forward is allowed."""

    def test_allowed(self) -> None:
        self.assertTrue(is_allowed_transition("new", "reviewed"))
        self.assertTrue(is_allowed_transition("reviewed", "resolved"))
        self.assertTrue(is_allowed_transition("resolved", "resolved"))

    def test_rejected(self) -> None:
        self.assertFalse(is_allowed_transition("new", "resolved"))
        self.assertFalse(is_allowed_transition("resolved", "new"))
        self.assertFalse(is_allowed_transition("reviewed", "new"))


class TestUpdateStatusValidation(unittest.TestCase):
    """Invalid status values fail before the store is queried."""

    def test_invalid_status_skips_lookup(self) -> None:
        db = MagicMock()
        for value in (None, "bogus", "", 3):
            with self.subTest(value=value):
                with self.assertRaises(InvalidStatusError) as ctx:
                    update_status(db, "some-id", value)
                self.assertIn("new, reviewed, resolved", ctx.exception.message)
        db.query.assert_not_called()
        db.commit.assert_not_called()


class TestUpdateStatus(unittest.TestCase):
    """update_status against a real in-memory store."""

    def setUp(self) -> None:
        self.Session = make_session_factory()
        with self.Session() as db:
            self.report_id = add_report(db, created_at=at(9)).id

    def test_not_found(self) -> None:
        with self.Session() as db:
            with self.assertRaises(ReportNotFoundError) as ctx:
                update_status(db, "missing-id", "reviewed")
        self.assertEqual(ctx.exception.report_id, "missing-id")

    def test_updates_status_and_timestamp(self) -> None:
        with self.Session() as db:
            updated = update_status(db, self.report_id, "reviewed")
            self.assertEqual(updated.status, "reviewed")
            self.assertGreater(
                updated.updated_at.replace(tzinfo=None),
                at(9).replace(tzinfo=None),
            )
            self.assertEqual(
                updated.created_at.replace(tzinfo=None),
                at(9).replace(tzinfo=None),
            )

    def test_invalid_status_leaves_record_unchanged(self) -> None:
        with self.Session() as db:
            with self.assertRaises(InvalidStatusError):
                update_status(db, self.report_id, "bogus")
        with self.Session() as db:
            self.assertEqual(db.get(SecurityReport, self.report_id).status, "new")

    def test_loose_mode_accepts_any_known_status(self) -> None:
        with self.Session() as db:
            update_status(db, self.report_id, "resolved")
            reverted = update_status(db, self.report_id, "new")
        self.assertEqual(reverted.status, "new")

    def test_strict_mode_allows_forward_step(self) -> None:
        with self.Session() as db:
            update_status(db, self.report_id, "reviewed", strict=True)
            resolved = update_status(db, self.report_id, "resolved", strict=True)
        self.assertEqual(resolved.status, "resolved")

    def test_strict_mode_rejects_skip_and_reversal(self) -> None:
        with self.Session() as db:
            with self.assertRaises(InvalidTransitionError) as ctx:
                update_status(db, self.report_id, "resolved", strict=True)
            self.assertEqual(ctx.exception.current, "new")
            self.assertEqual(ctx.exception.requested, "resolved")
        with self.Session() as db:
            self.assertEqual(db.get(SecurityReport, self.report_id).status, "new")

        with self.Session() as db:
            update_status(db, self.report_id, "reviewed", strict=True)
            with self.assertRaises(InvalidTransitionError):
                update_status(db, self.report_id, "new", strict=True)


if __name__ == "__main__":
    unittest.main()
