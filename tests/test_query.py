"""Unit tests for app.services.query: filters, ordering, lookup, tallies, raw data decoding."""

import unittest

from app.schemas.reports import ReportSeverity
from app.services.errors import ReportNotFoundError
from app.services.query import count_by_severity, decode_raw_data, get_report, list_reports
from tests.support import add_report, at, make_session_factory


class TestListReports(unittest.TestCase):
    """list_reports filters by exact match and sorts newest first."""

    def setUp(self) -> None:
        self.Session = make_session_factory()
        with self.Session() as db:
            self.critical_resolved = add_report(
                db, severity="critical", status="resolved", created_at=at(10)
            ).id
            self.critical_new = add_report(
                db, severity="critical", status="new", created_at=at(12)
            ).id
            self.low_resolved = add_report(
                db, severity="low", status="resolved", created_at=at(11)
            ).id

    def test_no_filters_returns_all_newest_first(self) -> None:
        with self.Session() as db:
            ids = [r.id for r in list_reports(db)]
        self.assertEqual(ids, [self.critical_new, self.low_resolved, self.critical_resolved])

    def test_severity_filter(self) -> None:
        with self.Session() as db:
            reports = list_reports(db, {"severity": "critical"})
        self.assertEqual([r.id for r in reports], [self.critical_new, self.critical_resolved])
        self.assertTrue(all(r.severity == "critical" for r in reports))

    def test_combined_filters(self) -> None:
        with self.Session() as db:
            reports = list_reports(db, {"severity": "critical", "status": "resolved"})
        self.assertEqual([r.id for r in reports], [self.critical_resolved])

    def test_enum_filter_values_accepted(self) -> None:
        with self.Session() as db:
            reports = list_reports(db, {"severity": ReportSeverity.LOW})
        self.assertEqual([r.id for r in reports], [self.low_resolved])

    def test_empty_and_unknown_filters_ignored(self) -> None:
        with self.Session() as db:
            reports = list_reports(db, {"severity": "", "status": None, "source": "npm-audit", "x": "y"})
        self.assertEqual(len(reports), 3)

    def test_out_of_domain_value_matches_nothing(self) -> None:
        with self.Session() as db:
            self.assertEqual(list_reports(db, {"severity": "urgent"}), [])


class TestGetReport(unittest.TestCase):
    """get_report returns the row or raises ReportNotFoundError."""

    def test_found_and_missing(self) -> None:
        Session = make_session_factory()
        with Session() as db:
            report_id = add_report(db).id
            self.assertEqual(get_report(db, report_id).id, report_id)
            with self.assertRaises(ReportNotFoundError):
                get_report(db, "nope")


class TestCountBySeverity(unittest.TestCase):
    """count_by_severity reports every severity, zero when absent."""

    def test_counts(self) -> None:
        Session = make_session_factory()
        with Session() as db:
            add_report(db, severity="critical", status="new")
            add_report(db, severity="critical", status="resolved")
            add_report(db, severity="info", status="new")
            counts = count_by_severity(db)
            new_counts = count_by_severity(db, {"status": "new"})
        self.assertEqual(
            counts,
            {"critical": 2, "high": 0, "moderate": 0, "low": 0, "info": 1},
        )
        self.assertEqual(new_counts["critical"], 1)
        self.assertEqual(sum(new_counts.values()), 2)

    def test_empty_store(self) -> None:
        Session = make_session_factory()
        with Session() as db:
            counts = count_by_severity(db)
        self.assertEqual(set(counts), {s.value for s in ReportSeverity})
        self.assertEqual(sum(counts.values()), 0)


class TestDecodeRawData(unittest.TestCase):
    """Decoding is best effort; undecodable text comes back unchanged."""

    def test_valid_json(self) -> None:
        self.assertEqual(decode_raw_data('{"a": [1, 2]}'), {"a": [1, 2]})
        self.assertEqual(decode_raw_data("{}"), {})

    def test_invalid_json_falls_back_to_string(self) -> None:
        self.assertEqual(decode_raw_data("not json {"), "not json {")

    def test_none(self) -> None:
        self.assertIsNone(decode_raw_data(None))


if __name__ == "__main__":
    unittest.main()
