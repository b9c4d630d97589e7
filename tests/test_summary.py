"""Tests for store-backed learner statistics."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from senametrics.aggregation import summary, views


class TestSummaryMatchesViews:
    """Each summary equals its pure view over the same records."""

    def test_learners_by_center(self, seeded_session, learner_records):
        assert summary.learners_by_center(seeded_session) == views.count_by_center(
            learner_records
        )

    def test_instructors_by_center(self, seeded_session, learner_records):
        assert summary.instructors_by_center(
            seeded_session
        ) == views.recommended_instructors_by_center(learner_records)

    def test_learners_by_center_and_program(self, seeded_session, learner_records):
        assert summary.learners_by_center_and_program(
            seeded_session
        ) == views.count_by_center_and_program(learner_records)

    def test_learners_by_department(self, seeded_session, learner_records):
        assert summary.learners_by_department(seeded_session) == views.count_by_department(
            learner_records
        )

    def test_learners_with_github(self, seeded_session, learner_records):
        assert summary.learners_with_github(seeded_session) == views.count_with_github(
            learner_records
        )

    def test_english_by_center(self, seeded_session, learner_records):
        assert summary.english_by_center(seeded_session) == views.english_level_by_center(
            learner_records
        )

    def test_learners_with_certificates(self, seeded_session, learner_records):
        assert summary.learners_with_certificates(
            seeded_session
        ) == views.count_with_certificates(learner_records)

    def test_minors(self, seeded_session, learner_records):
        assert summary.minors(seeded_session) == views.minors_breakdown(learner_records)

    def test_ai_usage(self, seeded_session, learner_records):
        assert summary.ai_usage(seeded_session) == views.ai_usage_summary(learner_records)


class TestEmptyStore:
    """Test every summary over an empty store."""

    def test_counts_are_zero(self, session):
        assert summary.learners_by_center(session) == {}
        assert summary.learners_with_github(session) == 0
        assert summary.learners_with_certificates(session) == 0

    def test_percentages_use_sentinel(self, session):
        assert summary.minors(session).percent_girls == "0.00%"
        assert summary.ai_usage(session).percent_instructors_teach_ai == "0.00%"


class TestStoreFailure:
    """Store errors propagate unchanged."""

    def test_fetch_error_propagates(self, session):
        error = OperationalError("SELECT", {}, Exception("database is locked"))
        with patch("senametrics.db.repo.fetch_all", side_effect=error):
            with pytest.raises(OperationalError):
                summary.ai_usage(session)

    def test_count_error_propagates(self, session):
        error = OperationalError("SELECT", {}, Exception("database is locked"))
        with patch("senametrics.db.repo.count", side_effect=error):
            with pytest.raises(OperationalError):
                summary.learners_with_github(session)
