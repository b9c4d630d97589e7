"""Learner statistics backed by the record store.

Each function reads what its view needs from the repository exactly once
and hands that snapshot to the pure view in aggregation.views. Store
errors propagate unchanged.
"""

from __future__ import annotations

import logging

from senametrics.aggregation import views
from senametrics.db import repo
from senametrics.db.repo import DbSession
from senametrics.models.domain import (
    ENGLISH_B1_B2,
    HAS_CERTIFICATES,
    HAS_GITHUB,
    IS_MINOR,
)
from senametrics.models.types import AIUsageSummary, MinorsBreakdown

logger = logging.getLogger(__name__)


def learners_by_center(session: DbSession) -> dict[str, int]:
    """Count learners per training center."""
    return views.count_by_center(repo.fetch_all(session))


def instructors_by_center(session: DbSession) -> dict[str, list[str]]:
    """Distinct recommended instructors per training center."""
    return views.recommended_instructors_by_center(repo.fetch_all(session))


def learners_by_center_and_program(session: DbSession) -> dict[str, dict[str, int]]:
    """Count learners per training center and program."""
    return views.count_by_center_and_program(repo.fetch_all(session))


def learners_by_department(session: DbSession) -> dict[str, int]:
    """Count learners per department."""
    return views.count_by_department(repo.fetch_all(session))


def learners_with_github(session: DbSession) -> int:
    """Count learners with a GitHub account."""
    return repo.count(session, HAS_GITHUB)


def english_by_center(session: DbSession) -> dict[str, int]:
    """Count B1/B2 English learners per training center."""
    return views.english_level_by_center(repo.fetch_filtered(session, ENGLISH_B1_B2))


def learners_with_certificates(session: DbSession) -> int:
    """Count learners holding at least one certificate."""
    return repo.count(session, HAS_CERTIFICATES)


def minors(session: DbSession) -> MinorsBreakdown:
    """Minors and their gender split."""
    breakdown = views.minors_breakdown(repo.fetch_filtered(session, IS_MINOR))
    logger.debug(f"Minors breakdown over {breakdown.total} records")
    return breakdown


def ai_usage(session: DbSession) -> AIUsageSummary:
    """AI usage among learners and instructors.

    All four figures come from a single read, so the count and the
    percentages always describe the same record set.
    """
    records = repo.fetch_all(session)
    logger.debug(f"AI usage summary over {len(records)} records")
    return views.ai_usage_summary(records)
