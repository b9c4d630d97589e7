"""Learner summary views.

Pure functions - no database access. Each view takes a record set and
returns a JSON-serializable result. Malformed records never raise: a
missing or mistyped field does not match any predicate and groups under
MISSING_KEY.
"""

from __future__ import annotations

from typing import Iterable

from senametrics.core.percent import format_percent
from senametrics.models.domain import (
    AI_FOR_CODING,
    CENTRO_FORMACION,
    DEPARTAMENTO,
    ENGLISH_B1_B2,
    HAS_CERTIFICATES,
    HAS_GITHUB,
    INSTRUCTOR_RECOMENDADO,
    INSTRUCTOR_TEACHES_AI,
    INSTRUCTOR_USES_AI,
    IS_BOY,
    IS_GIRL,
    IS_MINOR,
    PROGRAMA_FORMACION,
    USES_AI,
    LearnerRecord,
    Predicate,
    group_key,
    typed_value,
)
from senametrics.models.types import AIUsageSummary, MinorsBreakdown


def _count_by(records: Iterable[LearnerRecord], field: str) -> dict[str, int]:
    counts: dict[str, int] = {}
    for record in records:
        key = group_key(record, field)
        counts[key] = counts.get(key, 0) + 1
    return counts


def _count_matching(records: Iterable[LearnerRecord], predicate: Predicate) -> int:
    return sum(1 for record in records if predicate.matches(record))


def count_by_center(records: Iterable[LearnerRecord]) -> dict[str, int]:
    """Number of learners per training center."""
    return _count_by(records, CENTRO_FORMACION)


def recommended_instructors_by_center(
    records: Iterable[LearnerRecord],
) -> dict[str, list[str]]:
    """Distinct recommended instructors per training center.

    Instructors are listed in the order they are first seen. Records
    without a usable instructor name still register their center.

    Args:
        records: Learner records.

    Returns:
        Mapping of center to a duplicate-free list of instructor names.
    """
    # dict keys keep first-seen order and drop duplicates
    seen: dict[str, dict[str, None]] = {}
    for record in records:
        instructors = seen.setdefault(group_key(record, CENTRO_FORMACION), {})
        instructor = typed_value(record, INSTRUCTOR_RECOMENDADO)
        if instructor is not None:
            instructors[instructor] = None
    return {center: list(instructors) for center, instructors in seen.items()}


def count_by_center_and_program(
    records: Iterable[LearnerRecord],
) -> dict[str, dict[str, int]]:
    """Number of learners per training center, then per program."""
    counts: dict[str, dict[str, int]] = {}
    for record in records:
        programs = counts.setdefault(group_key(record, CENTRO_FORMACION), {})
        program = group_key(record, PROGRAMA_FORMACION)
        programs[program] = programs.get(program, 0) + 1
    return counts


def count_by_department(records: Iterable[LearnerRecord]) -> dict[str, int]:
    """Number of learners per department."""
    return _count_by(records, DEPARTAMENTO)


def count_with_github(records: Iterable[LearnerRecord]) -> int:
    """Number of learners whose github flag is exactly True."""
    return _count_matching(records, HAS_GITHUB)


def english_level_by_center(records: Iterable[LearnerRecord]) -> dict[str, int]:
    """Number of learners with English level B1 or B2, per training center."""
    return _count_by(
        (record for record in records if ENGLISH_B1_B2.matches(record)),
        CENTRO_FORMACION,
    )


def count_with_certificates(records: Iterable[LearnerRecord]) -> int:
    """Number of learners holding at least one certificate."""
    return _count_matching(records, HAS_CERTIFICATES)


def minors_breakdown(records: Iterable[LearnerRecord]) -> MinorsBreakdown:
    """Learners under 18 and the share of girls and boys among them.

    Genders other than "F" and "M" count toward neither share.

    Args:
        records: Learner records. Adults are filtered out here, so an
            already filtered set is accepted as well.

    Returns:
        MinorsBreakdown. Both percentages are "0.00%" when there are no
        minors.
    """
    minors = [record for record in records if IS_MINOR.matches(record)]
    total = len(minors)
    return MinorsBreakdown(
        total=total,
        percent_girls=format_percent(_count_matching(minors, IS_GIRL), total),
        percent_boys=format_percent(_count_matching(minors, IS_BOY), total),
    )


def ai_usage_summary(records: Iterable[LearnerRecord]) -> AIUsageSummary:
    """AI usage across all learners.

    Every percentage uses the full record set as denominator, not just
    the learners who use AI.

    Args:
        records: Learner records.

    Returns:
        AIUsageSummary. Percentages are "0.00%" for an empty record set.
    """
    snapshot = list(records)
    total = len(snapshot)
    return AIUsageSummary(
        count=_count_matching(snapshot, USES_AI),
        percent_used_for_coding=format_percent(
            _count_matching(snapshot, AI_FOR_CODING), total
        ),
        percent_instructors_use_ai=format_percent(
            _count_matching(snapshot, INSTRUCTOR_USES_AI), total
        ),
        percent_instructors_teach_ai=format_percent(
            _count_matching(snapshot, INSTRUCTOR_TEACHES_AI), total
        ),
    )
