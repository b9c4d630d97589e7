"""Learner metrics API endpoints.

GET /metrics/aprendices-por-centro        - Learners per center
GET /metrics/instructores-por-centro      - Recommended instructors per center
GET /metrics/aprendices-centro-programa   - Learners per center and program
GET /metrics/aprendices-por-departamento  - Learners per department
GET /metrics/con-github                   - Learners with GitHub
GET /metrics/ingles-por-centro            - B1/B2 English learners per center
GET /metrics/con-certificados             - Learners with certificates
GET /metrics/menores-edad                 - Minors and gender split
GET /metrics/uso-ia                       - AI usage
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from senametrics.aggregation import summary
from senametrics.api.app import get_db_session
from senametrics.db.repo import DbSession
from senametrics.models.types import AIUsageSummary, CountResult, MinorsBreakdown

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("/aprendices-por-centro", response_model=dict[str, int])
def get_learners_by_center(session: DbSession = Depends(get_db_session)) -> dict[str, int]:
    """Number of learners per training center."""
    return summary.learners_by_center(session)


@router.get("/instructores-por-centro", response_model=dict[str, list[str]])
def get_instructors_by_center(
    session: DbSession = Depends(get_db_session),
) -> dict[str, list[str]]:
    """Distinct recommended instructors per training center."""
    return summary.instructors_by_center(session)


@router.get("/aprendices-centro-programa", response_model=dict[str, dict[str, int]])
def get_learners_by_center_and_program(
    session: DbSession = Depends(get_db_session),
) -> dict[str, dict[str, int]]:
    """Number of learners per training center and program."""
    return summary.learners_by_center_and_program(session)


@router.get("/aprendices-por-departamento", response_model=dict[str, int])
def get_learners_by_department(
    session: DbSession = Depends(get_db_session),
) -> dict[str, int]:
    """Number of learners per department."""
    return summary.learners_by_department(session)


@router.get("/con-github", response_model=CountResult)
def get_learners_with_github(session: DbSession = Depends(get_db_session)) -> CountResult:
    """Number of learners with a GitHub account."""
    return CountResult(count=summary.learners_with_github(session))


@router.get("/ingles-por-centro", response_model=dict[str, int])
def get_english_by_center(session: DbSession = Depends(get_db_session)) -> dict[str, int]:
    """Number of learners with English B1 or B2, per training center."""
    return summary.english_by_center(session)


@router.get("/con-certificados", response_model=CountResult)
def get_learners_with_certificates(
    session: DbSession = Depends(get_db_session),
) -> CountResult:
    """Number of learners holding at least one certificate."""
    return CountResult(count=summary.learners_with_certificates(session))


@router.get("/menores-edad", response_model=MinorsBreakdown)
def get_minors(session: DbSession = Depends(get_db_session)) -> MinorsBreakdown:
    """Learners under 18 with the percentage of girls and boys.

    Percentages are "0.00%" when there are no minors.
    """
    return summary.minors(session)


@router.get("/uso-ia", response_model=AIUsageSummary)
def get_ai_usage(session: DbSession = Depends(get_db_session)) -> AIUsageSummary:
    """AI usage among learners and instructors, relative to all learners."""
    return summary.ai_usage(session)
