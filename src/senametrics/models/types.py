"""Pydantic models for the senametrics API.

Field names are part of the public HTTP contract.
"""

from pydantic import BaseModel


class CountResult(BaseModel):
    """Number of learners matching a condition."""

    count: int


class MinorsBreakdown(BaseModel):
    """Learners under 18 and their gender split.

    Percentages are "0.00%" when there are no minors.
    """

    total: int
    percent_girls: str
    percent_boys: str


class AIUsageSummary(BaseModel):
    """AI usage among learners and their instructors.

    Percentages are relative to all learners, "0.00%" when there are none.
    """

    count: int
    percent_used_for_coding: str
    percent_instructors_use_ai: str
    percent_instructors_teach_ai: str


class HealthStatus(BaseModel):
    """Health check payload."""

    status: str
