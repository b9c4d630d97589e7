"""Exceptions raised by senametrics.

Malformed learner records are never an error: aggregation treats them as
non-matching. These exceptions cover configuration the service cannot work
around.
"""


class SenametricsError(Exception):
    """Base class for senametrics errors."""


class DatasetError(SenametricsError):
    """Seed dataset is missing or is not a JSON array of objects."""


class UnsupportedPredicateError(SenametricsError, ValueError):
    """Predicate names an unknown field, operator or mistyped value."""
