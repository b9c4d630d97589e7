"""Repository pattern for learner records.

Encapsulates all SQLAlchemy queries, keeping aggregation pure.
Returns plain record documents (dicts) to external callers.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from senametrics.db.schema import LearnerRecordRow
from senametrics.models.domain import FIELD_TYPES, LearnerRecord, Predicate, typed_value

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters
# ============================================================================


def _record_to_row(record: LearnerRecord) -> LearnerRecordRow:
    """Convert a record document to a row, copying well-typed fields.

    Integers outside the 64-bit SQL range are left NULL; the document
    keeps them as they were.
    """
    columns = {field: typed_value(record, field) for field in FIELD_TYPES}
    return LearnerRecordRow(
        document_json=json.dumps(dict(record), ensure_ascii=False),
        **columns,
    )


def _row_to_record(row: LearnerRecordRow) -> dict[str, Any]:
    """Convert a row back to its original document."""
    return json.loads(row.document_json)


def _predicate_to_clause(predicate: Predicate) -> ColumnElement[bool]:
    """Translate a domain predicate into a SQL expression.

    NULL columns never satisfy a comparison, matching Predicate.matches()
    for absent or mistyped fields.
    """
    column = getattr(LearnerRecordRow, predicate.field)
    if predicate.op == "eq":
        return column == predicate.value
    if predicate.op == "lt":
        return column < predicate.value
    if predicate.op == "gt":
        return column > predicate.value
    return column.in_(predicate.value)


# ============================================================================
# Learner Record Repository
# ============================================================================


def fetch_all(session: DbSession) -> list[dict[str, Any]]:
    """Get every learner record."""
    rows = session.query(LearnerRecordRow).order_by(LearnerRecordRow.record_id).all()
    return [_row_to_record(r) for r in rows]


def fetch_filtered(session: DbSession, *predicates: Predicate) -> list[dict[str, Any]]:
    """Get learner records matching all predicates."""
    rows = (
        session.query(LearnerRecordRow)
        .filter(*(_predicate_to_clause(p) for p in predicates))
        .order_by(LearnerRecordRow.record_id)
        .all()
    )
    return [_row_to_record(r) for r in rows]


def count(session: DbSession, *predicates: Predicate) -> int:
    """Count learner records matching all predicates (all records if none)."""
    query = session.query(func.count(LearnerRecordRow.record_id))
    if predicates:
        query = query.filter(*(_predicate_to_clause(p) for p in predicates))
    return query.scalar() or 0


def is_empty(session: DbSession) -> bool:
    """Check whether the store holds no records."""
    return session.query(LearnerRecordRow.record_id).first() is None


def insert_records(session: DbSession, records: Iterable[LearnerRecord]) -> int:
    """Add learner records to the session. Returns the number added."""
    rows = [_record_to_row(r) for r in records]
    session.add_all(rows)
    return len(rows)


def commit(session: DbSession) -> None:
    """Commit the current transaction."""
    session.commit()
