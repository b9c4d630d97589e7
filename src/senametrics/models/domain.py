"""Domain values for learner records.

Learner records are plain mappings loaded from JSON. No field is
guaranteed to be present, and values may carry the wrong type. Every
read goes through typed_value(), which only returns a value when it has
the type declared in FIELD_TYPES.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping

from senametrics.errors import UnsupportedPredicateError

LearnerRecord = Mapping[str, Any]

# ============================================================================
# Fields
# ============================================================================

CENTRO_FORMACION = "centro_formacion"
INSTRUCTOR_RECOMENDADO = "instructor_recomendado"
PROGRAMA_FORMACION = "programa_formacion"
DEPARTAMENTO = "departamento"
GITHUB = "github"
NIVEL_INGLES = "nivel_ingles"
CERTIFICADOS = "certificados"
EDAD = "edad"
GENERO = "genero"
USA_IA = "usa_ia"
IA_PARA_CODIFICAR = "ia_para_codificar"
INSTRUCTOR_USA_IA = "instructor_usa_ia"
INSTRUCTOR_ENSENIA_IA = "instructor_ensenia_ia"

FIELD_TYPES: dict[str, type] = {
    CENTRO_FORMACION: str,
    INSTRUCTOR_RECOMENDADO: str,
    PROGRAMA_FORMACION: str,
    DEPARTAMENTO: str,
    GITHUB: bool,
    NIVEL_INGLES: str,
    CERTIFICADOS: int,
    EDAD: int,
    GENERO: str,
    USA_IA: bool,
    IA_PARA_CODIFICAR: bool,
    INSTRUCTOR_USA_IA: bool,
    INSTRUCTOR_ENSENIA_IA: bool,
}

# Grouping key for records whose key field is absent or not a string.
# The string is reserved: a record whose key literally equals it is
# counted in the same bucket.
MISSING_KEY = "__missing__"

# Range of a signed 64-bit SQL INTEGER
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def _has_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int; a boolean is never a valid count or age
    if expected is int:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and INT_MIN <= value <= INT_MAX
        )
    return isinstance(value, expected)


def typed_value(record: LearnerRecord, field: str) -> Any | None:
    """Return record[field] if present with its declared type, else None."""
    value = record.get(field)
    if value is None or not _has_type(value, FIELD_TYPES[field]):
        return None
    return value


def group_key(record: LearnerRecord, field: str) -> str:
    """Return the grouping key for a record, MISSING_KEY when unusable."""
    value = typed_value(record, field)
    return MISSING_KEY if value is None else value


# ============================================================================
# Predicates
# ============================================================================

PredicateOp = Literal["eq", "lt", "gt", "in"]

_ORDERED_TYPES = (int,)


@dataclass(frozen=True)
class Predicate:
    """A single condition over one record field.

    Evaluated in memory with matches(), and translated to SQL by the
    repository. Both paths reject values of the wrong type, so a record
    with github="yes" never matches Predicate(GITHUB, "eq", True).
    """

    field: str
    op: PredicateOp
    value: Any

    def __post_init__(self) -> None:
        if self.field not in FIELD_TYPES:
            raise UnsupportedPredicateError(f"Unknown field: {self.field}")
        expected = FIELD_TYPES[self.field]

        if self.op == "in":
            values = tuple(self.value)
            if not all(_has_type(v, expected) for v in values):
                raise UnsupportedPredicateError(
                    f"Values for {self.field} must be {expected.__name__}"
                )
            object.__setattr__(self, "value", values)
        elif self.op in ("lt", "gt"):
            if expected not in _ORDERED_TYPES or not _has_type(self.value, expected):
                raise UnsupportedPredicateError(
                    f"Operator {self.op} not supported for {self.field}"
                )
        elif self.op == "eq":
            if not _has_type(self.value, expected):
                raise UnsupportedPredicateError(
                    f"Value for {self.field} must be {expected.__name__}"
                )
        else:
            raise UnsupportedPredicateError(f"Unknown operator: {self.op}")

    def matches(self, record: LearnerRecord) -> bool:
        """Check whether a record satisfies this predicate."""
        value = typed_value(record, self.field)
        if value is None:
            return False
        if self.op == "eq":
            return value == self.value
        if self.op == "lt":
            return value < self.value
        if self.op == "gt":
            return value > self.value
        return value in self.value


# Predicates behind the filtered and counted views
HAS_GITHUB = Predicate(GITHUB, "eq", True)
ENGLISH_B1_B2 = Predicate(NIVEL_INGLES, "in", ("B1", "B2"))
HAS_CERTIFICATES = Predicate(CERTIFICADOS, "gt", 0)
IS_MINOR = Predicate(EDAD, "lt", 18)
IS_GIRL = Predicate(GENERO, "eq", "F")
IS_BOY = Predicate(GENERO, "eq", "M")
USES_AI = Predicate(USA_IA, "eq", True)
AI_FOR_CODING = Predicate(IA_PARA_CODIFICAR, "eq", True)
INSTRUCTOR_USES_AI = Predicate(INSTRUCTOR_USA_IA, "eq", True)
INSTRUCTOR_TEACHES_AI = Predicate(INSTRUCTOR_ENSENIA_IA, "eq", True)
