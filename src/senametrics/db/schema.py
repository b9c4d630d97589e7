"""Database schema for senametrics.

Each learner record keeps its original JSON document. Fields used in
predicates are also copied into typed, nullable columns so filters run
in SQL. A column is NULL when the field is absent or has the wrong type.
"""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class LearnerRecordRow(Base):
    """One learner ("aprendiz") record."""

    __tablename__ = "learner_records"

    record_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    document_json: Mapped[str] = mapped_column(Text, nullable=False)

    centro_formacion: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    instructor_recomendado: Mapped[str | None] = mapped_column(String(255), nullable=True)
    programa_formacion: Mapped[str | None] = mapped_column(String(255), nullable=True)
    departamento: Mapped[str | None] = mapped_column(String(255), nullable=True)
    github: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    nivel_ingles: Mapped[str | None] = mapped_column(String(8), nullable=True)
    certificados: Mapped[int | None] = mapped_column(Integer, nullable=True)
    edad: Mapped[int | None] = mapped_column(Integer, nullable=True)
    genero: Mapped[str | None] = mapped_column(String(16), nullable=True)
    usa_ia: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    ia_para_codificar: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    instructor_usa_ia: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    instructor_ensenia_ia: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
