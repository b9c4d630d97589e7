"""Shared pytest fixtures for senametrics tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from senametrics.db import repo
from senametrics.db.schema import Base

# Five learners covering well-formed, mistyped and missing fields.
LEARNER_RECORDS = [
    {
        "centro_formacion": "CSGE",
        "programa_formacion": "ADSO",
        "departamento": "Antioquia",
        "instructor_recomendado": "Carlos Ruiz",
        "github": True,
        "nivel_ingles": "B1",
        "certificados": 2,
        "edad": 17,
        "genero": "F",
        "usa_ia": True,
        "ia_para_codificar": True,
        "instructor_usa_ia": True,
        "instructor_ensenia_ia": False,
    },
    {
        "centro_formacion": "CSGE",
        "programa_formacion": "ADSO",
        "departamento": "Antioquia",
        "instructor_recomendado": "Carlos Ruiz",
        "github": False,
        "nivel_ingles": "A2",
        "certificados": 0,
        "edad": 16,
        "genero": "M",
        "usa_ia": True,
        "ia_para_codificar": False,
        "instructor_usa_ia": True,
        "instructor_ensenia_ia": True,
    },
    {
        "centro_formacion": "CSGE",
        "programa_formacion": "Gestion Empresarial",
        "departamento": "Antioquia",
        "instructor_recomendado": "Paula Restrepo",
        "github": True,
        "nivel_ingles": "B2",
        "certificados": 1,
        "edad": 20,
        "genero": "F",
        "usa_ia": False,
        "ia_para_codificar": False,
        "instructor_usa_ia": False,
        "instructor_ensenia_ia": False,
    },
    {
        "centro_formacion": "CGMLTI",
        "programa_formacion": "Redes",
        "departamento": "Cundinamarca",
        "instructor_recomendado": "Jorge Medina",
        "github": "yes",
        "nivel_ingles": "B2",
        "certificados": "3",
        "edad": 15,
        "genero": "NB",
        "usa_ia": True,
        "ia_para_codificar": True,
        "instructor_usa_ia": False,
        "instructor_ensenia_ia": False,
    },
    {
        "programa_formacion": "Redes",
        "nivel_ingles": "B1",
        "edad": 30,
        "genero": "M",
    },
]


@pytest.fixture
def learner_records():
    """Fresh copy of the sample learner records."""
    return [dict(r) for r in LEARNER_RECORDS]


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def seeded_session(session, learner_records):
    """Session over a store holding the sample learner records."""
    repo.insert_records(session, learner_records)
    repo.commit(session)
    return session
