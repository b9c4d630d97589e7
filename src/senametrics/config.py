"""Environment-driven settings.

SENAMETRICS_DB_PATH       SQLite file backing the record store
SENAMETRICS_DATA_FILE     JSON array seeded into an empty store
SENAMETRICS_CORS_ORIGINS  Comma-separated origins allowed by CORS
SENAMETRICS_HOST          Interface the server binds to
SENAMETRICS_PORT          Port the server listens on
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DB_PATH = Path("data/senametrics.db")
DEFAULT_DATA_FILE = Path("data/data.json")
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    db_path: Path = DEFAULT_DB_PATH
    data_file: Path = DEFAULT_DATA_FILE
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""
    origins = os.environ.get("SENAMETRICS_CORS_ORIGINS")
    return Settings(
        db_path=Path(os.environ.get("SENAMETRICS_DB_PATH", str(DEFAULT_DB_PATH))),
        data_file=Path(os.environ.get("SENAMETRICS_DATA_FILE", str(DEFAULT_DATA_FILE))),
        cors_origins=(
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else list(DEFAULT_CORS_ORIGINS)
        ),
        host=os.environ.get("SENAMETRICS_HOST", DEFAULT_HOST),
        port=int(os.environ.get("SENAMETRICS_PORT", str(DEFAULT_PORT))),
    )
