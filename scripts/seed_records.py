#!/usr/bin/env python3
"""Seed the learner record store from a JSON dataset.

Usage:
    python scripts/seed_records.py [DATA_FILE] [DB_PATH]

Defaults come from SENAMETRICS_DATA_FILE and SENAMETRICS_DB_PATH. The
store is only seeded when it is empty.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from senametrics.config import load_settings  # noqa: E402
from senametrics.db.seed import seed_if_empty  # noqa: E402
from senametrics.db.session import get_db_session, init_db  # noqa: E402
from senametrics.errors import DatasetError  # noqa: E402


def main(argv: list[str]) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings()
    data_path = Path(argv[0]) if len(argv) > 0 else settings.data_file
    db_path = Path(argv[1]) if len(argv) > 1 else settings.db_path

    init_db(db_path)
    try:
        with get_db_session(db_path) as session:
            inserted = seed_if_empty(session, data_path)
    except DatasetError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Inserted {inserted} records into {db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
