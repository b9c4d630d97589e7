"""One-time loading of the learner dataset.

The store is seeded only while it is empty, so restarts never duplicate
records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from senametrics.db import repo
from senametrics.db.repo import DbSession
from senametrics.errors import DatasetError

logger = logging.getLogger(__name__)


def load_dataset(data_path: Path) -> list[dict[str, Any]]:
    """Read learner records from a JSON file.

    Args:
        data_path: File holding a JSON array of objects.

    Returns:
        The records, unvalidated beyond being objects.

    Raises:
        DatasetError: If the file is missing, unparsable, or not an array
            of objects.
    """
    try:
        with open(data_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(f"Dataset not found: {data_path}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset is not valid JSON: {data_path}: {e}") from e

    if not isinstance(data, list):
        raise DatasetError(f"Dataset must be a JSON array: {data_path}")

    bad = [i for i, record in enumerate(data) if not isinstance(record, dict)]
    if bad:
        raise DatasetError(f"Dataset entries must be objects, offending index {bad[0]}")

    return data


def seed_if_empty(session: DbSession, data_path: Path) -> int:
    """Load the dataset into the store unless it already has records.

    Args:
        session: Database session.
        data_path: JSON dataset to load.

    Returns:
        Number of records inserted, 0 when the store was not empty.
    """
    if not repo.is_empty(session):
        logger.info("Record store already populated, skipping seed")
        return 0

    records = load_dataset(data_path)
    inserted = repo.insert_records(session, records)
    repo.commit(session)

    logger.info(f"Seeded {inserted} learner records from {data_path}")
    return inserted
