"""Run the senametrics API server.

Usage:
    python -m senametrics
"""

from __future__ import annotations

import logging

import uvicorn

from senametrics.config import load_settings


def main() -> None:
    """Serve the default application with uvicorn."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings()
    uvicorn.run("senametrics.api.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
