"""Serve the catalog viewer.

    python -m carviewer.run --port 8080
    python -m carviewer.run --clear   # wipe learned preferences first
"""
from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from .preferences.config import DEFAULT_PREFERENCE_CONFIG
from .preferences.store import PreferenceStore

logger = logging.getLogger("carviewer")


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO),
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Car catalog viewer")
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--clear", action="store_true", help="Clear the preference file before serving")
    args = parser.parse_args(argv)

    configure_logging()

    if args.clear:
        PreferenceStore.clear_file(DEFAULT_PREFERENCE_CONFIG.path)
        logger.info("Cleared preference file %s", DEFAULT_PREFERENCE_CONFIG.path)

    logger.info("Server is running on http://%s:%d", args.host, args.port)
    uvicorn.run("carviewer.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
