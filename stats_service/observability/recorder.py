"""Recording of computed results.

Handlers depend on the :class:`Recorder` protocol through :func:`get_recorder`,
so tests can swap in their own implementation via ``app.dependency_overrides``.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from stats_service import config

__all__: list[str] = [
    "Recorder",
    "LogRecorder",
    "FileRecorder",
    "get_recorder",
]

RECORDS_LOGGER = "stats_service.records"


class Recorder(Protocol):
    def record(self, content: str) -> None: ...


class LogRecorder:
    """Writes each record to the ``stats_service.records`` logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(RECORDS_LOGGER)

    def record(self, content: str) -> None:
        self.logger.info(content)


class FileRecorder:
    """Appends timestamped records to a file.

    Each entry is the ISO-8601 UTC timestamp, the content, and a blank line.
    Write failures are logged and re-raised.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def record(self, content: str) -> None:
        entry = f"{datetime.now(timezone.utc).isoformat()}\n{content}\n\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(entry)
        except OSError:
            logging.getLogger(__name__).exception("Couldn't write %s", self.path)
            raise


def get_recorder() -> Recorder:
    """FastAPI dependency returning the configured recorder."""
    if config.RECORD_FILE:
        return FileRecorder(config.RECORD_FILE)
    return LogRecorder()
