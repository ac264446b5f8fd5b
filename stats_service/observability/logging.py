"""Standard Python logging configuration.

Service logs go to stdout with gunicorn-like brackets. Computed results
written by :class:`~stats_service.observability.recorder.LogRecorder` get
their own handler so each record stays one timestamped line of JSON.
"""
from __future__ import annotations

import logging.config
from typing import Any

from stats_service.config import LOG_LEVEL
from stats_service.observability.recorder import RECORDS_LOGGER

DATEFMT = '%Y-%m-%d %H:%M:%S %z'
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def logging_config(level: int = LOG_LEVEL) -> dict[str, Any]:
    """dictConfig schema shared by :func:`setup_logging` and uvicorn's ``log_config``."""
    # uvicorn loggers lose their own handlers and propagate to root
    loggers: dict[str, Any] = {
        name: {"handlers": [], "propagate": True, "level": level}
        for name in UVICORN_LOGGERS
    }
    loggers[RECORDS_LOGGER] = {"handlers": ["records"], "propagate": False, "level": level}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": '[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
                "datefmt": DATEFMT,
            },
            "record": {
                "format": '[%(asctime)s] record %(message)s',
                "datefmt": DATEFMT,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
            },
            "records": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "record",
            },
        },
        "root": {"handlers": ["stdout"], "level": level},
        "loggers": loggers,
    }


def setup_logging(level: int = LOG_LEVEL) -> None:
    """Apply :func:`logging_config`.

    Call **exactly once** at app startup; later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return
    logging.config.dictConfig(logging_config(level))
    setup_logging._configured = True  # type: ignore[attr-defined]
