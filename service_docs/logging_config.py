# service_docs/logging_config.py
"""
Logging configuration for the documentation server.

Records below ERROR go to stdout, ERROR and above to stderr. Liveness checks
are dropped from the access log.
"""

import logging
import os
from typing import Optional

HEALTH_PATH = "/health"


class LevelRangeFilter(logging.Filter):
    """Pass records whose level lies in ``[at_least, below)``."""

    def __init__(self, at_least: int = logging.NOTSET, below: Optional[int] = None):
        super().__init__()
        self.at_least = at_least
        self.below = below

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.at_least:
            return False
        return self.below is None or record.levelno < self.below


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access records for the liveness endpoint."""

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn.access args: (client_addr, method, full_path, http_version, status)
        args = record.args
        if isinstance(args, tuple) and len(args) >= 3:
            path = str(args[2]).split("?", 1)[0]
            return path != HEALTH_PATH
        return True


def _stream_handler(formatter: str, stream: str, *filters: str) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": formatter,
        "stream": f"ext://sys.{stream}",
        "filters": list(filters),
    }


def get_uvicorn_log_config(log_level: Optional[str] = None) -> dict:
    """Get a uvicorn-compatible logging configuration dict.

    Pass it to ``uvicorn.run(log_config=...)``. The ``service_docs`` loggers
    share the stdout/stderr handlers with uvicorn.
    """
    level = (log_level or os.getenv("LOG_LEVEL", "info")).upper()
    split_streams = ["stdout", "stderr"]

    def logger(*handlers: str) -> dict:
        return {"handlers": list(handlers), "level": level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "below_error": {"()": LevelRangeFilter, "below": logging.ERROR},
            "error_and_above": {"()": LevelRangeFilter, "at_least": logging.ERROR},
            "skip_health": {"()": HealthCheckFilter},
        },
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(name)s: %(message)s",
                "use_colors": None,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s',
            },
        },
        "handlers": {
            "stdout": _stream_handler("default", "stdout", "below_error"),
            "stderr": _stream_handler("default", "stderr", "error_and_above"),
            "access": _stream_handler("access", "stdout", "skip_health"),
        },
        "loggers": {
            "service_docs": logger(*split_streams),
            "uvicorn": logger(*split_streams),
            "uvicorn.error": logger(*split_streams),
            "uvicorn.access": logger("access"),
        },
    }
