import os
from logging.config import dictConfig
from typing import Any

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def logging_config(level: str | None = None) -> dict[str, Any]:
    """dictConfig schema: one stderr handler on the root logger.

    Level comes from `level`, else SPEECH_LAB_LOG_LEVEL, else INFO. Also
    handed to uvicorn as `log_config` so reload workers get the same setup.
    """
    resolved = (level or os.getenv("SPEECH_LAB_LOG_LEVEL", "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": DEFAULT_LOG_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {
            "handlers": ["default"],
            "level": resolved,
        },
    }


def configure_logging(level: str | None = None) -> None:
    """Send all logs to stderr at SPEECH_LAB_LOG_LEVEL (default INFO)."""
    dictConfig(logging_config(level))
