"""Logging configuration shared by the API and CLI entry points."""
import logging
import logging.config

from bloodlink.core.config import settings

_configured = False


def setup_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": (level or settings.LOG_LEVEL).upper(),
        },
        "loggers": {
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    })
    _configured = True
