"""Structured JSON logging configuration.

One JSON object per line on stdout, with `severity`, `timestamp` and `logger`
keys so Cloud Logging picks up levels without a custom parser.

Usage:
    from cultural_signals.logging_config import configure_logging
    configure_logging(settings.log_level)
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "cultural-signals",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
    "loggers": {
        # Socket Mode logs every ping/pong at DEBUG/INFO
        "slack_sdk.socket_mode": {"level": "WARNING"},
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the root logger at ``level``.

    Called once from the FastAPI lifespan, before any client is built.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
