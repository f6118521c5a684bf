# checkin_service/logging_conf.py
from __future__ import annotations

import logging.config
from typing import Any, Dict, Optional

FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

# Third-party loggers that are noisy at INFO
QUIET = ("pymongo", "motor", "aio_pika", "aiormq")


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    loggers: Dict[str, Any] = {
        "": {"handlers": ["console"], "level": "INFO"},
        "checkin_service": {"handlers": ["console"], "level": level.upper(), "propagate": False},
    }
    for name in ("uvicorn", "uvicorn.error"):
        loggers[name] = {"handlers": ["uvicorn"], "level": "INFO", "propagate": False}
    # request lines come from checkin_service.access instead
    loggers["uvicorn.access"] = {"handlers": ["uvicorn"], "level": "WARNING", "propagate": False}
    for name in QUIET:
        loggers[name] = {"handlers": ["console"], "level": "WARNING", "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": FORMAT}},
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "plain", "level": "DEBUG"},
            "uvicorn": {"class": "logging.StreamHandler", "formatter": "plain", "level": "INFO"},
        },
        "loggers": loggers,
    }


def setup_logging(level: Optional[str] = None) -> None:
    """Apply the service logging config; `level` only affects checkin_service.* loggers."""
    logging.config.dictConfig(build_logging_config(level or "INFO"))
