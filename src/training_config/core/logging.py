"""Logging utilities with basic structured logging support."""

from __future__ import annotations

import datetime as dt
import json
import logging
from logging import Logger
from pathlib import Path
from typing import Any, Optional

_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def utc_timestamp() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utc_timestamp(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if hasattr(record, "extra_context"):
            payload.update(getattr(record, "extra_context"))
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", log_dir: Optional[str | Path] = None, *, json_logs: bool = False) -> None:
    logging.captureWarnings(True)
    logging.root.handlers = []
    logging.root.setLevel(level.upper())
    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    logging.root.addHandler(handler)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Path(log_dir) / "training_config.log")
        file_handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        logging.root.addHandler(file_handler)


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)


def log_with_context(logger: Logger, level: str, message: str, *, extra: Optional[dict[str, Any]] = None) -> None:
    extra_context = {"extra_context": extra or {}}
    logger.log(getattr(logging, level.upper()), message, extra=extra_context)
