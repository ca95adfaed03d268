"""Logging setup for applications that embed recipescale.

Library modules only call ``get_logger``. Records emitted while a
``LoggingContext`` is active carry the recipe being scaled as the
``recipe_id`` attribute, which both formatters render.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from recipescale.config import get_settings

recipe_id_ctx: ContextVar[str | None] = ContextVar("recipe_id", default=None)


class StructuredJsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if recipe_id := getattr(record, "recipe_id", None):
            log_data["recipe_id"] = recipe_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


class ContextualFormatter(logging.Formatter):
    """``timestamp | LEVEL | logger [recipe=...] | message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        recipe_id = getattr(record, "recipe_id", None)
        context_str = f" [recipe={recipe_id}]" if recipe_id else ""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")

        formatted = (
            f"{timestamp} | {record.levelname.ljust(8)} | "
            f"{record.name}{context_str} | {record.getMessage()}"
        )
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that tags records with the active recipe."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})
        if recipe_id := recipe_id_ctx.get():
            extra["recipe_id"] = recipe_id
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure root logging.

    Args:
        log_level: Minimum log level. Defaults to the LOG_LEVEL setting.
        json_format: Use JSON format for logs. If None, use the LOG_FORMAT setting.
        log_file: Optional file path to write logs to.
    """
    settings = get_settings()

    if json_format is None:
        json_format = settings.log_format.lower() == "json"

    level_str = (log_level or settings.log_level).upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter: logging.Formatter = (
        StructuredJsonFormatter() if json_format else ContextualFormatter()
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        root_logger.addHandler(handler)

    logging.getLogger("recipescale").setLevel(level)

    get_logger(__name__).info(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


class LoggingContext:
    """Context manager that tags log records with a recipe id."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        self._token: Any = None

    def __enter__(self) -> "LoggingContext":
        self._token = recipe_id_ctx.set(self.recipe_id)
        return self

    def __exit__(self, *args: Any) -> None:
        recipe_id_ctx.reset(self._token)
        self._token = None
