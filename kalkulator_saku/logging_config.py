"""Logging for the calculator core.

Every module logs under the ``kalkulator_saku.*`` namespace. Nothing is
attached to that logger unless ``setup_logging`` runs, either directly or
through ``configure_from_env`` when ``KALKULATOR_SAKU_LOG_LEVEL`` or
``KALKULATOR_SAKU_LOG_FILE`` is set.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

from .config import LOG_LEVEL

ROOT_LOGGER = "kalkulator_saku"

# Record attributes set through ``extra=`` by log_transition
_CONTEXT_FIELDS = ("action", "before", "after")


class StructuredFormatter(logging.Formatter):
    """One line per record: timestamp, level, logger, message and any calculator context.

    Example:
        2026-01-01T12:00:00 [DEBUG] kalkulator_saku.calculator: transition action=operator before=entering after=operator_pending
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        context = [
            f"{field}={getattr(record, field)}"
            for field in _CONTEXT_FIELDS
            if hasattr(record, field)
        ]
        if context:
            line = f"{line} {' '.join(context)}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = LOG_LEVEL, log_file: Optional[str] = None
) -> logging.Logger:
    """Attach structured handlers to the ``kalkulator_saku`` logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        log_file: Optional path that receives a copy of every record

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

    return logger


def configure_from_env() -> Optional[logging.Logger]:
    """Run ``setup_logging`` if the environment asks for calculator logs.

    Returns:
        The configured logger, or None when neither variable is set
    """
    level = os.getenv("KALKULATOR_SAKU_LOG_LEVEL")
    log_file = os.getenv("KALKULATOR_SAKU_LOG_FILE")
    if not level and not log_file:
        return None
    return setup_logging(level or LOG_LEVEL, log_file)


def get_logger(name: str) -> logging.Logger:
    """Logger for a calculator module, e.g. ``get_logger("display")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def log_transition(logger: logging.Logger, action: str, before, after) -> None:
    """Log one state-machine step at DEBUG, with the states as record context."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    before = getattr(before, "value", before)
    after = getattr(after, "value", after)
    logger.debug("transition", extra={"action": action, "before": before, "after": after})
