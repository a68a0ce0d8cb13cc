import logging
import sys
from typing import Optional

from loguru import logger

from assistants_runs import settings


class InterceptHandler(logging.Handler):
    """Hands stdlib records to loguru, keeping the logger name and call site of the record."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        def call_site(loguru_record):
            loguru_record.update(name=record.name, function=record.funcName, line=record.lineno)

        logger.patch(call_site).opt(exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: Optional[str] = None, json_logging: Optional[bool] = None) -> None:
    """Send stdlib logging through loguru.

    Defaults come from ``settings``; JSON output is on unless DISABLE_JSON_LOGGING is set.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if json_logging is None:
        json_logging = not settings.DISABLE_JSON_LOGGING

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("assistants_runs").setLevel(level)

    logger.configure(handlers=[{"sink": sys.stdout, "serialize": json_logging, "level": level}])
