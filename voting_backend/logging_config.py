"""Logging setup for the API process."""

import logging
from typing import Iterable

from voting_backend.database.config.config import settings

_PLACEHOLDER = "[REDACTED]"


class SensitiveDataFilter(logging.Filter):
    """
    Masks configured secret values in a record before any handler formats it.

    Both the rendered message and the formatted traceback are rewritten, since
    database failures are logged with `logger.exception`.
    """

    def __init__(self, sensitive_values: Iterable[str]) -> None:
        super().__init__()
        self._sensitive_values = [value for value in sensitive_values if value]
        self._formatter = logging.Formatter()

    def _redact(self, text: str) -> str:
        for value in self._sensitive_values:
            text = text.replace(value, _PLACEHOLDER)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._redact(record.getMessage())
        record.args = ()
        if record.exc_info and not record.exc_text:
            record.exc_text = self._formatter.formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self._redact(record.exc_text)
        return True


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Parameters
    ----------
    level : str, optional
        Level name overriding `settings.LOG_LEVEL`.
    """
    level_str = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_str, logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
    handler.addFilter(SensitiveDataFilter([settings.SECRET_KEY, settings.DB_PASSWORD or ""]))

    logging.basicConfig(level=log_level, handlers=[handler], force=True)
    logging.getLogger(__name__).info("Logging initialised at level %s", level_str)
