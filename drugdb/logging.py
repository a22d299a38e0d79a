"""Logging helpers for drugdb.

Modules get their logger with ``logger = setup_logging()`` inside the
function that logs. Messages that are Pydantic models (a `Drug`, a
`LoadResult`, the config) are logged as indented JSON; dicts and lists are
pretty-printed.
"""

import inspect
import logging
from pprint import pformat
from typing import Any

from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s - %(pathname)s:%(lineno)d - %(levelname)s - %(message)s"


class PprintLogger:
    """A logger wrapper that adds pprint support to standard logging methods."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _format_message(self, msg: Any, pprint: bool = True) -> str:
        """Format a message, optionally using pprint.

        Strings pass through untouched. Pydantic models (drugs, load results,
        config) are rendered with model_dump_json() when pprint=True, other
        objects go through pformat.
        """
        if not pprint or isinstance(msg, str):
            return str(msg)

        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=2)

        return pformat(msg, width=120, depth=None)

    def debug(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        """Log a debug message with optional pprint formatting."""
        self._logger.debug(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        """Log an info message with optional pprint formatting."""
        self._logger.info(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def warning(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        """Log a warning message with optional pprint formatting."""
        self._logger.warning(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def error(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        """Log an error message with optional pprint formatting."""
        self._logger.error(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def exception(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        """Log an exception message with optional pprint formatting."""
        self._logger.exception(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def __getattr__(self, name: str) -> Any:
        """Delegate any other attributes to the underlying logger."""
        return getattr(self._logger, name)


def setup_logging(level: int = logging.INFO, name: str | None = None) -> PprintLogger:
    """Set up logging and return a PprintLogger instance.

    The logger is named after the calling module unless ``name`` is given.
    ``level`` applies only while the logger has no level of its own; a level
    set earlier, by a previous call or by the application, is left alone.
    """
    if name is None:
        frame = inspect.currentframe().f_back  # type: ignore[union-attr]
        name = frame.f_globals.get("__name__", "drugdb")  # type: ignore[union-attr]
    logger = logging.getLogger(name)
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return PprintLogger(logger)
