"""Console log formatting for oranda."""

from __future__ import annotations

import contextvars
import enum
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

LOGGER_NAME = "oranda"

_current_prefix: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "oranda_workspace_prefix", default=None
)

_GREEN = "32"
_WHITE = "37"
_YELLOW = "33"
_MAGENTA = "35"


class OutputFormat(enum.Enum):
    """Style of output to produce."""

    HUMAN = "human"
    JSON = "json"


@contextmanager
def workspace_page(prefix: str | None) -> Iterator[None]:
    """Tag log lines emitted inside the block with a workspace member prefix."""
    token = _current_prefix.set(prefix)
    try:
        yield
    finally:
        _current_prefix.reset(token)


class OrandaFormatter(logging.Formatter):
    """Formats log records with oranda's icons, labels and colours."""

    def __init__(self, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def _paint(self, text: str, code: str, bold: bool = True) -> str:
        if not self.color:
            return text
        weight = "1;" if bold else ""
        return f"\x1b[{weight}{code}m{text}\x1b[0m"

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        arrow = self._paint("↪", _WHITE)
        if getattr(record, "success", False):
            line = f"{self._paint('✓', _GREEN)} >o_o< SUCCESS: {self._paint(message, _GREEN)}"
        elif record.levelno == logging.INFO:
            line = f"{arrow} >o_o< INFO: {self._paint(message, _WHITE)}"
        elif record.levelno == logging.WARNING:
            line = f"{self._paint('⚠', _YELLOW)} >o_o< WARNING: {self._paint(message, _YELLOW)}"
        elif record.levelno == logging.DEBUG:
            line = f"{arrow} >o_o< DEBUG: {self._paint(message, _MAGENTA)}"
        else:
            line = f"TRACE: {message}"

        prefix = _current_prefix.get()
        if prefix is not None:
            return f"{self._paint(f'{prefix:>15}', _MAGENTA, bold=False)} {line}"
        return line


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Set up the oranda logger with the custom formatter and return it."""
    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    color = bool(isatty and isatty())

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(target)
    handler.setFormatter(OrandaFormatter(color=color))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger