"""Debug logging with an in-app viewer.

Two producers feed one ring buffer shown by the F12 modal:

* ``log`` - structured app events (``log.error("msg", key=value)``), also
  forwarded to Textual's devtools console;
* the standard ``logging`` tree under ``stashboard``, once
  :func:`setup_debug_logging` has attached a :class:`DebugLogHandler`.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any

from textual import log as textual_log

MAX_LOG_LINES = 2000
PACKAGE_LOGGER = "stashboard"


class LogSource(Enum):
    """Which producer wrote the entry."""

    APP = "APP"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    level: str
    message: str
    timestamp: float
    source: LogSource

    def format(self) -> str:
        stamp = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
        return f"{stamp} {self.level:<7} {self.message}"


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


def _render(args: tuple[object, ...], fields: dict[str, Any]) -> str:
    text = " ".join(str(arg) for arg in args)
    if not fields:
        return text
    pairs = " ".join(f"{key}={value!r}" for key, value in fields.items())
    return f"{text} {pairs}" if text else pairs


class StashboardLogger:
    """Callable app logger; ``log(...)`` is ``log.info(...)``."""

    def __call__(self, *args: object, **fields: Any) -> None:
        self.info(*args, **fields)

    def _emit(self, level: str, args: tuple[object, ...], fields: dict[str, Any]) -> None:
        message = _render(args, fields)
        log_buffer.append(LogEntry(level, message, time.time(), LogSource.APP))
        # No-op when no app is running
        textual_log(message)

    def debug(self, *args: object, **fields: Any) -> None:
        self._emit("DEBUG", args, fields)

    def info(self, *args: object, **fields: Any) -> None:
        self._emit("INFO", args, fields)

    def warning(self, *args: object, **fields: Any) -> None:
        self._emit("WARNING", args, fields)

    def error(self, *args: object, **fields: Any) -> None:
        self._emit("ERROR", args, fields)


class DebugLogHandler(logging.Handler):
    """Copies ``logging`` records into the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry(record.levelname, self.format(record), record.created, LogSource.LOGGING)
        except Exception:
            self.handleError(record)
            return
        log_buffer.append(entry)


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Attach the buffer handler to the ``stashboard`` logger once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if any(isinstance(h, DebugLogHandler) for h in package_logger.handlers):
        return

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    log.info("Debug logging initialized - press F12 to view logs")


def clear_log_buffer() -> None:
    log_buffer.clear()


log = StashboardLogger()
