"""Leveled logging of one line per message, with time, thread id and call site."""

from __future__ import annotations

import inspect
import sys
import threading
from enum import IntEnum
from typing import Optional, TextIO

from .current_thread import current_tid
from .log_stream import LogStream
from .timestamp import format_time

_MAX_PART = 127


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FAIL = 5
    SYSERR = 6

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    LogLevel.TRACE: "TRACE ",
    LogLevel.DEBUG: "DEBUG ",
    LogLevel.INFO: "INFO  ",
    LogLevel.WARN: "WARN  ",
    LogLevel.ERROR: "ERROR ",
    LogLevel.FAIL: "FAIL  ",
    LogLevel.SYSERR: "SYSERR",
}

_state_lock = threading.Lock()
_log_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the threshold below which TRACE, DEBUG and INFO messages are dropped."""
    global _log_level
    with _state_lock:
        _log_level = LogLevel(level)


def get_log_level() -> LogLevel:
    with _state_lock:
        return _log_level


def _label(level: int) -> str:
    try:
        return LogLevel(level).label
    except ValueError:
        return "NOTDEF"


class Logger:
    """One message: collect values in ``stream``, then ``finish`` to write the line."""

    def __init__(
        self,
        level: int,
        src_file: str,
        line: int,
        func: str,
        out: Optional[TextIO] = None,
    ) -> None:
        self.level = level
        self.src_file = src_file
        self.line = line
        self.func = func
        self.stream = LogStream()
        self._out = out
        self._finished = False

    def write(self, data: str) -> str:
        """Write ``data`` framed with header and call site; return the full line."""
        header = f"{format_time()} {current_tid()} {_label(self.level)} "[:_MAX_PART]
        trailer = f" - {self.src_file}:{self.line} {self.func}()\n"[:_MAX_PART]
        text = header + data + trailer
        out = self._out if self._out is not None else sys.stdout
        out.write(text)
        return text

    def finish(self) -> Optional[str]:
        """Write the collected message once; later calls return None."""
        if self._finished:
            return None
        self._finished = True
        return self.write(self.stream.getvalue())

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()


def log(level: LogLevel, *args: object, out: Optional[TextIO] = None) -> Optional[str]:
    """Log ``args`` at ``level`` from the caller's site; return the line or None if dropped."""
    level = LogLevel(level)
    if level <= LogLevel.INFO and get_log_level() > level:
        return None
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is not None:
            src_file = caller.f_code.co_filename
            line = caller.f_lineno
            func = caller.f_code.co_name
        else:
            src_file, line, func = "?", 0, "?"
    finally:
        del frame, caller
    logger = Logger(level, src_file, line, func, out=out)
    for arg in args:
        logger.stream << arg
    return logger.finish()