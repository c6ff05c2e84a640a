"""Logging levels, shared sinks and logger creation."""

from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import Callable

DEFAULT_FORMAT = (
    "%(asctime)s.%(msecs)03d %(level_label)s [%(name)s] [thread-%(thread)d] %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(IntEnum):
    """Severity levels, serialised as their integer values."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERR = 4
    CRITICAL = 5
    OFF = 6

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        """Parse a level name, case-insensitively; raise ValueError if unknown."""
        try:
            return _NAMES[text.strip().lower()]
        except KeyError:
            raise ValueError(f"invalid log level: {text!r}") from None


_LABELS = {
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERR: "error",
    LogLevel.CRITICAL: "critical",
    LogLevel.OFF: "off",
}

_LOGGING_LEVELS = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.OFF: logging.CRITICAL + 10,
}

_NAMES = {label: level for level, label in _LABELS.items()}
_NAMES.update({"warn": LogLevel.WARN, "err": LogLevel.ERR})


def _level_from_number(levelno: int) -> LogLevel:
    for level in reversed(LogLevel):
        if level.logging_level <= levelno:
            return level
    return LogLevel.TRACE


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.level_label = _level_from_number(record.levelno).label
        return super().format(record)


def _default_formatter() -> logging.Formatter:
    return _Formatter(DEFAULT_FORMAT, DATE_FORMAT)


class CallbackHandler(logging.Handler):
    """Handler that passes each record's level and message to a callable."""

    def __init__(self, callback: Callable[[LogLevel, str], None], level: int = logging.NOTSET):
        super().__init__(level)
        self.callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.callback(_level_from_number(record.levelno), record.getMessage())
        except Exception:
            self.handleError(record)


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_default_formatter())
    return handler


_sinks: list[logging.Handler] = [_stdout_handler()]


def get_logger_sinks() -> list[logging.Handler]:
    """Return the shared list of sinks given to newly created loggers."""
    return _sinks


def clear_sinks() -> None:
    _sinks.clear()


def add_logger_sink(handler: logging.Handler) -> logging.Handler:
    _sinks.append(handler)
    return handler


def add_stdout_sink() -> logging.Handler:
    return add_logger_sink(_stdout_handler())


def add_file_sink(file_name: str, truncate: bool = False) -> logging.Handler:
    handler = logging.FileHandler(file_name, mode="w" if truncate else "a", encoding="utf-8")
    handler.setFormatter(_default_formatter())
    return add_logger_sink(handler)


def add_callback_sink(callback: Callable[[LogLevel, str], None]) -> logging.Handler:
    return add_logger_sink(CallbackHandler(callback))


def create_logger(name: str) -> logging.Logger:
    """Create an independent logger writing to the current sinks."""
    logger = logging.Logger(name, LogLevel.INFO.logging_level)
    logger.propagate = False
    for handler in _sinks:
        logger.addHandler(handler)
    return logger