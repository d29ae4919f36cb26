"""Lightweight logging wrapper with bound request fields."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Callable, Literal, Protocol

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

# Bound fields render in this order, unknown keys after them.
FIELDS_ORDER = ("MODULE", "METHOD", "URL")


class LoggerProtocol(Protocol):
    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


LOG_LEVEL_PRIORITY: dict[LogLevel, int] = {
    "trace": 0,
    "debug": 1,
    "info": 2,
    "warn": 3,
    "error": 4,
}


class BoundLogger:
    """Wraps a logging.Logger (or duck-typed object) with GoCD's log levels.

    Fields attached with :meth:`bind` are rendered as a ``[VALUE]`` prefix on
    every message, e.g. ``[PACKAGES] [GET] [https://ci/go/api/admin/packages]``.
    """

    def __init__(
        self,
        logger: Any | None = None,
        *,
        level: LogLevel = "info",
        fields: dict[str, str] | None = None,
        report_caller: bool = False,
    ) -> None:
        self._logger = logger or _default_logger()
        self._level = level
        # Level restored when debug mode is switched off again.
        self._base_level = level
        self._fields = dict(fields or {})
        self._report_caller = report_caller

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def fields(self) -> dict[str, str]:
        return dict(self._fields)

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("trace"):
            self._log(TRACE_LEVEL, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("debug"):
            self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("info"):
            self._log(logging.INFO, msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("warn"):
            self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self._enabled("error"):
            self._log(logging.ERROR, msg, *args, **kwargs)

    def child(self, name: str) -> "BoundLogger":
        """Create a child logger anchored to the same Python logger."""
        if isinstance(self._logger, logging.Logger):
            base = self._logger.getChild(name)
        else:
            base = self._logger
        return self._derive(base, self._fields)

    def bind(self, **fields: Any) -> "BoundLogger":
        """Return a copy of this logger carrying extra fields."""
        merged = dict(self._fields)
        merged.update({key.upper(): str(value) for key, value in fields.items()})
        return self._derive(self._logger, merged)

    def set_debug(self, enabled: bool = True) -> None:
        self._level = "debug" if enabled else self._base_level
        self._report_caller = enabled

    def _derive(self, base: Any, fields: dict[str, str]) -> "BoundLogger":
        derived = BoundLogger(base, level=self._level, fields=fields, report_caller=self._report_caller)
        derived._base_level = self._base_level
        return derived

    def _enabled(self, level: LogLevel) -> bool:
        return LOG_LEVEL_PRIORITY[level] >= LOG_LEVEL_PRIORITY[self._level]

    def _prefix(self) -> str:
        ordered = [key for key in FIELDS_ORDER if key in self._fields]
        ordered += [key for key in self._fields if key not in FIELDS_ORDER]
        parts = [f"[{self._fields[key]}]" for key in ordered]
        if self._report_caller:
            # 0: _prefix, 1: _log, 2: level method, 3: caller
            frame = sys._getframe(3)
            parts.insert(0, f"[{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}]")
        return " ".join(parts)

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        try:
            prefix = self._prefix()
            if prefix:
                if args:
                    prefix = prefix.replace("%", "%%")
                msg = f"{prefix} {msg}"

            if hasattr(self._logger, "log"):
                self._logger.log(level, msg, *args, **kwargs)
                return

            # Fall back to direct method invocation (duck typing)
            method_map: dict[int, Callable[..., Any]] = {
                TRACE_LEVEL: getattr(self._logger, "trace", None),
                logging.DEBUG: getattr(self._logger, "debug", None),
                logging.INFO: getattr(self._logger, "info", None),
                logging.WARNING: getattr(self._logger, "warn", None),
                logging.ERROR: getattr(self._logger, "error", None),
            }
            handler = method_map.get(level)
            if handler:
                handler(msg, *args, **kwargs)
        except Exception:
            # Never let logging failures bubble up into client code
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger("gocd")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(
    *,
    logger: Any | None = None,
    level: LogLevel = "info",
    module: str | None = None,
) -> BoundLogger:
    if isinstance(logger, BoundLogger):
        bound = logger
    else:
        bound = BoundLogger(logger, level=level)
    if module:
        bound = bound.bind(module=module.upper())
    return bound


__all__ = ["BoundLogger", "FIELDS_ORDER", "LogLevel", "LoggerProtocol", "create_logger"]
