"""Structured logging for operations and drive loops.

Every logger from :func:`get_logger` hangs under the ``deferred_ops`` base
logger, which owns one stderr handler and (optionally) one rotating file
handler. Operations emit single-line JSON events through :func:`log_event`.

The initial base level is read from ``DEFERRED_OPS_LOG_LEVEL`` (default
``INFO``); ``configure_logger`` changes it at runtime.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "deferred_ops"
LEVEL_ENV = "DEFERRED_OPS_LOG_LEVEL"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5

# Marker attributes: which handlers this module installed and may replace.
_READY = "_deferred_ops_ready"
_CONSOLE = "_deferred_ops_console"
_FILE = "_deferred_ops_file"


def _level_from_name(name: str | None, fallback: int = logging.INFO) -> int:
    """Map a level name such as ``"warning"`` to its number, else ``fallback``."""
    if not name:
        return fallback
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else fallback


def _make_formatter(json_mode: bool) -> logging.Formatter:
    if json_mode:
        return JsonFormatter()
    return logging.Formatter(_PLAIN_FORMAT)


def _owned(handler: logging.Handler, marker: str) -> bool:
    return bool(getattr(handler, marker, False))


def _base_logger(json_mode: bool) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER_NAME)
    if _owned(base, _READY):
        return base
    level = _level_from_name(os.getenv(LEVEL_ENV))
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(_make_formatter(json_mode))
    setattr(console, _CONSOLE, True)
    base.setLevel(level)
    base.handlers = [console]
    # Keep operation events off the root logger's handlers.
    base.propagate = False
    setattr(base, _READY, True)
    return base


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True) -> logging.Logger:
    """Return ``name``'s logger, nested under ``deferred_ops`` when needed."""
    base = _base_logger(json_mode)
    if name == BASE_LOGGER_NAME:
        return base
    prefix = BASE_LOGGER_NAME + "."
    child = logging.getLogger(name if name.startswith(prefix) else prefix + name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def _drop_handler(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(OSError):
        handler.close()


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Adjust the base logger at runtime and return it.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Path of a rotating log file to attach (parent directories are
        created). ``None`` detaches a file handler previously attached here.
    json_mode:
        JSON lines (``True``) or the plain text format for managed handlers.

    Handlers added by other code are left alone.
    """
    base = _base_logger(json_mode)
    if isinstance(level, str):
        base.setLevel(_level_from_name(level, fallback=base.level))
    elif level is not None:
        base.setLevel(level)

    for handler in base.handlers:
        if _owned(handler, _CONSOLE) or _owned(handler, _FILE):
            handler.setLevel(base.level)
            handler.setFormatter(_make_formatter(json_mode))

    target = None if file_path is None else os.path.abspath(os.path.expanduser(file_path))
    keep = None
    for handler in [h for h in base.handlers if _owned(h, _FILE)]:
        if target is not None and getattr(handler, "baseFilename", None) == target:
            keep = handler
        else:
            _drop_handler(base, handler)

    if target is not None and keep is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        rotating = RotatingFileHandler(
            target, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
        )
        setattr(rotating, _FILE, True)
        rotating.setLevel(base.level)
        rotating.setFormatter(_make_formatter(json_mode))
        base.addHandler(rotating)
    return base


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` as one JSON object: event name, then context, then fields.

    ``None`` field values are omitted unless ``keep_none`` is true.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx is not None:
        payload.update(ctx.to_dict())
    for key, value in fields.items():
        if value is not None or keep_none:
            payload[key] = value
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "JsonFormatter",
    "get_logger",
    "configure_logger",
    "log_event",
]
