"""
Diagnostics for the template engine.

All records go through the ``stencil`` logger. Modules log through a
scoped adapter so every record says which phase produced it::

    from ._logging import scoped_logger

    log = scoped_logger("parser")
    log.debug("Opening for block", extra={"var": "i", "position": 12})

Scopes are ``parser``, ``renderer`` and ``template``. Records may carry
the template fields listed in ``TEMPLATE_FIELDS``; both formatters
report those and ignore any other extras.

Environment::

    STENCIL_LOG_LEVEL=trace|debug|info|warn|error|fatal|off (default: info)
    STENCIL_LOG_FORMAT=json|human (default: human if tty, json if piped)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

__all__ = ["logger", "setup_logging", "scoped_logger", "TEMPLATE_FIELDS"]

_OFF = logging.CRITICAL + 10

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "off": _OFF,
}

_SEVERITY = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}

# Extras the engine attaches, in display order
TEMPLATE_FIELDS = (
    "code",
    "var",
    "operand",
    "negated",
    "iterations",
    "position",
    "fragment",
)


def _scope(record: logging.LogRecord) -> str:
    return getattr(record, "scope", None) or record.name.rpartition(".")[2]


def _template_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {key: getattr(record, key) for key in TEMPLATE_FIELDS if hasattr(record, key)}


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record, shaped like an OpenTelemetry log record.

    ``attributes`` holds ``scope`` and whichever template fields the record
    carries; ``resource`` names the service.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "severityText": _SEVERITY.get(record.levelno, "INFO"),
            "body": record.getMessage(),
            "attributes": {"scope": _scope(record), **_template_fields(record)},
            "resource": {"service.name": "stencil"},
        }
        return json.dumps(payload, separators=(",", ":"), default=str)


class HumanFormatter(logging.Formatter):
    """
    Single-line terminal output::

        12:04:31 DEBUG [parser] Opening for block var='i' position=12 fragment='for i in range(n)'
    """

    _DIM = "\x1b[2m"
    _RESET = "\x1b[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        line = (
            f"{created:%H:%M:%S} {_SEVERITY.get(record.levelno, 'INFO'):<5} "
            f"[{_scope(record)}] {record.getMessage()}"
        )
        fields = " ".join(
            f"{key}={value!r}" if isinstance(value, str) else f"{key}={value}"
            for key, value in _template_fields(record).items()
        )
        if not fields:
            return line
        if self._use_colors:
            fields = f"{self._DIM}{fields}{self._RESET}"
        return f"{line} {fields}"


def _level_from_env() -> int:
    name = os.environ.get("STENCIL_LOG_LEVEL") or os.environ.get("STENCIL_LOG", "info")
    return _LEVELS.get(name.lower(), logging.INFO)


def _format_from_env() -> str:
    fmt = os.environ.get("STENCIL_LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return "human" if sys.stderr.isatty() else "json"


def _make_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(use_colors=sys.stderr.isatty()))
    return handler


logger = logging.getLogger("stencil")


def setup_logging(level: str | int = "INFO", format: str | None = None) -> None:
    """
    Replace the handlers of the ``stencil`` logger.

    Args:
        level: A level name (``"debug"``, ``"warn"``, ``"off"``, ...) or a
            ``logging`` constant. Unknown names fall back to INFO.
        format: ``"json"`` or ``"human"``. Defaults to ``STENCIL_LOG_FORMAT``
            or, when unset, human on a terminal and json otherwise.

    Example:
        >>> import stencil
        >>> stencil.setup_logging("debug", format="human")
    """
    if isinstance(level, str):
        level = _LEVELS.get(level.lower(), logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(_make_handler((format or _format_from_env()).lower()))
    logger.setLevel(level)


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Adds ``scope`` to every record, keeping per-call extras."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def scoped_logger(scope: str) -> logging.LoggerAdapter:
    """Return an adapter on the ``stencil`` logger that tags records with ``scope``."""
    return _ScopedLoggerAdapter(logger, {"scope": scope})


# Leave any handlers the application installed before import alone
if not logger.handlers:
    logger.addHandler(_make_handler(_format_from_env()))
    logger.setLevel(_level_from_env())
