"""Formatters that render layouts: token pattern, coloured pattern, JSON, message."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_DATEFMT, _LEVEL_TO_ANSI, ANSI
from .layout import Layout, Token, build_layout

_MISSING = object()


def _is_a_tty(stream) -> bool:
    """Return True if the stream is a TTY-like object."""
    try:
        return stream.isatty()
    except Exception:
        return False


def _supports_color(stream=None, force: Optional[bool] = None) -> bool:
    """
    Determine if a stream supports colour. Force with env FORCE_COLOR=1/true.
    Honor NO_COLOR env var to disable colour.
    """
    if os.getenv("NO_COLOR"):
        return False
    if force is None:
        forced = os.getenv("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    else:
        forced = bool(force)
    if forced:
        return True
    return _is_a_tty(stream if stream is not None else sys.stdout)


class PatternFormatter(logging.Formatter):
    """
    Formatter that evaluates a token table before formatting.

    Every token result is set on the record under the token name for the
    duration of ``format`` so the pattern can reference it as ``%(name)s``.
    The default tokens are always present; ``tokens`` are merged on top.
    A token that raises renders as an empty string.

    :param fmt: %-style pattern (defaults to the default layout pattern)
    :param datefmt: date format string
    :param tokens: token name -> render function
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = DEFAULT_DATEFMT,
        tokens: Optional[Mapping[str, Token]] = None,
    ):
        default = build_layout()
        if fmt is None:
            fmt = default.pattern
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.tokens: Dict[str, Token] = {**default.tokens, **(tokens or {})}

    @classmethod
    def from_layout(
        cls, layout: Layout, datefmt: Optional[str] = DEFAULT_DATEFMT, **kwargs
    ) -> "PatternFormatter":
        return cls(fmt=layout.pattern, datefmt=datefmt, tokens=layout.tokens, **kwargs)

    def _render_token(self, token: Token, record: logging.LogRecord) -> Any:
        try:
            value = token(record)
        except Exception:
            return ""
        return "" if value is None else value

    def format(self, record: logging.LogRecord) -> str:
        saved = {}
        for name, token in self.tokens.items():
            saved[name] = record.__dict__.get(name, _MISSING)
            setattr(record, name, self._render_token(token, record))
        try:
            return super().format(record)
        finally:
            for name, orig in saved.items():
                if orig is _MISSING:
                    record.__dict__.pop(name, None)
                else:
                    setattr(record, name, orig)


class ColorPatternFormatter(PatternFormatter):
    """
    PatternFormatter that wraps the level name in ANSI colour codes when the
    target stream supports it.

    :param force_color: if True, force colour even when not a TTY
    :param stream: stream the output goes to, for TTY detection
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = DEFAULT_DATEFMT,
        tokens: Optional[Mapping[str, Token]] = None,
        force_color: Optional[bool] = None,
        stream=None,
    ):
        super().__init__(fmt=fmt, datefmt=datefmt, tokens=tokens)
        self.use_color = _supports_color(stream, force_color)

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)
        orig = record.levelname
        color = _LEVEL_TO_ANSI.get(orig, "")
        record.levelname = f"{color}{orig}{ANSI['RESET']}" if color else orig
        try:
            return super().format(record)
        finally:
            record.levelname = orig


class JSONFormatter(logging.Formatter):
    """
    One-line JSON formatter.

    The JSON contains: ts, level, logger, message, the handle context (when
    non-empty) and any other extra fields.
    """

    excluded = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "asctime",
        "taskName",
        "context",
    }

    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            base["context"] = dict(context)
        extras = {
            k: v
            for k, v in record.__dict__.items()
            if k not in self.excluded and not k.startswith("_")
        }
        if extras:
            base["extra"] = extras
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, default=str, ensure_ascii=False)


class MessageFormatter(logging.Formatter):
    """Pass the message through without decoration."""

    def __init__(self):
        super().__init__(fmt="%(message)s")


__all__ = [
    "PatternFormatter",
    "ColorPatternFormatter",
    "JSONFormatter",
    "MessageFormatter",
]
