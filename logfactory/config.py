"""
Default configuration assembly and translation to ``logging.config.dictConfig``.

A configuration has two sections::

    {
        "appenders": {"out": {"type": "stdout", "layout": {...}}},
        "categories": {"default": {"appenders": ["out"], "level": "info"}},
    }

Appender types: ``stdout``, ``stderr``, ``file``, ``rotating``.
Layout types: ``pattern``, ``colored`` (``coloured``), ``basic``, ``json``,
``message``. The ``default`` category is the root logger.
"""

from __future__ import annotations

import copy
import logging
import logging.config
from typing import Any, Dict, Mapping, Optional, Union

from .constants import DEFAULT_APPENDER, DEFAULT_CATEGORY, DEFAULT_DATEFMT
from .errors import ConfigurationError
from .formatters import (
    ColorPatternFormatter,
    JSONFormatter,
    MessageFormatter,
    PatternFormatter,
)
from .layout import Layout, build_layout

_STREAMS = {"stdout": "ext://sys.stdout", "stderr": "ext://sys.stderr"}


def layout_config(layout: Layout, kind: str = "pattern") -> Dict[str, Any]:
    """
    Express a Layout as a layout section of a configuration.

    :param layout: Layout to embed
    :param kind: ``pattern`` or ``colored``
    """
    return {"type": kind, "pattern": layout.pattern, "tokens": dict(layout.tokens)}


def build_defaults(level: str) -> Dict[str, Any]:
    """
    Build the default configuration: one stdout appender using the default
    layout and one ``default`` category at ``level``.

    :param level: severity level name, passed through unchanged
    :return: configuration dict
    :raises TypeError: if level is not a string
    """
    if not isinstance(level, str):
        raise TypeError(f"level must be a string, got {type(level).__name__}")
    return {
        "appenders": {
            DEFAULT_APPENDER: {
                "type": "stdout",
                "layout": layout_config(build_layout()),
            },
        },
        "categories": {
            DEFAULT_CATEGORY: {
                "appenders": [DEFAULT_APPENDER],
                "level": level,
            },
        },
    }


def _formatter_config(
    layout: Optional[Union[Layout, Mapping[str, Any]]], stream: Optional[str]
) -> Dict[str, Any]:
    if layout is None:
        layout = layout_config(build_layout())
    elif isinstance(layout, Layout):
        layout = layout_config(layout)
    kind = layout.get("type", "pattern")
    datefmt = layout.get("datefmt", DEFAULT_DATEFMT)

    if kind in ("pattern", "colored", "coloured"):
        pattern = layout.get("pattern")
        default = build_layout()
        tokens = {**default.tokens, **(layout.get("tokens") or {})}
        if pattern is None:
            pattern = default.pattern
        out: Dict[str, Any] = {
            "()": PatternFormatter,
            "fmt": pattern,
            "datefmt": datefmt,
            "tokens": tokens,
        }
        if kind != "pattern":
            out["()"] = ColorPatternFormatter
            out["force_color"] = layout.get("force_color")
            if stream is not None:
                out["stream"] = stream
        return out
    if kind == "basic":
        basic = build_layout(call=False)
        return {"()": PatternFormatter, "fmt": basic.pattern, "datefmt": datefmt}
    if kind == "json":
        return {"()": JSONFormatter}
    if kind == "message":
        return {"()": MessageFormatter}
    raise ConfigurationError(f"Unknown layout type: {kind!r}")


def _handler_config(name: str, appender: Mapping[str, Any]) -> Dict[str, Any]:
    kind = appender.get("type")
    if kind in _STREAMS:
        out: Dict[str, Any] = {"class": "logging.StreamHandler", "stream": _STREAMS[kind]}
    elif kind == "file":
        out = {
            "class": "logging.FileHandler",
            "filename": appender["filename"],
            "mode": appender.get("mode", "a"),
            "encoding": appender.get("encoding", "utf-8"),
        }
    elif kind == "rotating":
        out = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": appender["filename"],
            "maxBytes": int(appender.get("max_bytes", 10 * 1024 * 1024)),
            "backupCount": int(appender.get("backups", 5)),
            "encoding": appender.get("encoding", "utf-8"),
        }
    else:
        raise ConfigurationError(f"Unknown appender type for {name!r}: {kind!r}")
    out["formatter"] = name
    if appender.get("level") is not None:
        out["level"] = _level(appender["level"])
    return out


def _level(level: Any) -> Any:
    return level.upper() if isinstance(level, str) else level


def to_dict_config(configuration: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Translate a configuration into a ``dictConfig`` schema.

    Only appender and layout types are checked here; level names and
    appender references are left to ``logging.config.dictConfig``.

    :param configuration: configuration with ``appenders`` and ``categories``
    :return: dictConfig-compatible dict
    :raises ConfigurationError: for unknown appender or layout types
    """
    formatters: Dict[str, Any] = {}
    handlers: Dict[str, Any] = {}
    for name, appender in (configuration.get("appenders") or {}).items():
        handler = _handler_config(name, appender)
        formatters[name] = _formatter_config(appender.get("layout"), handler.get("stream"))
        handlers[name] = handler

    out: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "loggers": {},
    }
    for name, category in (configuration.get("categories") or {}).items():
        entry = {
            "handlers": list(category.get("appenders") or []),
            "level": _level(category.get("level", "INFO")),
        }
        if name == DEFAULT_CATEGORY:
            out["root"] = entry
        else:
            entry["propagate"] = False
            out["loggers"][name] = entry
    return out


def configure(configuration: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a configuration to ``logging``.

    :param configuration: configuration with ``appenders`` and ``categories``
    :return: the dictConfig dict that was applied, untouched by ``dictConfig``
    """
    dict_config = to_dict_config(configuration)
    logging.config.dictConfig(copy.deepcopy(dict_config))
    return dict_config


__all__ = ["build_defaults", "layout_config", "to_dict_config", "configure"]
