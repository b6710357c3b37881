"""
Pattern layout with a token table.

A layout is a ``logging`` %-style pattern plus named token functions. Each
token is evaluated against the record at format time and its result is
available to the pattern as ``%(<name>)s``. The ``call`` token renders the
call-site fragment from the context a :class:`ContextLogger` put on the record.
"""

from __future__ import annotations

import logging
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from .constants import (
    CALL_TOKEN,
    CALL_TOKEN_REF,
    CLASS_NAME,
    DEFAULT_PATTERN,
    FUNC_NAME,
    MESSAGE_SUFFIX,
)

Token = Callable[[logging.LogRecord], Any]


@dataclass(frozen=True)
class Layout:
    """
    Immutable, comparable, not hashable (the token table is a mapping).

    :param pattern: %-style format string for ``logging.Formatter``
    :param tokens: token name -> render function taking the log record
    """

    pattern: str
    tokens: Mapping[str, Token] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        object.__setattr__(self, "tokens", types.MappingProxyType(dict(self.tokens)))


def _present(context: Any, key: str) -> Optional[str]:
    try:
        value = context.get(key)
    except Exception:
        return None
    if value is None or value == "":
        return None
    return str(value)


def render_call_site(context: Optional[Mapping[str, Any]]) -> str:
    """
    Render the call-site fragment for a context mapping.

    :param context: context entries (may be None or missing keys)
    :return: ``" [Cls.func()]"``, ``" [Cls]"``, ``" [func()]"`` or ``""``
    """
    if not context:
        return ""
    class_name = _present(context, CLASS_NAME)
    func_name = _present(context, FUNC_NAME)
    if class_name and func_name:
        return f" [{class_name}.{func_name}()]"
    if class_name:
        return f" [{class_name}]"
    if func_name:
        return f" [{func_name}()]"
    return ""


def call_token(record: logging.LogRecord) -> str:
    """Token function for ``%(call)s``: reads ``record.context``."""
    return render_call_site(getattr(record, "context", None))


def default_pattern() -> str:
    return DEFAULT_PATTERN


def build_layout(
    pattern: Optional[str] = None,
    call: bool = True,
    tokens: Optional[Mapping[str, Token]] = None,
) -> Layout:
    """
    Compose the default layout.

    The pattern is the default prefix, then the call-site token reference
    (when ``call``), then a space and ``pattern`` (when given), then the
    message suffix. ``tokens`` are merged after the call token, so a caller
    entry named ``"call"`` replaces it.

    :param pattern: extra fragment inserted before the message
    :param call: include the call-site token reference
    :param tokens: additional token functions
    :return: Layout
    """
    fmt = default_pattern()
    if call:
        fmt += CALL_TOKEN_REF
    if pattern is not None:
        fmt += f" {pattern}"
    fmt += MESSAGE_SUFFIX

    table: Dict[str, Token] = {CALL_TOKEN: call_token}
    table.update(tokens or {})
    return Layout(pattern=fmt, tokens=table)


__all__ = [
    "Token",
    "Layout",
    "render_call_site",
    "call_token",
    "default_pattern",
    "build_layout",
]
