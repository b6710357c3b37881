"""Logger handle carrying per-handle context entries."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional


class ContextLogger(logging.LoggerAdapter):
    """
    LoggerAdapter whose context travels on every record as ``record.context``.

    Each handle owns its context; two handles wrapping the same category
    logger do not share entries. Per-call ``extra`` dicts are merged into the
    record as usual.

    :param logger: base logger (one per category, owned by ``logging``)
    :param context: initial context entries
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, str]] = None):
        super().__init__(logger, {})
        self._context: Dict[str, str] = dict(context or {})

    def __repr__(self) -> str:
        return f"<ContextLogger category={self.category!r} context={self._context!r}>"

    @property
    def category(self) -> str:
        return self.logger.name

    @property
    def context(self) -> Dict[str, str]:
        """
        :return: a copy of the attached context entries.
        """
        return dict(self._context)

    def add_context(self, key: str, value: Any) -> "ContextLogger":
        self._context[key] = value
        return self

    def remove_context(self, key: str) -> "ContextLogger":
        self._context.pop(key, None)
        return self

    def clear_context(self) -> "ContextLogger":
        self._context.clear()
        return self

    def process(self, msg: str, kwargs: Dict[str, Any]):
        call_extra = kwargs.pop("extra", {}) or {}
        merged = {**(self.extra or {}), **call_extra}
        merged["context"] = dict(self._context)
        kwargs["extra"] = merged
        return msg, kwargs


__all__ = ["ContextLogger"]
