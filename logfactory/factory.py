"""LoggerFactory: configure logging once and hand out context-tagged loggers."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .adapters import ContextLogger
from .config import build_defaults, configure
from .identity import classify
from .layout import Layout, Token, build_layout, default_pattern


class LoggerFactory:
    """
    Factory for loggers tagged with their call site.

    Constructing the factory configures ``logging`` for the process: a level
    name builds the default configuration, a mapping is applied as given.

    :param level_or_config: severity level name (e.g. ``"info"``) or a full
        configuration with ``appenders`` and ``categories``
    :raises TypeError: if the argument is neither a string nor a mapping

    Examples
    --------
    .. code-block:: python

        factory = LoggerFactory("info")

        class Worker:
            def run(self):
                log = factory.get_logger("jobs", self, "run")
                log.info("started")   # ... [INFO] [jobs] [Worker.run()]: started
    """

    def __init__(self, level_or_config: Union[str, Mapping[str, Any]]):
        if isinstance(level_or_config, str):
            self._configuration: Dict[str, Any] = build_defaults(level_or_config)
        elif isinstance(level_or_config, Mapping):
            self._configuration = dict(level_or_config)
        else:
            raise TypeError(
                "LoggerFactory expects a level name or a configuration mapping, "
                f"got {type(level_or_config).__name__}"
            )
        configure(self._configuration)

    def __repr__(self) -> str:
        return (
            f"LoggerFactory(appenders={sorted(self._configuration.get('appenders') or {})}, "
            f"categories={sorted(self._configuration.get('categories') or {})})"
        )

    @property
    def configuration(self) -> Dict[str, Any]:
        """
        :return: the configuration applied by this factory.
        """
        return self._configuration

    def get_logger(
        self, category: str, identity: Any, method: Optional[str] = None
    ) -> ContextLogger:
        """
        Return a fresh logger handle for ``category`` tagged with ``identity``.

        :param category: logger name
        :param identity: class instance or function reference
        :param method: method name for instance identities; ignored for functions
        :return: ContextLogger
        :raises InvalidIdentityError: for None and primitive values
        """
        ident = classify(identity, method)
        handle = ContextLogger(logging.getLogger(category))
        for key, value in ident.context().items():
            handle.add_context(key, value)
        return handle

    def bind(self, category: str) -> Callable[..., ContextLogger]:
        """
        Return ``get_logger`` with ``category`` fixed, for components that
        should not see the whole factory.

        :param category: logger name
        """

        def _get(identity: Any, method: Optional[str] = None) -> ContextLogger:
            return self.get_logger(category, identity, method)

        return _get

    @staticmethod
    def get_default_layout(
        pattern: Optional[str] = None,
        call: bool = True,
        tokens: Optional[Mapping[str, Token]] = None,
    ) -> Layout:
        return build_layout(pattern, call, tokens)

    @staticmethod
    def get_default_pattern() -> str:
        return default_pattern()

    @staticmethod
    def get_defaults(level: str) -> Dict[str, Any]:
        return build_defaults(level)


__all__ = ["LoggerFactory"]
