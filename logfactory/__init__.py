"""Public API for the logfactory package.

Export a compact and convenient surface for consumers.
"""

from __future__ import annotations

from .factory import LoggerFactory
from .adapters import ContextLogger
from .identity import FunctionIdentity, InstanceIdentity, classify
from .layout import Layout, build_layout, render_call_site
from .config import build_defaults, configure
from .formatters import (
    PatternFormatter,
    ColorPatternFormatter,
    JSONFormatter,
    MessageFormatter,
)
from .errors import LogFactoryError, InvalidIdentityError, ConfigurationError

__all__ = [
    "LoggerFactory",
    "ContextLogger",
    "FunctionIdentity",
    "InstanceIdentity",
    "classify",
    "Layout",
    "build_layout",
    "render_call_site",
    "build_defaults",
    "configure",
    "PatternFormatter",
    "ColorPatternFormatter",
    "JSONFormatter",
    "MessageFormatter",
    "LogFactoryError",
    "InvalidIdentityError",
    "ConfigurationError",
]
