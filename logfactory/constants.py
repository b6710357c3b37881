"""Constants for logfactory (context keys, pattern pieces, ANSI codes)."""

from __future__ import annotations

# context keys attached to a logger handle
CLASS_NAME = "class_name"
FUNC_NAME = "func_name"

# name of the call-site token and its reference in a pattern
CALL_TOKEN = "call"
CALL_TOKEN_REF = f"%({CALL_TOKEN})s"

DEFAULT_PATTERN = "[%(asctime)s] [%(levelname)s] [%(name)s]"
MESSAGE_SUFFIX = ": %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULT_CATEGORY = "default"
DEFAULT_APPENDER = "out"

ANSI = {
    "RESET": "\033[0m",
    "RED": "\033[31m",
    "GREEN": "\033[32m",
    "YELLOW": "\033[33m",
    "MAGENTA": "\033[35m",
    "CYAN": "\033[36m",
}

_LEVEL_TO_ANSI = {
    "DEBUG": ANSI["CYAN"],
    "INFO": ANSI["GREEN"],
    "WARNING": ANSI["YELLOW"],
    "ERROR": ANSI["RED"],
    "CRITICAL": ANSI["MAGENTA"],
}

__all__ = [
    "CLASS_NAME",
    "FUNC_NAME",
    "CALL_TOKEN",
    "CALL_TOKEN_REF",
    "DEFAULT_PATTERN",
    "MESSAGE_SUFFIX",
    "DEFAULT_DATEFMT",
    "DEFAULT_CATEGORY",
    "DEFAULT_APPENDER",
    "ANSI",
    "_LEVEL_TO_ANSI",
]
