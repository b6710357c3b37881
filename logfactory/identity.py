"""Caller identity: classify a function or object instance and derive context."""

from __future__ import annotations

import functools
import inspect
import types
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .constants import CLASS_NAME, FUNC_NAME
from .errors import InvalidIdentityError

# values that are function-like without being classes
FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    types.WrapperDescriptorType,
    types.MethodWrapperType,
    functools.partial,
)

# scalars are not object instances for identity purposes
PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes)


@dataclass(frozen=True)
class FunctionIdentity:
    """
    Identity of a function, method or class reference.

    :param name: declared name; empty string for nameless callables
    """

    name: str

    def context(self) -> Dict[str, str]:
        return {FUNC_NAME: self.name}


@dataclass(frozen=True)
class InstanceIdentity:
    """
    Identity of an object instance.

    :param class_name: name of the instance's runtime type
    :param method_name: optional caller-supplied method name
    """

    class_name: str
    method_name: Optional[str] = None

    def context(self) -> Dict[str, str]:
        ctx = {CLASS_NAME: self.class_name}
        if self.method_name:
            ctx[FUNC_NAME] = self.method_name
        return ctx


Identity = Union[FunctionIdentity, InstanceIdentity]


def _callable_name(func: Any) -> str:
    if isinstance(func, functools.partial):
        return _callable_name(func.func)
    name = getattr(func, "__name__", "")
    return name if isinstance(name, str) else ""


def is_function_like(value: Any) -> bool:
    """Return True if ``value`` is classified as a function identity."""
    return isinstance(value, FUNCTION_TYPES) or inspect.isclass(value)


def classify(value: Any, method: Optional[str] = None) -> Identity:
    """
    Classify a caller-identity value.

    ``method`` is only used for object instances; a function identity names
    itself and the argument is ignored.

    :param value: function-like value or object instance
    :param method: optional method name for instance identities
    :return: FunctionIdentity or InstanceIdentity
    :raises InvalidIdentityError: for None and primitive scalars
    """
    if value is None or isinstance(value, PRIMITIVE_TYPES):
        raise InvalidIdentityError(value)
    if is_function_like(value):
        return FunctionIdentity(_callable_name(value))
    method_name = method if isinstance(method, str) and method else None
    return InstanceIdentity(type(value).__name__, method_name)


__all__ = [
    "FunctionIdentity",
    "InstanceIdentity",
    "Identity",
    "classify",
    "is_function_like",
]
