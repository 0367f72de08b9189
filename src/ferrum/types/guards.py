"""Runtime guards for Option, Result and ControlFlow values."""

from __future__ import annotations

from inspect import getattr_static
from typing import TYPE_CHECKING, Any, TypeIs

from ferrum.errors import NotAnOptionError, NotAResultError
from ferrum.types._kind import CONTROL_FLOW_KIND, KIND_ATTR, OPTION_KIND, RESULT_KIND, KindTag

if TYPE_CHECKING:
    from ferrum.ops.control_flow import ControlFlow
    from ferrum.types.option import Option
    from ferrum.types.result import Result

__all__ = [
    'assert_option',
    'assert_result',
    'is_control_flow',
    'is_option',
    'is_result',
    'kind_of',
]


def kind_of(value: object) -> tuple[KindTag, str] | None:
    """Return the ``(tag, variant)`` pair carried by ``value``'s type, if any.

    The lookup is static, so ``__getattr__`` hooks and descriptors on the
    value are never invoked.
    """
    if value is None:
        return None
    try:
        kind = getattr_static(type(value), KIND_ATTR, None)
    except Exception:
        return None
    if type(kind) is tuple and len(kind) == 2 and type(kind[0]) is KindTag:
        return kind
    return None


def _has_tag(value: object, tag: KindTag) -> bool:
    kind = kind_of(value)
    return kind is not None and kind[0] is tag


def is_option(value: object) -> TypeIs[Option[Any]]:
    """Return True if ``value`` is a ``Some`` or ``Nothing``.

    Never raises, whatever the input.

    Examples:
        >>> is_option(Some(5))
        True
        >>> is_option(Ok(5))
        False
        >>> is_option(None)
        False
    """
    return _has_tag(value, OPTION_KIND)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True if ``value`` is an ``Ok`` or ``Err``.

    Never raises, whatever the input.

    Examples:
        >>> is_result(Ok(5))
        True
        >>> is_result({'value': 5})
        False
    """
    return _has_tag(value, RESULT_KIND)


def is_control_flow(value: object) -> TypeIs[ControlFlow[Any, Any]]:
    """Return True if ``value`` is a ``Break`` or ``Continue``."""
    return _has_tag(value, CONTROL_FLOW_KIND)


def assert_option(value: object) -> None:
    """Raise NotAnOptionError unless ``value`` is an Option."""
    if not is_option(value):
        raise NotAnOptionError(value)


def assert_result(value: object) -> None:
    """Raise NotAResultError unless ``value`` is a Result."""
    if not is_result(value):
        raise NotAResultError(value)
