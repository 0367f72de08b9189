"""Error types raised on contract violations.

``Nothing`` and ``Err`` are ordinary values and never raise on their own. The
exceptions below are raised only when code breaks a container's contract, e.g.
unwrapping the wrong variant or handing a plain value to a combinator that
expects a container.
"""

from __future__ import annotations

__all__ = [
    'ContractError',
    'FnOnceConsumedError',
    'GuardReleasedError',
    'NoneValueError',
    'NotAContainerError',
    'NotAResultError',
    'NotAnOptionError',
    'UnwrapError',
    'UnzipError',
    'safe_repr',
    'safe_str',
]


def safe_repr(value: object) -> str:
    """Return ``repr(value)``, or a placeholder if ``__repr__`` itself raises."""
    try:
        return repr(value)
    except Exception:
        return f'<unprintable {type(value).__name__} object>'


def safe_str(value: object) -> str:
    """Return ``str(value)``, falling back to :func:`safe_repr`."""
    try:
        return str(value)
    except Exception:
        return safe_repr(value)


# --- Contract violations ---


class ContractError(TypeError):
    """Base class for every misuse of an Option, Result or ControlFlow."""


class UnwrapError(ContractError):
    """A payload was extracted from the wrong variant."""


class NoneValueError(ContractError):
    """``None`` was given where a payload is required, such as ``Some(None)``."""

    def __init__(self, message: str = 'Some() cannot wrap None; use Nothing for an absent value') -> None:
        super().__init__(message)


class UnzipError(ContractError):
    """``unzip`` was called on a payload that is not a pair."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f'unzip() expects a 2-item tuple or list, got {safe_repr(value)}')


class NotAContainerError(ContractError):
    """A value that should be a container is not tagged as one.

    Attributes:
        value: The rejected value.
        value_repr: A representation of the value that is always printable.
        expected: Name of the expected container family.
    """

    expected = 'Option or Result'

    def __init__(self, value: object) -> None:
        self.value = value
        self.value_repr = safe_repr(value)
        super().__init__(f'{self.value_repr} is not {_article(self.expected)} {self.expected}')


class NotAnOptionError(NotAContainerError):
    """A value passed where an Option is required is not an Option."""

    expected = 'Option'


class NotAResultError(NotAContainerError):
    """A value passed where a Result is required is not a Result."""

    expected = 'Result'


# --- Primitive misuse ---


class FnOnceConsumedError(RuntimeError):
    """A one-shot callable was invoked a second time."""

    def __init__(self, name: str = 'FnOnce') -> None:
        super().__init__(f'{name} has already been consumed')


class GuardReleasedError(RuntimeError):
    """A lock guard was used after it was unlocked.

    Attributes:
        guard: Name of the guard type, such as MutexGuard.
    """

    def __init__(self, guard: str = 'MutexGuard') -> None:
        self.guard = guard
        super().__init__(f'{guard} has been released')


def _article(word: str) -> str:
    return 'an' if word[:1] in 'AEIOU' else 'a'
