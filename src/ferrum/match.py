"""Dispatch on the variant of an Option or Result."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ferrum._config import get_config
from ferrum._logging import get_logger
from ferrum.errors import NotAContainerError, safe_repr
from ferrum.types._kind import OPTION_KIND, RESULT_KIND
from ferrum.types.guards import kind_of

__all__ = ['match']

_log = get_logger(__name__)


def _check_handlers(family: str, first: tuple[str, object], second: tuple[str, object], fallback: object) -> None:
    given = (first[1] is not None) + (second[1] is not None)
    if given == 2 or (given == 1 and fallback is not None):
        return
    msg = (
        f'match() on {family} needs both {first[0]}= and {second[0]}= handlers, '
        f'or one of them together with _='
    )
    raise TypeError(msg)


def match[R](
    container: object,
    *,
    some: Callable[[Any], R] | None = None,
    nothing: Callable[[], R] | None = None,
    ok: Callable[[Any], R] | None = None,
    err: Callable[[Any], R] | None = None,
    _: Callable[[], R] | None = None,
) -> R | None:
    """Call the handler for the container's variant and return its result.

    ``some``/``ok``/``err`` receive the payload; ``nothing`` and the fallback
    ``_`` take no arguments. A variant whose handler is missing falls back
    to ``_``.

    Args:
        container: An Option or Result.
        some: Handler for Some.
        nothing: Handler for Nothing.
        ok: Handler for Ok.
        err: Handler for Err.
        _: Fallback for variants without a handler, and for values that are
            not containers at all.

    Returns:
        Whatever the chosen handler returns.

    Raises:
        TypeError: If the handlers cannot cover both variants of the
            container's family.
        NotAContainerError: If the value is neither an Option nor a Result,
            no ``_`` is given, and ``strict_match`` is enabled (the default).

    Examples:
        >>> match(Some(2), some=lambda v: v * 10, nothing=lambda: 0)
        20
        >>> match(Err('boom'), ok=str, _=lambda: 'failed')
        'failed'
    """
    kind = kind_of(container)

    if kind is not None and kind[0] is OPTION_KIND:
        _check_handlers('an Option', ('some', some), ('nothing', nothing), _)
        if container.is_some():  # type: ignore[attr-defined]
            return some(container.value) if some is not None else _()  # type: ignore[attr-defined,misc]
        return nothing() if nothing is not None else _()  # type: ignore[misc]

    if kind is not None and kind[0] is RESULT_KIND:
        _check_handlers('a Result', ('ok', ok), ('err', err), _)
        if container.is_ok():  # type: ignore[attr-defined]
            return ok(container.value) if ok is not None else _()  # type: ignore[attr-defined,misc]
        return err(container.error) if err is not None else _()  # type: ignore[attr-defined,misc]

    if _ is not None:
        return _()
    if get_config().strict_match:
        raise NotAContainerError(container)
    _log.warning('match on a non-container ignored', value=safe_repr(container))
    return None
