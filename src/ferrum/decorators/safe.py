"""Decorators that turn raised exceptions into Err values.

``@safe`` and ``@safe_async`` are thin wrapt shims over
:func:`ferrum.bridge.capture_result` and
:func:`ferrum.bridge.capture_async_result`, so decorated functions capture
and log exceptions exactly like the ``try_*`` helpers do.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from ferrum.bridge import capture_async_result, capture_result
from ferrum.types.result import Result

__all__ = ['safe', 'safe_async']

type _Catch = tuple[type[BaseException], ...]


def _catch_types(exceptions: _Catch | None) -> _Catch:
    if exceptions is None:
        return (Exception,)
    if not exceptions:
        msg = 'exceptions must name at least one exception type'
        raise ValueError(msg)
    return exceptions


def _qualname(wrapped: Any) -> str | None:
    return getattr(wrapped, '__qualname__', None)


def _sync_wrapper(catch: _Catch) -> Any:
    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return capture_result(wrapped, args, kwargs, catch=catch, helper='safe', function=_qualname(wrapped))

    return wrapper


def _async_wrapper(catch: _Catch) -> Any:
    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        return await capture_async_result(
            wrapped, args, kwargs, catch=catch, helper='safe_async', function=_qualname(wrapped)
        )

    return wrapper


@overload
def safe[**P, T](func: Callable[P, T], /) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None, /, *, exceptions: tuple[type[E], ...] | None = None
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]: ...


def safe(func: Callable[..., Any] | None = None, /, *, exceptions: _Catch | None = None) -> Any:
    """Make a function return Ok(value) instead of returning, and Err(exc) instead of raising.

    Use it bare or with an ``exceptions`` filter. Exceptions outside the
    filter propagate unchanged; the filter defaults to ``(Exception,)``.
    Methods, staticmethods and classmethods keep their binding and
    signature.

    Raises:
        ValueError: If ``exceptions`` is an empty tuple.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse_port(text: str) -> int:
            return int(text)

        parse_port('8080')  # Ok(8080)
        parse_port('http')  # Err(ValueError(...))
        ```
    """
    wrapper = _sync_wrapper(_catch_types(exceptions))
    return wrapper if func is None else wrapper(func)


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]], /) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    func: None = None, /, *, exceptions: tuple[type[E], ...] | None = None
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, E]]]]: ...


def safe_async(func: Callable[..., Any] | None = None, /, *, exceptions: _Catch | None = None) -> Any:
    """Async counterpart of :func:`safe` for coroutine functions.

    The wrapper awaits the call, so both a raise before the first await and
    one inside the coroutine come back as Err. Cancellation propagates.
    """
    wrapper = _async_wrapper(_catch_types(exceptions))
    return wrapper if func is None else wrapper(func)
