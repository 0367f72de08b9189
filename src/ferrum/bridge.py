"""Bridge exception-raising code into Option and Result values.

Only :class:`Exception` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and task cancellation always propagate.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ferrum._internal.awaitables import resolve
from ferrum._logging import get_logger
from ferrum.types.option import Option
from ferrum.types.result import Err, Ok, Result

__all__ = [
    'awaitable_to_result',
    'capture_async_result',
    'capture_result',
    'try_async_option',
    'try_async_result',
    'try_option',
    'try_result',
]

_log = get_logger(__name__)

_DEFAULT_CATCH: tuple[type[BaseException], ...] = (Exception,)


def capture_result[T](
    fn: Callable[..., T],
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    catch: tuple[type[BaseException], ...] = _DEFAULT_CATCH,
    helper: str = 'capture_result',
    **context: Any,
) -> Result[T, Any]:
    """Call fn and capture exceptions of the ``catch`` types as Err.

    Shared by the ``try_*`` helpers and the ``@safe`` decorator. Each capture
    is logged at debug level with ``helper``, the exception type and any
    extra ``context`` fields. Other exceptions propagate.
    """
    try:
        value = fn(*args, **(kwargs or {}))
    except catch as exc:
        _log.debug('exception captured', helper=helper, exc_type=type(exc).__name__, **context)
        return Err(exc)
    return Ok(value)


async def capture_async_result[T](
    task: Awaitable[T] | Callable[..., Awaitable[T] | T],
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    catch: tuple[type[BaseException], ...] = _DEFAULT_CATCH,
    helper: str = 'capture_async_result',
    **context: Any,
) -> Result[T, Any]:
    """Async version of :func:`capture_result`.

    ``task`` may be an awaitable or a callable returning a value or an
    awaitable. A callable that raises before returning is captured too.

    Raises:
        TypeError: If arguments are given for a task that is not callable.
    """
    if not callable(task) and (args or kwargs):
        msg = f'{type(task).__name__} is not callable; arguments can only be passed with a callable task'
        raise TypeError(msg)
    try:
        started = task(*args, **(kwargs or {})) if callable(task) else task
        value = await resolve(started)
    except catch as exc:
        _log.debug('exception captured', helper=helper, exc_type=type(exc).__name__, **context)
        return Err(exc)
    return Ok(value)


def try_option[T](fn: Callable[..., T], *args: Any, **kwargs: Any) -> Option[T]:
    """Call fn and wrap its return value in Some, or return Nothing if it raises.

    The exception is discarded. A None return also yields Nothing.

    Examples:
        >>> try_option(int, '42')
        Some(42)
        >>> try_option(int, 'abc')
        Nothing
    """
    return capture_result(fn, args, kwargs, helper='try_option').ok()


def try_result[T](fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call fn and wrap its return value in Ok, or the raised exception in Err.

    Examples:
        >>> try_result(int, '42')
        Ok(42)
        >>> try_result(int, 'abc').is_err()
        True
    """
    return capture_result(fn, args, kwargs, helper='try_result')


async def try_async_option[T](
    task: Awaitable[T] | Callable[..., Awaitable[T] | T],
    *args: Any,
    **kwargs: Any,
) -> Option[T]:
    """Await task and wrap its value in Some, or return Nothing if it raises.

    Args:
        task: An awaitable, or a callable returning a value or an awaitable.
            A callable that raises before returning is captured as well.
        *args: Positional arguments for a callable task.
        **kwargs: Keyword arguments for a callable task.
    """
    result = await capture_async_result(task, args, kwargs, helper='try_async_option')
    return result.ok()


async def try_async_result[T](
    task: Awaitable[T] | Callable[..., Awaitable[T] | T],
    *args: Any,
    **kwargs: Any,
) -> Result[T, Exception]:
    """Await task and wrap its value in Ok, or the raised exception in Err.

    Args:
        task: An awaitable, or a callable returning a value or an awaitable.
            A callable that raises before returning is captured as well.
        *args: Positional arguments for a callable task.
        **kwargs: Keyword arguments for a callable task.

    Example:
        ```python
        async def fetch(url: str) -> bytes: ...

        result = await try_async_result(fetch, 'https://example.com')
        ```
    """
    return await capture_async_result(task, args, kwargs, helper='try_async_result')


async def awaitable_to_result[T](aw: Awaitable[T]) -> Result[T, Exception]:
    """Await aw and capture its outcome as a Result."""
    return await capture_async_result(aw, helper='awaitable_to_result')
