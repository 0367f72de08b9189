"""Shorthand Result aliases for common success and error shapes."""

from __future__ import annotations

from typing import Never

from ferrum.types.result import AsyncResult, Result

__all__ = [
    'AsyncIOResult',
    'AsyncSafeResult',
    'AsyncVoidIOResult',
    'AsyncVoidResult',
    'IOResult',
    'SafeResult',
    'VoidIOResult',
    'VoidResult',
]

# Success carries no value
type VoidResult[E = Exception] = Result[None, E]
type AsyncVoidResult[E = Exception] = AsyncResult[None, E]

# Error is a plain Exception
type IOResult[T] = Result[T, Exception]
type AsyncIOResult[T] = AsyncResult[T, Exception]
type VoidIOResult = IOResult[None]
type AsyncVoidIOResult = AsyncIOResult[None]

# Cannot fail
type SafeResult[T] = Result[T, Never]
type AsyncSafeResult[T] = AsyncResult[T, Never]
