"""Shared, immutable Result instances for the most common success values."""

from __future__ import annotations

from typing import Final

from ferrum.types.result import Ok

__all__ = ['RESULT_FALSE', 'RESULT_TRUE', 'RESULT_VOID', 'RESULT_ZERO']

RESULT_TRUE: Final[Ok[bool]] = Ok(True)
RESULT_FALSE: Final[Ok[bool]] = Ok(False)
RESULT_ZERO: Final[Ok[int]] = Ok(0)
RESULT_VOID: Final[Ok[None]] = Ok()
