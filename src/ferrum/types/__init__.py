"""Core types: Option, Some, Nothing, Result, Ok, Err, plus guards and aliases."""

from ferrum.types.aliases import (
    AsyncIOResult,
    AsyncSafeResult,
    AsyncVoidIOResult,
    AsyncVoidResult,
    IOResult,
    SafeResult,
    VoidIOResult,
    VoidResult,
)
from ferrum.types.guards import assert_option, assert_result, is_control_flow, is_option, is_result
from ferrum.types.option import AsyncOption, Nothing, NothingType, Option, Some, option_of
from ferrum.types.result import AsyncResult, Err, Ok, Result

__all__ = [
    'AsyncIOResult',
    'AsyncOption',
    'AsyncResult',
    'AsyncSafeResult',
    'AsyncVoidIOResult',
    'AsyncVoidResult',
    'Err',
    'IOResult',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'SafeResult',
    'Some',
    'VoidIOResult',
    'VoidResult',
    'assert_option',
    'assert_result',
    'is_control_flow',
    'is_option',
    'is_result',
    'option_of',
]
