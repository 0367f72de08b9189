"""ferrum: Rust-style Option and Result types for Python 3.13+.

Flat imports (preferred):
    from ferrum import Option, Some, Nothing, Result, Ok, Err
    from ferrum import try_result, try_async_result, match, safe

Submodule imports (for organization):
    from ferrum.types import Option, Result, is_option
    from ferrum.sync import Once, Lazy, Mutex, RwLock, Channel
    from ferrum.ops import ControlFlow, Break, Continue, FnOnce
"""

# Types
from ferrum.types import (
    AsyncIOResult,
    AsyncOption,
    AsyncResult,
    AsyncSafeResult,
    AsyncVoidIOResult,
    AsyncVoidResult,
    Err,
    IOResult,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    SafeResult,
    Some,
    VoidIOResult,
    VoidResult,
    assert_option,
    assert_result,
    is_option,
    is_result,
    option_of,
)

# Bridging
from ferrum.bridge import (
    awaitable_to_result,
    try_async_option,
    try_async_result,
    try_option,
    try_result,
)

# Decorators
from ferrum.decorators import safe, safe_async

# Constants
from ferrum.constants import RESULT_FALSE, RESULT_TRUE, RESULT_VOID, RESULT_ZERO

# Dispatch
from ferrum.match import match

# Errors
from ferrum.errors import (
    ContractError,
    FnOnceConsumedError,
    GuardReleasedError,
    NoneValueError,
    NotAContainerError,
    NotAnOptionError,
    NotAResultError,
    UnwrapError,
    UnzipError,
)

# Configuration and logging
from ferrum._config import FerrumConfig, get_config, init
from ferrum._logging import configure_logging, get_logger, reset_logging

__all__ = [
    'RESULT_FALSE',
    'RESULT_TRUE',
    'RESULT_VOID',
    'RESULT_ZERO',
    'AsyncIOResult',
    'AsyncOption',
    'AsyncResult',
    'AsyncSafeResult',
    'AsyncVoidIOResult',
    'AsyncVoidResult',
    'ContractError',
    'Err',
    'FerrumConfig',
    'FnOnceConsumedError',
    'GuardReleasedError',
    'IOResult',
    'NoneValueError',
    'NotAContainerError',
    'NotAResultError',
    'NotAnOptionError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'SafeResult',
    'Some',
    'UnwrapError',
    'UnzipError',
    'VoidIOResult',
    'VoidResult',
    'assert_option',
    'assert_result',
    'awaitable_to_result',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'is_option',
    'is_result',
    'match',
    'option_of',
    'reset_logging',
    'safe',
    'safe_async',
    'try_async_option',
    'try_async_result',
    'try_option',
    'try_result',
]
