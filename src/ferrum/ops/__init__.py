"""Control-flow helpers: ControlFlow, Break, Continue, FnOnce, FnOnceAsync."""

from ferrum.ops.control_flow import Break, Continue, ControlFlow
from ferrum.ops.fn_once import FnOnce, FnOnceAsync
from ferrum.types.guards import is_control_flow

__all__ = [
    'Break',
    'Continue',
    'ControlFlow',
    'FnOnce',
    'FnOnceAsync',
    'is_control_flow',
]
