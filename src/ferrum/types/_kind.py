"""Identity tags used to recognise container variants at runtime.

Every variant class carries a ``__ferrum_kind__`` class attribute holding a
``(tag, variant)`` pair. The tag objects below are created once per import of
this module, so containers built by a second copy of the library are not
recognised by this one.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    'CONTROL_FLOW_KIND',
    'KIND_ATTR',
    'OPTION_KIND',
    'RESULT_KIND',
    'KindTag',
]

KIND_ATTR: Final = '__ferrum_kind__'


class KindTag:
    """Opaque, identity-compared marker for one container family."""

    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f'<{self._name} kind>'


OPTION_KIND: Final = KindTag('Option')
RESULT_KIND: Final = KindTag('Result')
CONTROL_FLOW_KIND: Final = KindTag('ControlFlow')
