"""Tests for match() dispatch."""

from typing import Any

import pytest

from ferrum import Err, NotAContainerError, Nothing, Ok, Some, configure_logging, init, match
from ferrum._logging import add_log_hook


class TestMatchOption:
    """Dispatch on Some and Nothing."""

    def test_some_handler_gets_payload(self):
        assert match(Some(2), some=lambda v: v * 10, nothing=lambda: 0) == 20

    def test_nothing_handler(self):
        assert match(Nothing, some=lambda v: v, nothing=lambda: 'empty') == 'empty'

    def test_fallback_covers_missing_handler(self):
        assert match(Nothing, some=lambda v: v, _=lambda: 'fallback') == 'fallback'
        assert match(Some(1), nothing=lambda: 0, _=lambda: 'fallback') == 'fallback'

    def test_specific_handler_wins_over_fallback(self):
        assert match(Some(1), some=lambda v: 'some', _=lambda: 'fallback') == 'some'

    def test_incomplete_handlers_raise(self):
        with pytest.raises(TypeError, match='some= and nothing='):
            match(Some(1), some=lambda v: v)

    def test_result_handlers_do_not_cover_option(self):
        with pytest.raises(TypeError):
            match(Some(1), ok=lambda v: v, err=lambda e: e)


class TestMatchResult:
    """Dispatch on Ok and Err."""

    def test_ok_handler(self):
        assert match(Ok(3), ok=lambda v: v + 1, err=lambda e: -1) == 4

    def test_err_handler(self):
        assert match(Err('boom'), ok=lambda v: v, err=lambda e: f'failed: {e}') == 'failed: boom'

    def test_fallback(self):
        assert match(Err('boom'), ok=str, _=lambda: 'failed') == 'failed'

    def test_handler_can_return_none(self):
        assert match(Ok(1), ok=lambda v: None, err=lambda e: e) is None

    def test_incomplete_handlers_raise(self):
        with pytest.raises(TypeError, match='ok= and err='):
            match(Ok(1), err=lambda e: e)


class TestMatchNonContainer:
    """Values that are neither Option nor Result."""

    def test_fallback_is_called(self):
        assert match(42, some=lambda v: v, nothing=lambda: 0, _=lambda: 'other') == 'other'

    @pytest.mark.parametrize('value', [None, 42, 'text', [Some(1)], object()])
    def test_strict_by_default(self, value):
        with pytest.raises(NotAContainerError):
            match(value, some=lambda v: v, nothing=lambda: 0)

    def test_permissive_mode_is_a_logged_no_op(self, spy):
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)
        init(strict_match=False)

        handler = spy('called')
        assert match(42, some=handler, nothing=handler) is None
        assert handler.count == 0
        warnings = [e for e in received if e.get('level') == 'warning']
        assert len(warnings) == 1
        assert warnings[0]['value'] == '42'
