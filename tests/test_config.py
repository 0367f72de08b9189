"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from ferrum import FerrumConfig, get_config, init
from ferrum._config import _env_flag, reset_config


class TestFerrumConfig:
    """Tests for the FerrumConfig dataclass."""

    def test_default_values(self) -> None:
        config = FerrumConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.strict_match is True

    def test_config_is_frozen(self) -> None:
        config = FerrumConfig()
        with pytest.raises(AttributeError):
            config.strict_match = False  # type: ignore[misc]


class TestEnvFlag:
    """Tests for _env_flag()."""

    @pytest.mark.parametrize('raw', ['1', 'true', 'YES', 'On'])
    def test_truthy(self, raw: str) -> None:
        with patch.dict(os.environ, {'FERRUM_STRICT_MATCH': raw}):
            assert _env_flag('FERRUM_STRICT_MATCH') is True

    @pytest.mark.parametrize('raw', ['0', 'false', 'No', 'OFF'])
    def test_falsy(self, raw: str) -> None:
        with patch.dict(os.environ, {'FERRUM_STRICT_MATCH': raw}):
            assert _env_flag('FERRUM_STRICT_MATCH') is False

    def test_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _env_flag('FERRUM_STRICT_MATCH') is None

    def test_unknown_value_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'FERRUM_JSON_LOGS': 'maybe'}), caplog.at_level(logging.WARNING):
            assert _env_flag('FERRUM_JSON_LOGS') is None
        assert 'FERRUM_JSON_LOGS' in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_defaults_without_init(self) -> None:
        assert get_config() == FerrumConfig()

    def test_explicit_values(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init(strict_match=False, json_logs=False)
        assert config == FerrumConfig(log_level=None, json_logs=False, strict_match=False)
        assert get_config() is config

    def test_environment_fallback(self) -> None:
        env = {'FERRUM_STRICT_MATCH': 'off', 'FERRUM_JSON_LOGS': '0'}
        with patch.dict(os.environ, env, clear=True):
            config = init()
        assert config.strict_match is False
        assert config.json_logs is False

    def test_explicit_beats_environment(self) -> None:
        with patch.dict(os.environ, {'FERRUM_STRICT_MATCH': 'off'}, clear=True):
            assert init(strict_match=True).strict_match is True

    def test_log_level_configures_logging(self) -> None:
        with patch.dict(os.environ, {'FERRUM_LOG_LEVEL': 'DEBUG'}, clear=True):
            config = init()
        assert config.log_level == 'DEBUG'
        assert logging.getLogger('ferrum').level == logging.DEBUG

    def test_reset(self) -> None:
        init(strict_match=False)
        reset_config()
        assert get_config().strict_match is True
