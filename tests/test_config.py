"""Tests for configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from kettle_result import Collection, Equality, KettleConfig, get_config, init
from kettle_result.config import _detect_json_logs, _detect_union_equality

pytestmark = pytest.mark.usefixtures('fresh_config')


class TestEqualityEnum:
    def test_values(self) -> None:
        assert Equality.VALUE.value == 'value'
        assert Equality.IDENTITY.value == 'identity'

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            Equality('deep')


class TestKettleConfig:
    def test_default_values(self) -> None:
        config = KettleConfig()
        assert config.union_equality == Equality.VALUE
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = KettleConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectUnionEquality:
    """Tests for _detect_union_equality()."""

    def test_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_union_equality() == Equality.VALUE

    def test_env_identity(self) -> None:
        with patch.dict(os.environ, {'KETTLE_UNION_EQUALITY': 'IDENTITY'}):
            assert _detect_union_equality() == Equality.IDENTITY

    def test_env_unknown_falls_back(self) -> None:
        with patch.dict(os.environ, {'KETTLE_UNION_EQUALITY': 'deep'}):
            assert _detect_union_equality() == Equality.VALUE


class TestDetectJsonLogs:
    def test_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_json_logs() is True

    def test_console(self) -> None:
        with patch.dict(os.environ, {'KETTLE_LOG_FORMAT': 'console'}):
            assert _detect_json_logs() is False

    def test_unknown_falls_back(self) -> None:
        with patch.dict(os.environ, {'KETTLE_LOG_FORMAT': 'xml'}):
            assert _detect_json_logs() is True


class TestInit:
    """Tests for init() and get_config()."""

    def test_init_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == KettleConfig()
        assert get_config() is config

    def test_init_accepts_strings(self) -> None:
        assert init(union_equality='identity').union_equality == Equality.IDENTITY

    def test_init_invalid_string_raises(self) -> None:
        with pytest.raises(ValueError):
            init(union_equality='deep')

    def test_init_log_level_from_env(self) -> None:
        with patch.dict(os.environ, {'KETTLE_LOG_LEVEL': 'DEBUG'}):
            assert init().log_level == 'DEBUG'

    def test_get_config_is_lazy(self) -> None:
        with patch.dict(os.environ, {'KETTLE_UNION_EQUALITY': 'identity'}):
            config = get_config()
        assert config.union_equality == Equality.IDENTITY
        assert config.log_level is None
        assert get_config() is config

    def test_union_uses_configured_equality(self) -> None:
        a = Collection.from_iterable([('foo', [1])])
        b = Collection.from_iterable([('foo', [1])])
        calls: list[str] = []

        def resolve(value: list[int], other_value: list[int], key: str) -> list[int]:
            calls.append(key)
            return other_value

        init(union_equality=Equality.VALUE)
        a.union(b, resolve)
        assert calls == []

        init(union_equality=Equality.IDENTITY)
        a.union(b, resolve)
        assert calls == ['foo']

    def test_explicit_equality_overrides_config(self) -> None:
        a = Collection.from_iterable([('foo', [1])])
        b = Collection.from_iterable([('foo', [1])])
        init(union_equality=Equality.IDENTITY)
        result = a.union(b, lambda v, ov, k: ['resolved'], equality=Equality.VALUE)
        assert result.get('foo').unwrap() == [1]
