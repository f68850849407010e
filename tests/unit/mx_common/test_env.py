"""Tests for environment variable parsing."""

import pytest

from mx_common.config import parse_bool_env, parse_int_env


pytestmark = pytest.mark.unit_common


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_parse_bool_env_truthy(raw: str) -> None:
    assert parse_bool_env(raw) is True


@pytest.mark.parametrize("raw", ["0", "false", "no", ""])
def test_parse_bool_env_falsy(raw: str) -> None:
    assert parse_bool_env(raw) is False


def test_parse_bool_env_unset() -> None:
    assert parse_bool_env(None) is None


def test_parse_int_env() -> None:
    assert parse_int_env("12") == 12
    assert parse_int_env("twelve") is None
    assert parse_int_env(None) is None


def test_env_value_strips_and_treats_blank_as_unset() -> None:
    from mx_common.config import env_value

    env = {"MX_A": "  en-US ", "MX_B": "   "}
    assert env_value("MX_A", env) == "en-US"
    assert env_value("MX_B", env) is None
    assert env_value("MX_C", env) is None


def test_env_value_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    from mx_common.config import env_value

    monkeypatch.setenv("MX_TEST_VALUE", "1")
    assert env_value("MX_TEST_VALUE") == "1"
