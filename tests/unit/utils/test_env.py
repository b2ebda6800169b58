"""Tests for environment variable helpers."""

import pytest

from mcp_tracker.utils.env import (
    getenv_first,
    is_env_extended_truthy,
    is_env_ssl_verify,
)
from mcp_tracker.utils.io import is_read_only_mode


class TestIsEnvExtendedTruthy:
    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "y", "on"])
    def test_truthy_values(self, monkeypatch, value):
        monkeypatch.setenv("FLAG", value)
        assert is_env_extended_truthy("FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "", "maybe"])
    def test_falsy_values(self, monkeypatch, value):
        monkeypatch.setenv("FLAG", value)
        assert is_env_extended_truthy("FLAG") is False

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("FLAG", raising=False)
        assert is_env_extended_truthy("FLAG") is False
        assert is_env_extended_truthy("FLAG", "yes") is True


class TestIsEnvSslVerify:
    def test_defaults_to_true(self, monkeypatch):
        monkeypatch.delenv("JIRA_SSL_VERIFY", raising=False)
        assert is_env_ssl_verify("JIRA_SSL_VERIFY") is True

    @pytest.mark.parametrize("value", ["false", "False", "0", "no"])
    def test_disabled(self, monkeypatch, value):
        monkeypatch.setenv("JIRA_SSL_VERIFY", value)
        assert is_env_ssl_verify("JIRA_SSL_VERIFY") is False

    def test_unrecognised_value_keeps_verification(self, monkeypatch):
        monkeypatch.setenv("JIRA_SSL_VERIFY", "off-ish")
        assert is_env_ssl_verify("JIRA_SSL_VERIFY") is True


class TestGetenvFirst:
    def test_first_set_wins(self, monkeypatch):
        monkeypatch.setenv("A", "")
        monkeypatch.setenv("B", "second")
        monkeypatch.setenv("C", "third")
        assert getenv_first("A", "B", "C") == "second"

    def test_none_when_unset(self, monkeypatch):
        monkeypatch.delenv("A", raising=False)
        assert getenv_first("A") is None


def test_is_read_only_mode(monkeypatch):
    monkeypatch.delenv("READ_ONLY_MODE", raising=False)
    assert is_read_only_mode() is False
    monkeypatch.setenv("READ_ONLY_MODE", "true")
    assert is_read_only_mode() is True
