"""Tests for environment helpers."""
from __future__ import annotations

import logging

import pytest

from sample_stats.common.utils import env_bool, env_str, log_level_from_env


class TestEnvStr:
    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("SS_TEST_NAME", raising=False)
        assert env_str("SS_TEST_NAME", "fallback") == "fallback"

    def test_value_returned(self, monkeypatch):
        monkeypatch.setenv("SS_TEST_NAME", "Sensor-X")
        assert env_str("SS_TEST_NAME", "fallback") == "Sensor-X"


class TestEnvBool:
    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("SS_TEST_FLAG", raw)
        assert env_bool("SS_TEST_FLAG", False) is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
    def test_falsy(self, monkeypatch, raw):
        monkeypatch.setenv("SS_TEST_FLAG", raw)
        assert env_bool("SS_TEST_FLAG", True) is False

    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("SS_TEST_FLAG", raising=False)
        assert env_bool("SS_TEST_FLAG", True) is True

    def test_invalid_falls_back_and_warns(self, monkeypatch, caplog):
        monkeypatch.setenv("SS_TEST_FLAG", "maybe")
        with caplog.at_level(logging.WARNING, logger="sample_stats.common.utils"):
            assert env_bool("SS_TEST_FLAG", True) is True
        assert "SS_TEST_FLAG" in caplog.text


class TestLogLevelFromEnv:
    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("SS_TEST_LEVEL", raising=False)
        assert log_level_from_env("SS_TEST_LEVEL") == logging.WARNING

    def test_name_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("SS_TEST_LEVEL", "debug")
        assert log_level_from_env("SS_TEST_LEVEL") == logging.DEBUG

    def test_numeric(self, monkeypatch):
        monkeypatch.setenv("SS_TEST_LEVEL", "20")
        assert log_level_from_env("SS_TEST_LEVEL") == logging.INFO

    def test_invalid_falls_back(self, monkeypatch):
        monkeypatch.setenv("SS_TEST_LEVEL", "LOUD")
        assert log_level_from_env("SS_TEST_LEVEL", logging.ERROR) == logging.ERROR
