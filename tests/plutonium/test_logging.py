"""Tests for diagnostic logging configuration."""

from __future__ import annotations

import logging

import pytest
import structlog

from plutonium.core.logging import _processors, resolve_level, setup_logging


class TestResolveLevel:
    def test_default_is_warning(self, monkeypatch):
        monkeypatch.delenv("PLUTONIUM_LOG_LEVEL", raising=False)
        assert resolve_level() == "WARNING"

    def test_verbose_is_debug(self, monkeypatch):
        monkeypatch.delenv("PLUTONIUM_LOG_LEVEL", raising=False)
        assert resolve_level(verbose=True) == "DEBUG"

    def test_env_overrides_verbose(self, monkeypatch):
        monkeypatch.setenv("PLUTONIUM_LOG_LEVEL", "error")
        assert resolve_level(verbose=True) == "ERROR"

    def test_unknown_level_raises(self, monkeypatch):
        monkeypatch.setenv("PLUTONIUM_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="PLUTONIUM_LOG_LEVEL"):
            resolve_level()


class TestProcessors:
    def test_json_adds_timestamp(self):
        chain, renderer = _processors("json")
        assert any(isinstance(p, structlog.processors.TimeStamper) for p in chain)
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_console_has_no_timestamp(self):
        chain, renderer = _processors("console")
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in chain)
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_unknown_format_raises(self):
        with pytest.raises(ValueError, match="PLUTONIUM_LOG_FORMAT"):
            _processors("xml")


class TestSetupLogging:
    def test_configures_plutonium_logger_only(self, monkeypatch):
        monkeypatch.delenv("PLUTONIUM_LOG_LEVEL", raising=False)
        monkeypatch.delenv("PLUTONIUM_LOG_FORMAT", raising=False)
        setup_logging(verbose=True)

        logger = logging.getLogger("plutonium")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert structlog.get_config()["cache_logger_on_first_use"] is False
