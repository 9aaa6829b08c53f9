"""Tests for structlog/stdlib logging setup."""

from __future__ import annotations

import logging

import structlog

from gridscaler.infrastructure.config.schema import AppConfig
from gridscaler.infrastructure.logging.setup import (
    build_logging_config,
    configure_logging,
)


def _renderer(cfg: dict) -> object:
    return cfg["formatters"]["structlog"]["processors"][-1]


class TestBuildLoggingConfig:
    def test_console_renderer_in_dev(self) -> None:
        cfg = build_logging_config(AppConfig(environment="dev"))
        assert isinstance(_renderer(cfg), structlog.dev.ConsoleRenderer)

    def test_json_renderer_in_prod(self) -> None:
        cfg = build_logging_config(AppConfig(environment="prod"))
        assert isinstance(_renderer(cfg), structlog.processors.JSONRenderer)

    def test_explicit_format_wins(self) -> None:
        cfg = build_logging_config(AppConfig(environment="prod", log_format="console"))
        assert isinstance(_renderer(cfg), structlog.dev.ConsoleRenderer)

    def test_root_level_from_config(self) -> None:
        cfg = build_logging_config(AppConfig(log_level="WARNING"))
        assert cfg["root"]["level"] == "WARNING"

    def test_library_loggers_quiet_unless_debug(self) -> None:
        cfg = build_logging_config(AppConfig(log_level="INFO"))
        assert cfg["loggers"]["httpx"]["level"] == "WARNING"

        cfg = build_logging_config(AppConfig(log_level="DEBUG"))
        assert cfg["loggers"]["httpx"]["level"] == "DEBUG"

    def test_logs_go_to_stderr(self) -> None:
        cfg = build_logging_config(AppConfig())
        assert cfg["handlers"]["default"]["stream"] == "ext://sys.stderr"


class TestConfigureLogging:
    def test_applies_root_level(self) -> None:
        configure_logging(AppConfig(log_level="ERROR"))
        assert logging.getLogger().level == logging.ERROR
