"""Tests for trigger metadata parsing."""

from __future__ import annotations

import pytest

from gridscaler.domain.entities import ScalerConfigError
from gridscaler.infrastructure.config.trigger import parse_bool, parse_scaler_metadata

_BASE = {"url": "http://selenium-hub:4444/graphql", "browserName": "chrome"}


class TestParseBool:
    @pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_spellings(self, value: str) -> None:
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_spellings(self, value: str) -> None:
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", ["", "yes", "tRuE", "2"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_bool(value)


class TestParseScalerMetadata:
    def test_minimal(self) -> None:
        meta = parse_scaler_metadata(_BASE)
        assert meta.url == _BASE["url"]
        assert meta.browser_name == "chrome"
        assert meta.browser_version == "latest"
        assert meta.unsafe_ssl is False
        assert meta.scaler_index == 0
        assert meta.target_value == 1
        assert meta.metric_type == "AverageValue"

    def test_all_fields(self) -> None:
        meta = parse_scaler_metadata(
            {
                **_BASE,
                "browserVersion": "91.0",
                "unsafeSsl": "true",
                "metricType": "Value",
            },
            scaler_index=4,
        )
        assert meta.browser_version == "91.0"
        assert meta.unsafe_ssl is True
        assert meta.scaler_index == 4
        assert meta.metric_type == "Value"

    def test_empty_version_defaults_to_latest(self) -> None:
        meta = parse_scaler_metadata({**_BASE, "browserVersion": ""})
        assert meta.browser_version == "latest"

    def test_unknown_keys_ignored(self) -> None:
        meta = parse_scaler_metadata({**_BASE, "platformName": "linux"})
        assert meta.browser_name == "chrome"

    def test_missing_url(self) -> None:
        with pytest.raises(ScalerConfigError, match="no selenium grid url"):
            parse_scaler_metadata({"browserName": "chrome"})

    def test_empty_url(self) -> None:
        with pytest.raises(ScalerConfigError, match="no selenium grid url"):
            parse_scaler_metadata({"url": "", "browserName": "chrome"})

    def test_missing_browser_name(self) -> None:
        with pytest.raises(ScalerConfigError, match="no browser name"):
            parse_scaler_metadata({"url": _BASE["url"]})

    def test_invalid_unsafe_ssl(self) -> None:
        with pytest.raises(ScalerConfigError, match="unsafeSsl"):
            parse_scaler_metadata({**_BASE, "unsafeSsl": "maybe"})

    def test_invalid_metric_type(self) -> None:
        with pytest.raises(ScalerConfigError, match="metricType"):
            parse_scaler_metadata({**_BASE, "metricType": "Utilization"})
