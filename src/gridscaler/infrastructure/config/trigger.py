"""Trigger metadata parsing: string map -> validated ScalerMetadata."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gridscaler.domain.entities import (
    DEFAULT_BROWSER_VERSION,
    MetricType,
    ScalerConfigError,
    ScalerMetadata,
)

# Accepted spellings, as in Go's strconv.ParseBool.
_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


class TriggerMetadata(BaseModel):
    """Raw trigger metadata as supplied by the scaling controller."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: str = Field(min_length=1)
    browser_name: str = Field(alias="browserName", min_length=1)
    browser_version: str = Field(
        default=DEFAULT_BROWSER_VERSION, alias="browserVersion"
    )
    unsafe_ssl: bool = Field(default=False, alias="unsafeSsl")
    metric_type: MetricType = Field(default="AverageValue", alias="metricType")

    @field_validator("browser_version", mode="before")
    @classmethod
    def _default_version(cls, v: Any) -> Any:
        if v is None or v == "":
            return DEFAULT_BROWSER_VERSION
        return v

    @field_validator("unsafe_ssl", mode="before")
    @classmethod
    def _parse_unsafe_ssl(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return v
        return parse_bool(str(v))

    @field_validator("metric_type", mode="before")
    @classmethod
    def _default_metric_type(cls, v: Any) -> Any:
        if v is None or v == "":
            return "AverageValue"
        return v


def _describe(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err["loc"]) or "metadata"
    return f"{loc}: {err['msg']}"


def parse_scaler_metadata(
    trigger_metadata: Mapping[str, Any],
    *,
    scaler_index: int = 0,
) -> ScalerMetadata:
    """Validate trigger metadata.

    Raises:
        ScalerConfigError: if ``url`` or ``browserName`` is missing or empty,
            or ``unsafeSsl``/``metricType`` cannot be parsed.
    """
    if not trigger_metadata.get("url"):
        raise ScalerConfigError("no selenium grid url given in metadata")
    if not trigger_metadata.get("browserName"):
        raise ScalerConfigError("no browser name given in metadata")

    try:
        parsed = TriggerMetadata.model_validate(dict(trigger_metadata))
    except ValidationError as e:
        raise ScalerConfigError(
            f"error parsing selenium grid metadata: {_describe(e)}"
        ) from e

    return ScalerMetadata(
        url=parsed.url,
        browser_name=parsed.browser_name,
        browser_version=parsed.browser_version,
        unsafe_ssl=parsed.unsafe_ssl,
        scaler_index=scaler_index,
        metric_type=parsed.metric_type,
    )
