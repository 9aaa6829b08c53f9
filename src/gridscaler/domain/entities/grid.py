"""Domain entities for Selenium Grid status snapshots.

Pure value objects: no framework dependencies, no I/O.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

DEFAULT_BROWSER_VERSION = "latest"

# Opaque JSON capability string as reported by the grid.
RawCapability = str

MetricType = Literal["AverageValue", "Value"]

_BROWSER_KEYS = frozenset({"browsername", "browserversion"})


class CapabilityParseError(ValueError):
    """Raised when a raw capability string cannot be decoded."""


@dataclass(frozen=True)
class Capability:
    """Browser identity declared by a session or queued request."""

    browser_name: str = ""
    browser_version: str = ""

    @classmethod
    def from_raw(cls, raw: RawCapability) -> Capability:
        """Decode a raw capability string.

        Missing keys decode to empty strings and unknown keys are ignored.
        A JSON ``null`` decodes to an empty capability.

        Raises:
            CapabilityParseError: if *raw* is not a JSON object or the
                browser fields are not strings.
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise CapabilityParseError(f"invalid capability JSON: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise CapabilityParseError(
                f"capability must be a JSON object, got {type(data).__name__}"
            )

        name = ""
        version = ""
        # Keys match case-insensitively and the last match wins; null leaves
        # the field untouched.
        for key, value in data.items():
            folded = key.lower()
            if folded not in _BROWSER_KEYS or value is None:
                continue
            if not isinstance(value, str):
                raise CapabilityParseError(f"{key} must be a string")
            if folded == "browsername":
                name = value
            else:
                version = value
        return cls(browser_name=name, browser_version=version)


@dataclass(frozen=True)
class SessionRecord:
    """An active session running on a grid node."""

    id: str
    capabilities: RawCapability
    node_id: str


@dataclass(frozen=True)
class GridSnapshot:
    """Point-in-time view of the grid, fetched fresh per evaluation cycle."""

    max_sessions_per_node: int = 0
    queued_requests: tuple[RawCapability, ...] = ()
    active_sessions: tuple[SessionRecord, ...] = ()


@dataclass(frozen=True)
class TargetIdentity:
    """Browser identity the demand is measured for."""

    browser_name: str
    browser_version: str = DEFAULT_BROWSER_VERSION

    @property
    def wants_latest(self) -> bool:
        return self.browser_version == DEFAULT_BROWSER_VERSION


@dataclass(frozen=True)
class DemandMetric:
    """Result of one evaluation cycle."""

    metric_name: str
    value: int

    @property
    def is_active(self) -> bool:
        return self.value > 0


@dataclass(frozen=True)
class MetricSpec:
    """Metric the external controller scales against."""

    metric_name: str
    target_value: int = 1
    metric_type: MetricType = "AverageValue"


@dataclass(frozen=True)
class ScalerMetadata:
    """Validated trigger configuration for one scaler instance."""

    url: str
    browser_name: str
    browser_version: str = DEFAULT_BROWSER_VERSION
    unsafe_ssl: bool = False
    scaler_index: int = 0
    target_value: int = 1
    metric_type: MetricType = "AverageValue"

    @property
    def target(self) -> TargetIdentity:
        return TargetIdentity(
            browser_name=self.browser_name,
            browser_version=self.browser_version,
        )
