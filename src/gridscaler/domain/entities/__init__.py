from .errors import (
    GridFetchError,
    GridResponseError,
    GridScalerError,
    GridStatusError,
    GridTransportError,
    ScalerConfigError,
)
from .grid import (
    DEFAULT_BROWSER_VERSION,
    Capability,
    CapabilityParseError,
    DemandMetric,
    GridSnapshot,
    MetricSpec,
    MetricType,
    RawCapability,
    ScalerMetadata,
    SessionRecord,
    TargetIdentity,
)

__all__ = [
    "DEFAULT_BROWSER_VERSION",
    "Capability",
    "CapabilityParseError",
    "DemandMetric",
    "GridFetchError",
    "GridResponseError",
    "GridScalerError",
    "GridSnapshot",
    "GridStatusError",
    "GridTransportError",
    "MetricSpec",
    "MetricType",
    "RawCapability",
    "ScalerConfigError",
    "ScalerMetadata",
    "SessionRecord",
    "TargetIdentity",
]
