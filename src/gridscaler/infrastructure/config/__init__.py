from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, TriggerConfig
from .trigger import parse_scaler_metadata

__all__ = [
    "AppConfig",
    "EnvOverrides",
    "TriggerConfig",
    "load_config",
    "parse_scaler_metadata",
]
