"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "gridscaler",
    "environment": "dev",
    "http": {
        "timeout_seconds": 10.0,
        "user_agent": "gridscaler/0.1.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "trigger": {
        "metadata": {},
        "index": 0,
    },
}
