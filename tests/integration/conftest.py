"""Shared fixtures for integration tests.

These tests use real infrastructure components (config loader,
HttpxGridStatusClient, composition root) with mocked HTTP via respx.
"""

from __future__ import annotations

import pytest
import respx
from grid_helpers import GRID_URL

from gridscaler.infrastructure.config import AppConfig, load_config


@pytest.fixture()
def respx_mock() -> respx.MockRouter:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture()
def chrome_config() -> AppConfig:
    """Config targeting chrome/latest on the mocked grid."""
    return load_config(
        cli_overrides={"url": GRID_URL, "browser_name": "chrome", "scaler_index": 0},
    )
