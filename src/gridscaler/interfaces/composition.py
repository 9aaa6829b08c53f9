"""Composition root: wires config, HTTP client and use case."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog

from gridscaler.application.use_cases.grid_demand import GridDemandUseCase
from gridscaler.infrastructure.common.http_client import create_http_client
from gridscaler.infrastructure.config.schema import AppConfig
from gridscaler.infrastructure.grid.client import HttpxGridStatusClient

log = structlog.get_logger(__name__)


@asynccontextmanager
async def grid_demand(config: AppConfig) -> AsyncIterator[GridDemandUseCase]:
    """Yield a ready use case; the HTTP client is closed on exit.

    Raises:
        ScalerConfigError: if the trigger metadata is invalid. Raised
            before any network resource is created.
    """
    metadata = config.scaler_metadata()
    http_client = create_http_client(
        timeout_seconds=config.http_timeout_seconds,
        unsafe_ssl=metadata.unsafe_ssl,
        user_agent=config.http_user_agent,
    )
    try:
        grid = HttpxGridStatusClient(url=metadata.url, http_client=http_client)
        log.debug(
            "grid_demand_ready",
            url=metadata.url,
            browser_name=metadata.browser_name,
            browser_version=metadata.browser_version,
            unsafe_ssl=metadata.unsafe_ssl,
        )
        yield GridDemandUseCase(grid=grid, metadata=metadata)
    finally:
        await http_client.aclose()
