"""Integration tests for one full evaluation cycle.

Config -> composition root -> httpx client -> demand calculator, with the
grid endpoint mocked by respx.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import respx
from grid_helpers import GRID_URL

from gridscaler.domain.entities import (
    GridResponseError,
    GridStatusError,
    GridTransportError,
    ScalerConfigError,
)
from gridscaler.infrastructure.config import AppConfig, load_config
from gridscaler.interfaces.composition import grid_demand

pytestmark = pytest.mark.integration


class TestEvaluationCycle:
    async def test_busy_grid(
        self,
        respx_mock: respx.MockRouter,
        chrome_config: AppConfig,
        grid_payload: dict[str, Any],
    ) -> None:
        respx_mock.post(GRID_URL).respond(200, json=grid_payload)

        async with grid_demand(chrome_config) as uc:
            metric = await uc.get_metric()

        assert metric.metric_name == "s0-seleniumgrid-chrome"
        assert metric.value == 2
        assert metric.is_active is True

    async def test_unbounded_capacity(
        self,
        respx_mock: respx.MockRouter,
        chrome_config: AppConfig,
        grid_payload: dict[str, Any],
    ) -> None:
        grid_payload["data"]["grid"]["maxSession"] = 0
        respx_mock.post(GRID_URL).respond(200, json=grid_payload)

        async with grid_demand(chrome_config) as uc:
            assert await uc.get_demand() == 4

    async def test_idle_grid(
        self, respx_mock: respx.MockRouter, chrome_config: AppConfig
    ) -> None:
        respx_mock.post(GRID_URL).respond(
            200, json={"data": {"grid": {"maxSession": 1}, "sessionsInfo": {}}}
        )
        async with grid_demand(chrome_config) as uc:
            assert await uc.is_active() is False

    async def test_one_request_per_evaluation(
        self,
        respx_mock: respx.MockRouter,
        chrome_config: AppConfig,
        grid_payload: dict[str, Any],
    ) -> None:
        route = respx_mock.post(GRID_URL).respond(200, json=grid_payload)
        async with grid_demand(chrome_config) as uc:
            await uc.get_demand()
            await uc.is_active()
        assert route.call_count == 2

    async def test_non_200_is_status_error(
        self, respx_mock: respx.MockRouter, chrome_config: AppConfig
    ) -> None:
        route = respx_mock.post(GRID_URL).respond(503)
        async with grid_demand(chrome_config) as uc:
            with pytest.raises(GridStatusError):
                await uc.get_demand()
        assert route.call_count == 1  # no retry

    async def test_garbage_body_is_response_error(
        self, respx_mock: respx.MockRouter, chrome_config: AppConfig
    ) -> None:
        respx_mock.post(GRID_URL).respond(200, content=b"not json")
        async with grid_demand(chrome_config) as uc:
            with pytest.raises(GridResponseError):
                await uc.get_demand()

    async def test_connect_error_is_transport_error(
        self, respx_mock: respx.MockRouter, chrome_config: AppConfig
    ) -> None:
        respx_mock.post(GRID_URL).mock(side_effect=httpx.ConnectError("refused"))
        async with grid_demand(chrome_config) as uc:
            with pytest.raises(GridTransportError):
                await uc.get_demand()

    async def test_invalid_metadata_fails_before_request(
        self, respx_mock: respx.MockRouter
    ) -> None:
        route = respx_mock.post(GRID_URL).respond(200, json={"data": {}})
        config = load_config(cli_overrides={"url": GRID_URL})

        with pytest.raises(ScalerConfigError, match="no browser name"):
            async with grid_demand(config):
                pass  # pragma: no cover

        assert route.call_count == 0
