from __future__ import annotations

import asyncio
from collections.abc import Sequence

import structlog

from gridscaler.application.demand_calculator import compute_demand
from gridscaler.domain.entities import (
    DemandMetric,
    GridFetchError,
    MetricSpec,
    ScalerMetadata,
)
from gridscaler.domain.ports import EventLoggerPort, GridStatusPort

log = structlog.get_logger(__name__)

_METRIC_NAME_REPLACED = '/.:%()" <>$'


def normalize_metric_name(name: str) -> str:
    """Replace characters not allowed in external metric names with '-'."""
    return "".join("-" if ch in _METRIC_NAME_REPLACED else ch for ch in name)


def metric_name_for(metadata: ScalerMetadata) -> str:
    """Build the indexed metric name, e.g. ``s0-seleniumgrid-chrome``."""
    base = normalize_metric_name(f"seleniumgrid-{metadata.browser_name}")
    return f"s{metadata.scaler_index}-{base}"


class GridDemandUseCase:
    """One evaluation cycle: fetch a grid snapshot and compute demand."""

    def __init__(
        self,
        *,
        grid: GridStatusPort,
        metadata: ScalerMetadata,
        logger: EventLoggerPort | None = None,
    ) -> None:
        self._grid = grid
        self._metadata = metadata
        self._log = logger if logger is not None else log

    async def get_demand(self) -> int:
        try:
            snapshot = await self._grid.fetch_snapshot()
        except GridFetchError as e:
            self._log.warning(
                "grid_demand_failed",
                url=e.url,
                browser_name=self._metadata.browser_name,
                error=str(e),
            )
            raise
        return compute_demand(snapshot, self._metadata.target, logger=self._log)

    async def get_metric(self) -> DemandMetric:
        value = await self.get_demand()
        return DemandMetric(metric_name=metric_name_for(self._metadata), value=value)

    async def is_active(self) -> bool:
        return await self.get_demand() > 0

    def metric_spec(self) -> MetricSpec:
        return MetricSpec(
            metric_name=metric_name_for(self._metadata),
            target_value=self._metadata.target_value,
            metric_type=self._metadata.metric_type,
        )


async def evaluate_targets(
    use_cases: Sequence[GridDemandUseCase],
) -> list[DemandMetric]:
    """Evaluate several scalers concurrently; each performs its own fetch.

    The first fatal error propagates, as with a single evaluation.
    """
    return list(await asyncio.gather(*(uc.get_metric() for uc in use_cases)))
