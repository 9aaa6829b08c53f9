"""Selenium Grid status client: async httpx implementation."""

from __future__ import annotations

import httpx
import structlog
from pydantic import ValidationError

from gridscaler.domain.entities import (
    GridResponseError,
    GridSnapshot,
    GridStatusError,
    GridTransportError,
)

from .schema import GridStatusResponse

log = structlog.get_logger(__name__)

GRID_STATUS_QUERY = (
    "{ grid { maxSession }, sessionsInfo { sessionQueueRequests, "
    "sessions { id, capabilities, nodeId } } }"
)


class HttpxGridStatusClient:
    """Fetches grid snapshots from the Selenium Grid GraphQL endpoint.

    Implements ``GridStatusPort`` from domain.ports.grid_status.

    The client issues exactly one POST per call. Transport failures,
    non-200 responses and undecodable bodies raise; nothing is retried.
    Timeouts come from the injected ``httpx.AsyncClient``; cancelling the
    awaiting task aborts the request.
    """

    def __init__(self, *, url: str, http_client: httpx.AsyncClient) -> None:
        self._url = url
        self._http = http_client

    async def fetch_snapshot(self) -> GridSnapshot:
        try:
            resp = await self._http.post(
                self._url,
                json={"query": GRID_STATUS_QUERY},
            )
        except httpx.HTTPError as e:
            raise GridTransportError(
                f"error requesting selenium grid endpoint: {e}", url=self._url
            ) from e

        if resp.status_code != 200:
            raise GridStatusError(resp.status_code, url=self._url)

        try:
            parsed = GridStatusResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise GridResponseError(
                f"invalid selenium grid response: {e.error_count()} error(s)",
                url=self._url,
            ) from e

        snapshot = parsed.to_snapshot()
        log.debug(
            "grid_status_fetched",
            url=self._url,
            max_sessions_per_node=snapshot.max_sessions_per_node,
            queued=len(snapshot.queued_requests),
            active=len(snapshot.active_sessions),
        )
        return snapshot
