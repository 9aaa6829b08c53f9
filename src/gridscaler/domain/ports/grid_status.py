"""Port for querying grid status."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from gridscaler.domain.entities.grid import GridSnapshot


@runtime_checkable
class GridStatusPort(Protocol):
    """Async interface for fetching a fresh grid snapshot."""

    async def fetch_snapshot(self) -> GridSnapshot:
        """Query the grid once and return the decoded snapshot.

        Raises:
            GridFetchError: on transport failure, non-200 status or an
                undecodable body. Never retried.
        """
        ...
