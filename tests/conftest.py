"""Shared test fixtures for gridscaler test suite."""

from __future__ import annotations

import os
from typing import Any

import pytest
from grid_helpers import RecordingLogger, cap, session

from gridscaler.domain.entities import GridSnapshot, TargetIdentity


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop GRIDSCALER_* variables so host env cannot leak into tests."""
    for key in list(os.environ):
        if key.upper().startswith("GRIDSCALER_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def chrome_latest() -> TargetIdentity:
    return TargetIdentity(browser_name="chrome")


@pytest.fixture()
def busy_snapshot() -> GridSnapshot:
    """3 matching queued chrome requests and 1 matching chrome session.

    The versioned queued chrome request does not match a "latest" target.
    """
    return GridSnapshot(
        max_sessions_per_node=2,
        queued_requests=(
            cap("chrome"),
            cap("chrome", ""),
            cap("chrome"),
            cap("chrome", "96.0"),
            cap("firefox", "95.0"),
        ),
        active_sessions=(
            session(cap("chrome", "91.0"), 0),
            session(cap("MicrosoftEdge", "96.0"), 1),
        ),
    )


@pytest.fixture()
def grid_payload() -> dict[str, Any]:
    """GraphQL response body matching ``busy_snapshot``."""
    return {
        "data": {
            "grid": {"maxSession": 2},
            "sessionsInfo": {
                "sessionQueueRequests": [
                    cap("chrome"),
                    cap("chrome", ""),
                    cap("chrome"),
                    cap("chrome", "96.0"),
                    cap("firefox", "95.0"),
                ],
                "sessions": [
                    {
                        "id": "session-0",
                        "capabilities": cap("chrome", "91.0"),
                        "nodeId": "node-0",
                    },
                    {
                        "id": "session-1",
                        "capabilities": cap("MicrosoftEdge", "96.0"),
                        "nodeId": "node-1",
                    },
                ],
            },
        }
    }
