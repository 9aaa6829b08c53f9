"""Factory for the shared httpx client."""

from __future__ import annotations

import httpx

DEFAULT_USER_AGENT = "gridscaler/0.1.0"


def create_http_client(
    *,
    timeout_seconds: float,
    unsafe_ssl: bool = False,
    user_agent: str = DEFAULT_USER_AGENT,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` for grid queries.

    ``unsafe_ssl`` disables TLS certificate verification.
    """
    return httpx.AsyncClient(
        timeout=timeout_seconds,
        verify=not unsafe_ssl,
        headers={"User-Agent": user_agent},
    )
