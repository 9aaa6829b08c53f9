"""Scaler error hierarchy.

Every fatal per-cycle failure derives from ``GridScalerError`` so callers
can treat the cycle as failed with a single ``except``.
"""

from __future__ import annotations


class GridScalerError(Exception):
    """Base error for a failed evaluation cycle."""


class ScalerConfigError(GridScalerError):
    """Raised when trigger metadata is missing or malformed."""


class GridFetchError(GridScalerError):
    """Base error for grid status queries."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class GridTransportError(GridFetchError):
    """Raised when the grid endpoint cannot be reached or times out."""


class GridStatusError(GridFetchError):
    """Raised when the grid endpoint answers with a non-200 status."""

    def __init__(self, status_code: int, *, url: str) -> None:
        super().__init__(f"selenium grid returned {status_code}", url=url)
        self.status_code = status_code


class GridResponseError(GridFetchError):
    """Raised when the grid response body cannot be decoded."""
