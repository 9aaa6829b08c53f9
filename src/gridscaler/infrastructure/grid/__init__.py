from .client import GRID_STATUS_QUERY, HttpxGridStatusClient
from .schema import GridStatusResponse

__all__ = ["GRID_STATUS_QUERY", "GridStatusResponse", "HttpxGridStatusClient"]
