"""Port for the logging capability injected into pure domain code."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EventLoggerPort(Protocol):
    """Subset of the structlog bound-logger API used by domain services."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...
