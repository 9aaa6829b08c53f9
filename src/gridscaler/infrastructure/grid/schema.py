"""Pydantic models for the Selenium Grid GraphQL status response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridscaler.domain.entities.grid import GridSnapshot, SessionRecord


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class GridInfo(_WireModel):
    max_session: int = Field(default=0, alias="maxSession")

    @field_validator("max_session", mode="before")
    @classmethod
    def _null_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class SessionInfo(_WireModel):
    id: str = ""
    capabilities: str = ""
    node_id: str = Field(default="", alias="nodeId")

    @field_validator("id", "capabilities", "node_id", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class SessionsInfo(_WireModel):
    session_queue_requests: list[str] = Field(
        default_factory=list, alias="sessionQueueRequests"
    )
    sessions: list[SessionInfo] = Field(default_factory=list)

    @field_validator("session_queue_requests", "sessions", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class GridData(_WireModel):
    grid: GridInfo = Field(default_factory=GridInfo)
    sessions_info: SessionsInfo = Field(
        default_factory=SessionsInfo, alias="sessionsInfo"
    )

    @field_validator("grid", "sessions_info", mode="before")
    @classmethod
    def _null_is_default(cls, v: Any) -> Any:
        return {} if v is None else v


class GridStatusResponse(_WireModel):
    """Top-level GraphQL envelope: ``{"data": {...}}``."""

    data: GridData = Field(default_factory=GridData)

    @field_validator("data", mode="before")
    @classmethod
    def _null_is_default(cls, v: Any) -> Any:
        return {} if v is None else v

    def to_snapshot(self) -> GridSnapshot:
        info = self.data.sessions_info
        return GridSnapshot(
            max_sessions_per_node=self.data.grid.max_session,
            queued_requests=tuple(info.session_queue_requests),
            active_sessions=tuple(
                SessionRecord(
                    id=s.id,
                    capabilities=s.capabilities,
                    node_id=s.node_id,
                )
                for s in info.sessions
            ),
        )
