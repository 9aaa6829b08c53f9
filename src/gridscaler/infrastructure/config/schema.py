"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridscaler.domain.entities import ScalerMetadata

from .trigger import parse_scaler_metadata

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class TriggerConfig(BaseModel):
    """Trigger section: the controller's string metadata plus its index.

    Metadata is kept as a plain string map and only validated by
    ``parse_scaler_metadata`` so that malformed values surface as
    ``ScalerConfigError`` at evaluation time.
    """

    metadata: dict[str, str] = Field(
        default_factory=dict,
        description="Trigger metadata (url, browserName, browserVersion, unsafeSsl).",
    )
    index: int = Field(
        default=0,
        description="Trigger index, used only for metric naming.",
    )

    @field_validator("metadata", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        # YAML turns `unsafeSsl: true` into a bool; metadata is a string map.
        # Floats are refused: `browserVersion: 96.10` would become "96.1".
        if isinstance(v, dict):
            out: dict[str, str] = {}
            for k, val in v.items():
                if val is None:
                    continue
                if isinstance(val, float):
                    raise ValueError(
                        f"trigger metadata {k!r} must be a quoted string, got {val!r}"
                    )
                out[str(k)] = str(val)
            return out
        return v

    @field_validator("index")
    @classmethod
    def _validate_index(cls, v: int) -> int:
        if v < 0:
            raise ValueError("trigger index must be >= 0")
        return v


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging/trigger).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="gridscaler", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=10.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Timeout in seconds for the grid status query.",
    )
    http_user_agent: str = Field(
        default="gridscaler/0.1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Trigger (YAML section: trigger.*)
    trigger: TriggerConfig = Field(default_factory=TriggerConfig)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def scaler_metadata(self) -> ScalerMetadata:
        """Validate the trigger section.

        Raises:
            ScalerConfigError: if required metadata is missing or malformed.
        """
        return parse_scaler_metadata(
            self.trigger.metadata, scaler_index=self.trigger.index
        )


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read GRIDSCALER_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - GRIDSCALER_HTTP_TIMEOUT_SECONDS
    - GRIDSCALER_LOG_LEVEL
    - GRIDSCALER_URL
    - GRIDSCALER_BROWSER_NAME
    - GRIDSCALER_UNSAFE_SSL
    """

    model_config = SettingsConfigDict(
        env_prefix="GRIDSCALER_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    # Trigger metadata stays a string map; validated later.
    url: Optional[str] = None
    browser_name: Optional[str] = None
    browser_version: Optional[str] = None
    unsafe_ssl: Optional[str] = None
    metric_type: Optional[str] = None
    scaler_index: Optional[int] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
