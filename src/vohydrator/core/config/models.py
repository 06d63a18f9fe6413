"""
Configuration data models for vohydrator.

These models define the structure of .vohydrator.json and
~/.config/vohydrator/config.json files, with validation via Pydantic.
"""


from pydantic import BaseModel, ConfigDict, Field


class HydrationConfig(BaseModel):
    """
    Engine behavior.

    Immutable so a single Hydrator can be shared safely.
    """
    max_depth: int | None = Field(
        default=None,
        ge=1,
        description="Maximum nesting depth to hydrate (None for unlimited)"
    )
    null_as_missing: bool = Field(
        default=True,
        description=(
            "Treat an explicit null like an absent key. When False, null for a "
            "non-nullable parameter is rejected instead of reported as missing"
        )
    )

    model_config = ConfigDict(frozen=True)


class LoggingConfig(BaseModel):
    """Logging for the command line tool. The library itself installs no handlers."""
    level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level for the vohydrator CLI"
    )


class VohydratorConfig(BaseModel):
    """
    Top-level vohydrator configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = VohydratorConfig(hydration=HydrationConfig(max_depth=16))
        >>> config.hydration.max_depth
        16
    """
    hydration: HydrationConfig = Field(
        default_factory=HydrationConfig,
        description="Hydration engine settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="CLI logging settings"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        validate_assignment=True,
    )
