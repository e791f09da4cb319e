"""Application configuration using Pydantic BaseSettings.

All settings are loaded from ``NAVASSIST_``-prefixed environment variables.
The defaults reproduce the classic 11x11 demo grid with 15 obstacles.

Usage:
    from navassist.config import get_settings

    settings = get_settings()
    print(settings.grid_size)
    print(settings.detection_radius)
"""

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from navassist.exceptions import ConfigurationError
from navassist.logging import LogFormat


class Settings(BaseSettings):
    """Navigation settings loaded from environment variables.

    Attributes:
        grid_size: Side length of the square grid.
        obstacle_count: Obstacles placed on every reset.
        start_x: Initial user column.
        start_y: Initial user row.
        detection_radius: Obstacles farther than this are not reported.
        high_severity_distance: Distances below this are high severity.
        medium_severity_distance: Distances below this are medium severity.
        wall_distance: Distances below this are labelled as walls.
        max_detections: Maximum detections reported per scan.
        placement_attempt_limit: Random samples drawn per obstacle generation
            before the remaining obstacles are picked from the free cells.
            Scales with the free cells when unset.
        random_seed: Seed for reproducible obstacle layouts.
        voice_enabled: Initial state of the console voice toggle.
        log_level: Logging level.
        log_format: Human-readable or JSON log lines.
        log_colors: Whether human-readable log lines use ANSI colors.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAVASSIST_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    # Grid
    grid_size: int = Field(default=11, ge=2, le=101)
    obstacle_count: int = Field(default=15, ge=0)
    start_x: int = Field(default=5, ge=0)
    start_y: int = Field(default=5, ge=0)

    # Detection thresholds
    detection_radius: float = Field(default=3.0, gt=0.0)
    high_severity_distance: float = Field(default=1.5, gt=0.0)
    medium_severity_distance: float = Field(default=2.5, gt=0.0)
    wall_distance: float = Field(default=2.0, gt=0.0)
    max_detections: int = Field(default=5, ge=1)

    # Obstacle placement
    placement_attempt_limit: int | None = Field(default=None, ge=1)
    random_seed: int | None = Field(default=None)

    # Console
    voice_enabled: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default=LogFormat.HUMAN)
    log_colors: bool = Field(default=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed:
            error_message = f"log_level must be one of {allowed}, got '{value}'"
            raise ValueError(error_message)
        return upper_value

    @model_validator(mode="after")
    def validate_grid_layout(self) -> "Settings":
        """Check the start cell, obstacle capacity and severity bands."""
        if self.start_x >= self.grid_size or self.start_y >= self.grid_size:
            error_message = (
                f"start position ({self.start_x}, {self.start_y}) "
                f"is outside a {self.grid_size}x{self.grid_size} grid"
            )
            raise ValueError(error_message)
        if self.obstacle_count > self.free_cells:
            error_message = (
                f"obstacle_count {self.obstacle_count} exceeds the {self.free_cells} "
                f"free cells of a {self.grid_size}x{self.grid_size} grid"
            )
            raise ValueError(error_message)
        if self.high_severity_distance > self.medium_severity_distance:
            error_message = (
                "high_severity_distance must not exceed medium_severity_distance, "
                f"got {self.high_severity_distance} > {self.medium_severity_distance}"
            )
            raise ValueError(error_message)
        return self

    @property
    def free_cells(self) -> int:
        """Cells available for obstacles once the user has a cell."""
        return self.grid_size * self.grid_size - 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def validate_startup_config() -> Settings:
    """Validate configuration on application startup.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid settings.
    """
    try:
        return get_settings()
    except ValidationError as error:
        raise ConfigurationError(
            "Invalid navigation settings",
            context={"errors": [detail["msg"] for detail in error.errors()]},
        ) from error
