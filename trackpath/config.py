"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every field can be overridden with a TRACKPATH_* environment variable.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Canvas ===
    max_width: int = Field(default=800, description="Upper bound on output width (px)")
    max_height: int = Field(default=600, description="Upper bound on output height (px)")
    padding_fraction: float = Field(
        default=0.1,
        description="Fraction of each span added around the bounds"
    )

    # === Simplification ===
    simplify: bool = Field(default=True, description="Run Douglas-Peucker simplification")
    simplify_tolerance: float = Field(
        default=0.001,
        description="Max perpendicular error in canvas units"
    )
    simplify_threshold: int = Field(
        default=100,
        description="Simplify only tracks with more projected points than this"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Debug', etc."""
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="TRACKPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
