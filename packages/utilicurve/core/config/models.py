"""Configuration models for utilicurve."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log records")
    filename: str | None = Field(default=None, description="Log file path (stdout if unset)")


class SamplingConfig(BaseModel):
    """Defaults for sampling curves from the command line."""

    num_samples: int = Field(default=11, ge=2, description="Evenly-spaced samples over [0,1]")
    precision: int = Field(default=4, ge=0, le=12, description="Decimal places when displaying")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    sampling: SamplingConfig = SamplingConfig()
