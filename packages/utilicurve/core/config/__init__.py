"""Configuration management for utilicurve."""

from utilicurve.core.config.loader import load_app_config, load_config
from utilicurve.core.config.models import AppConfig, LoggingConfig, SamplingConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "SamplingConfig",
    "load_app_config",
    "load_config",
]
