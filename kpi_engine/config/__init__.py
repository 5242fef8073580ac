"""
Configuration Management

Centralized configuration for:
- Reward defaults for the built-in KPI registry
- Window sizes (report, trend, weekly trajectory)
- Logging
"""

from .settings import (
    EngineSettings,
    RewardDefaults,
    get_settings
)
from .log_setup import configure_logging

__all__ = [
    "EngineSettings",
    "RewardDefaults",
    "get_settings",
    "configure_logging"
]
