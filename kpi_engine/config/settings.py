"""
Settings Management with Pydantic

Provides type-safe configuration for the engine with:
- Environment variable support (KPI_ENGINE_*, KPI_REWARD_*)
- Validation of window sizes and reward defaults
- A cached process-wide instance
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RewardDefaults(BaseSettings):
    """Reward rates granted at 100% achievement, used by the default registry."""
    model_config = SettingsConfigDict(
        env_prefix="KPI_REWARD_",
        extra="ignore"
    )

    xp_rate: float = Field(default=10.0, ge=0)
    points_rate: float = Field(default=100.0, ge=0)
    max_points: float = Field(default=100.0, gt=0)


class EngineSettings(BaseSettings):
    """Main engine settings."""
    model_config = SettingsConfigDict(
        env_prefix="KPI_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Application
    app_name: str = "Agent KPI Engine"
    log_level: str = "INFO"

    # Daily XP goal used by trend and report progress percentages
    daily_xp_target: int = Field(default=100, gt=0)

    # Window shapes
    default_window_days: int = Field(default=5, gt=0)
    trend_days: int = Field(default=7, gt=0)
    trajectory_weeks: int = Field(default=4, gt=0)
    days_per_week: int = Field(default=7, gt=0)

    rewards: RewardDefaults = Field(default_factory=RewardDefaults)

    @property
    def trajectory_days(self) -> int:
        return self.trajectory_weeks * self.days_per_week

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Create settings from environment variables."""
        return cls(rewards=RewardDefaults())


@lru_cache()
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings.from_env()
