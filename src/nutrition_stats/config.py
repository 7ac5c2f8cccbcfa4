"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_stats.domain.calendar import MAIN_MEAL_PERIODS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    default_timezone: str = "UTC"
    default_calories_goal: float = Field(default=2000, gt=0)
    default_protein_goal_g: float = Field(default=150, gt=0)
    default_carbs_goal_g: float = Field(default=250, gt=0)
    default_fat_goal_g: float = Field(default=67, gt=0)
    daily_water_goal_ml: int = Field(default=2000, gt=0)
    main_meal_periods: str | None = "breakfast,lunch,dinner,late_night"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_meal_periods(raw: str | None) -> frozenset[str]:
    """Parse the meal periods counted as main meals from env."""
    if raw is None:
        return MAIN_MEAL_PERIODS
    periods = {chunk.strip().lower() for chunk in raw.split(",")}
    periods.discard("")
    return frozenset(periods) or MAIN_MEAL_PERIODS
