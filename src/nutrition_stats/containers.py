"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_stats.adapters.supabase_calendar_repository import (
    SupabaseCalendarStatsRepository,
)
from nutrition_stats.config import Settings, parse_meal_periods
from nutrition_stats.domain.calendar import DefaultGoals
from nutrition_stats.services.stats import CalendarStatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    stats_service: CalendarStatsService


def default_goals_from_settings(settings: Settings) -> DefaultGoals:
    """Build fallback goals from configured values."""
    return DefaultGoals(
        calories=settings.default_calories_goal,
        protein_g=settings.default_protein_goal_g,
        carbs_g=settings.default_carbs_goal_g,
        fat_g=settings.default_fat_goal_g,
        water_ml=settings.daily_water_goal_ml,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    stats_service = CalendarStatsService(
        repository=SupabaseCalendarStatsRepository(supabase_client),
        default_goals=default_goals_from_settings(resolved_settings),
        main_meal_periods=parse_meal_periods(resolved_settings.main_meal_periods),
    )
    return AppContainer(settings=resolved_settings, stats_service=stats_service)
