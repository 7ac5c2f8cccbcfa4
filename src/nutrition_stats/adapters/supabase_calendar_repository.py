"""Supabase repository for calendar statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from nutrition_stats.adapters.row_normalization import (
    normalize_badge,
    normalize_calendar_event,
    normalize_daily_goal,
    normalize_meal,
    normalize_user_profile,
    normalize_water_intake,
)
from nutrition_stats.domain.calendar import (
    CalendarEventRow,
    DailyGoalRow,
    GamificationBadge,
    MealRow,
    UserProfile,
    WaterIntakeRow,
)
from nutrition_stats.services.stats import CalendarStatsRepository


@dataclass
class SupabaseCalendarStatsRepository(CalendarStatsRepository):
    """Supabase implementation for calendar statistics queries."""

    client: Client

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRow]:
        """Return meals uploaded in the time range."""
        response = (
            self.client.table("meals")
            .select("upload_time, meal_period, calories, protein_g, carbs_g, fats_g")
            .eq("user_id", str(user_id))
            .gte("upload_time", start.isoformat())
            .lt("upload_time", end.isoformat())
            .order("upload_time", desc=False)
            .execute()
        )
        meals = (normalize_meal(row) for row in response.data or [])
        return [meal for meal in meals if meal is not None]

    def list_daily_goals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyGoalRow]:
        """Return daily goal rows in the date range."""
        response = (
            self.client.table("daily_goals")
            .select("date, calories, protein_g, carbs_g, fats_g")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .execute()
        )
        goals = (normalize_daily_goal(row) for row in response.data or [])
        return [goal for goal in goals if goal is not None]

    def list_water_intake(
        self, user_id: UUID, start: date, end: date
    ) -> list[WaterIntakeRow]:
        """Return water intake rows in the date range."""
        response = (
            self.client.table("water_intake")
            .select("date, milliliters_consumed")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .execute()
        )
        water = (normalize_water_intake(row) for row in response.data or [])
        return [entry for entry in water if entry is not None]

    def list_calendar_events(
        self, user_id: UUID, start: date, end: date
    ) -> list[CalendarEventRow]:
        """Return calendar events in the date range."""
        response = (
            self.client.table("calendar_events")
            .select("event_id, date, title, type, description, created_at")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        events = (normalize_calendar_event(row) for row in response.data or [])
        return [event for event in events if event is not None]

    def get_user_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's lifetime totals."""
        response = (
            self.client.table("users")
            .select("user_id, total_points")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return normalize_user_profile(user_id, response.data[0])

    def list_recent_badges(
        self, user_id: UUID, since: datetime, limit: int
    ) -> list[GamificationBadge]:
        """Return badges achieved since the given time, newest first."""
        response = (
            self.client.table("gamification_badges")
            .select("badge_id, name, description, icon, achieved_at, points")
            .eq("user_id", str(user_id))
            .gte("achieved_at", since.isoformat())
            .order("achieved_at", desc=True)
            .limit(limit)
            .execute()
        )
        badges = (normalize_badge(row) for row in response.data or [])
        return [badge for badge in badges if badge is not None]
