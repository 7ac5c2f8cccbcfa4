"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from uuid import UUID

import pytest

from nutrition_stats.config import Settings
from nutrition_stats.containers import AppContainer
from nutrition_stats.domain.calendar import (
    CalendarEventRow,
    DailyGoalRow,
    DayRecord,
    GamificationBadge,
    MealRow,
    UserProfile,
    WaterIntakeRow,
)
from nutrition_stats.services.scoring import calculate_quality_score
from nutrition_stats.services.stats import (
    CalendarStatsRepository,
    CalendarStatsService,
)


@dataclass
class InMemoryCalendarStatsRepository(CalendarStatsRepository):
    """In-memory calendar statistics repository for tests."""

    meals: list[MealRow] = field(default_factory=list)
    goals: list[DailyGoalRow] = field(default_factory=list)
    water: list[WaterIntakeRow] = field(default_factory=list)
    events: list[CalendarEventRow] = field(default_factory=list)
    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    badges: list[GamificationBadge] = field(default_factory=list)
    failure: Exception | None = None

    def list_meals(self, user_id: UUID, start, end) -> list[MealRow]:
        self._maybe_fail()
        return [meal for meal in self.meals if start <= meal.logged_at < end]

    def list_daily_goals(self, user_id: UUID, start, end) -> list[DailyGoalRow]:
        self._maybe_fail()
        return [goal for goal in self.goals if start <= goal.day <= end]

    def list_water_intake(self, user_id: UUID, start, end) -> list[WaterIntakeRow]:
        self._maybe_fail()
        return [entry for entry in self.water if start <= entry.day <= end]

    def list_calendar_events(
        self, user_id: UUID, start, end
    ) -> list[CalendarEventRow]:
        self._maybe_fail()
        return [event for event in self.events if start <= event.day <= end]

    def get_user_profile(self, user_id: UUID) -> UserProfile | None:
        self._maybe_fail()
        return self.profiles.get(user_id)

    def list_recent_badges(
        self, user_id: UUID, since, limit: int
    ) -> list[GamificationBadge]:
        self._maybe_fail()
        recent = [badge for badge in self.badges if badge.achieved_at >= since]
        return sorted(recent, key=lambda badge: badge.achieved_at, reverse=True)[
            :limit
        ]

    def _maybe_fail(self) -> None:
        if self.failure is not None:
            raise self.failure


def meal(
    day: date,
    calories: float,
    *,
    protein_g: float = 0,
    carbs_g: float = 0,
    fat_g: float = 0,
    meal_period: str | None = "lunch",
    hour: int = 12,
) -> MealRow:
    return MealRow(
        logged_at=datetime(day.year, day.month, day.day, hour, tzinfo=UTC),
        meal_period=meal_period,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
    )


def day_record(  # noqa: PLR0913
    day: date,
    calories: float = 0,
    *,
    calories_goal: float = 2000,
    protein: float = 0,
    protein_goal: float = 150,
    carbs: float = 0,
    fat: float = 0,
    water_ml: int = 0,
    meal_count: int = 0,
    quality_score: float | None = None,
) -> DayRecord:
    if quality_score is None:
        quality_score = calculate_quality_score(
            calories_actual=calories,
            calories_goal=calories_goal,
            protein_actual=protein,
            protein_goal=protein_goal,
            water_intake_ml=water_ml,
        )
    return DayRecord(
        day=day,
        calories_goal=calories_goal,
        calories_actual=calories,
        protein_goal=protein_goal,
        protein_actual=protein,
        carbs_goal=250,
        carbs_actual=carbs,
        fat_goal=67,
        fat_actual=fat,
        meal_count=meal_count,
        water_intake_ml=water_ml,
        quality_score=quality_score,
    )


def consecutive_days(
    start: date, values: list[float], **kwargs: object
) -> list[DayRecord]:
    return [
        day_record(start + timedelta(days=offset), value, **kwargs)  # type: ignore[arg-type]
        for offset, value in enumerate(values)
    ]


def fixed_clock(moment: datetime) -> Callable[[], datetime]:
    return lambda: moment


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def stats_repository() -> InMemoryCalendarStatsRepository:
    return InMemoryCalendarStatsRepository()


@pytest.fixture
def container(
    settings: Settings, stats_repository: InMemoryCalendarStatsRepository
) -> AppContainer:
    stats_service = CalendarStatsService(
        repository=stats_repository,
        clock=fixed_clock(datetime(2024, 4, 15, 12, tzinfo=UTC)),
    )
    return AppContainer(settings=settings, stats_service=stats_service)
