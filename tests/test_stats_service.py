"""Tests for the monthly statistics service."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

import pytest

from nutrition_stats.domain.calendar import (
    CalendarEventRow,
    DailyGoalRow,
    GamificationBadge,
    UserProfile,
    WaterIntakeRow,
)
from nutrition_stats.domain.report import NO_DATA_AVAILABLE
from nutrition_stats.services.stats import (
    CalendarStatsService,
    StatisticsCalculationError,
    month_range,
    previous_month,
)
from tests.conftest import InMemoryCalendarStatsRepository, fixed_clock, meal

AFTER_APRIL = datetime(2024, 5, 10, 12, tzinfo=UTC)


def _service(
    repo: InMemoryCalendarStatsRepository, now: datetime = AFTER_APRIL
) -> CalendarStatsService:
    return CalendarStatsService(repository=repo, clock=fixed_clock(now))


def test_month_range_handles_leap_years() -> None:
    assert month_range(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_range(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))
    assert month_range(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))


def test_previous_month_wraps_year() -> None:
    assert previous_month(2024, 1) == (2023, 12)
    assert previous_month(2024, 7) == (2024, 6)


def test_monthly_report_end_to_end() -> None:
    repo = InMemoryCalendarStatsRepository()
    for offset in range(30):
        calories = 500 if offset < 10 else 2000
        repo.meals.append(meal(date(2024, 4, 1) + timedelta(days=offset), calories))

    report = _service(repo).compute_monthly_report(uuid4(), 2024, 4)

    stats = report.basic_stats
    assert stats.total_days == 30
    assert stats.total_goal_days == 20
    assert stats.monthly_progress == 67
    assert stats.average_calories == 1500
    assert stats.average_protein == 0
    assert stats.average_water == 0
    assert stats.streak_days == 20
    assert len(report.days) == 30
    assert report.comparison.progress_diff == 67
    assert report.improvement_percent == 67
    assert report.motivational_message_key == "good_progress"
    assert report.motivational_message == "Good progress! Keep pushing forward!"
    assert report.nutrition_breakdown.calories.goal_average == 2000
    assert report.nutrition_breakdown.calories.adherence_percent == 75
    assert report.macro_trends.calories_trend == "increasing"
    assert report.best_week.endswith("(100% avg)")
    assert report.total_points == 0
    assert report.gamification_badges == ()


def test_empty_month_produces_zero_report() -> None:
    repo = InMemoryCalendarStatsRepository()

    report = _service(repo).compute_monthly_report(uuid4(), 2024, 2)

    assert report.basic_stats.total_days == 29
    assert report.basic_stats.monthly_progress == 0
    assert report.basic_stats.streak_days == 0
    assert report.best_week == NO_DATA_AVAILABLE
    assert report.challenging_week == NO_DATA_AVAILABLE
    assert report.motivational_message_key == "default"
    assert report.macro_trends.overall_trend == "stable"


def test_comparison_uses_previous_month_across_year_boundary() -> None:
    repo = InMemoryCalendarStatsRepository()
    for offset in range(31):
        repo.meals.append(meal(date(2023, 12, 1) + timedelta(days=offset), 1800))
        repo.meals.append(meal(date(2024, 1, 1) + timedelta(days=offset), 2000))

    report = _service(repo, datetime(2024, 2, 5, tzinfo=UTC)).compute_monthly_report(
        uuid4(), 2024, 1
    )

    assert report.comparison.calories_diff == 200
    assert report.comparison.progress_diff == 0
    assert report.comparison.streak_diff == 0
    assert report.basic_stats.streak_days == 31


def test_improvement_uses_unrounded_previous_progress() -> None:
    repo = InMemoryCalendarStatsRepository()
    # 8 of 28 February days is 28.57%; 12 of 31 March days rounds to 39%.
    for offset in range(8):
        repo.meals.append(meal(date(2023, 2, 1) + timedelta(days=offset), 2000))
    for offset in range(12):
        repo.meals.append(meal(date(2023, 3, 1) + timedelta(days=offset), 2000))

    report = _service(repo, datetime(2023, 4, 15, tzinfo=UTC)).compute_monthly_report(
        uuid4(), 2023, 3
    )

    assert report.basic_stats.monthly_progress == 39
    assert report.comparison.progress_diff == pytest.approx(39 - 800 / 28)
    assert report.improvement_percent == 10
    assert report.motivational_message_key == "improvement"


def test_streak_stops_at_today() -> None:
    repo = InMemoryCalendarStatsRepository()
    for offset in range(10):
        repo.meals.append(meal(date(2024, 4, 1) + timedelta(days=offset), 2000))

    now = datetime(2024, 4, 5, 8, tzinfo=UTC)
    report = _service(repo, now).compute_monthly_report(uuid4(), 2024, 4)

    assert report.basic_stats.streak_days == 5


def test_goals_water_and_events_flow_into_days() -> None:
    repo = InMemoryCalendarStatsRepository()
    day = date(2024, 4, 3)
    repo.meals.append(meal(day, 1500, protein_g=100))
    repo.goals.append(
        DailyGoalRow(day=day, calories=1500, protein_g=100, carbs_g=None, fat_g=None)
    )
    repo.water.append(WaterIntakeRow(day=day, milliliters=2000))
    repo.events.append(
        CalendarEventRow(
            event_id="e1",
            day=day,
            title="Dinner out",
            type="social",
            description="Birthday",
            created_at=datetime(2024, 4, 1, tzinfo=UTC),
        )
    )

    report = _service(repo).compute_monthly_report(uuid4(), 2024, 4)

    record = report.days[2]
    assert record.day == day
    assert record.calories_goal == 1500
    assert record.quality_score == 10
    assert record.events[0].title == "Dinner out"
    assert report.basic_stats.perfect_days == 1


def test_user_timezone_shifts_meal_dates() -> None:
    repo = InMemoryCalendarStatsRepository()
    # 02:00 UTC on April 1st is still March 31st in New York.
    repo.meals.append(meal(date(2024, 4, 1), 2000, hour=2))

    report = _service(repo).compute_monthly_report(
        uuid4(), 2024, 4, timezone_name="America/New_York"
    )

    assert sum(day.calories_actual for day in report.days) == 0
    assert report.comparison.calories_diff == -2000


def test_badges_and_points_are_included() -> None:
    user_id = uuid4()
    repo = InMemoryCalendarStatsRepository()
    repo.profiles[user_id] = UserProfile(user_id=user_id, total_points=420)
    repo.badges = [
        GamificationBadge(
            id=f"b{index}",
            name="Streak",
            description="Kept a streak",
            icon="fire",
            achieved_at=AFTER_APRIL - timedelta(days=index * 3),
            points=10,
        )
        for index in range(15)
    ]

    report = _service(repo).compute_monthly_report(user_id, 2024, 4)

    assert report.total_points == 420
    assert len(report.gamification_badges) == 10
    assert report.gamification_badges[0].id == "b0"


def test_data_access_failure_is_wrapped() -> None:
    repo = InMemoryCalendarStatsRepository(failure=ConnectionError("db down"))

    with pytest.raises(StatisticsCalculationError) as exc_info:
        _service(repo).compute_monthly_report(uuid4(), 2024, 4)

    assert str(exc_info.value) == "Failed to calculate statistics"
    assert isinstance(exc_info.value.__cause__, ConnectionError)


def test_invalid_month_rejected() -> None:
    with pytest.raises(ValueError):
        _service(InMemoryCalendarStatsRepository()).compute_monthly_report(
            uuid4(), 2024, 13
        )
