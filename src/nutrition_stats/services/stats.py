"""Monthly calendar statistics service."""

import calendar
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_stats.domain.calendar import (
    MAIN_MEAL_PERIODS,
    CalendarEventRow,
    DailyGoalRow,
    DefaultGoals,
    GamificationBadge,
    MealRow,
    UserProfile,
    WaterIntakeRow,
)
from nutrition_stats.domain.report import MonthlyReport
from nutrition_stats.services.basic_stats import (
    calculate_basic_stats,
    calculate_progress,
)
from nutrition_stats.services.breakdown import calculate_nutrition_breakdown
from nutrition_stats.services.comparison import compare_months
from nutrition_stats.services.messages import generate_motivational_message
from nutrition_stats.services.records import build_day_records
from nutrition_stats.services.rounding import round_int
from nutrition_stats.services.trends import calculate_macro_trends
from nutrition_stats.services.weekly import analyze_weeks

DECEMBER = 12
BADGE_WINDOW_DAYS = 30
BADGE_LIMIT = 10

_logger = logging.getLogger(__name__)


class StatisticsCalculationError(RuntimeError):
    """Raised when a monthly report cannot be produced."""


class CalendarStatsRepository(Protocol):
    """Read-only data access for calendar statistics."""

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRow]:
        """Return meals logged in ``[start, end)``."""

    def list_daily_goals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyGoalRow]:
        """Return daily goals for the inclusive date range."""

    def list_water_intake(
        self, user_id: UUID, start: date, end: date
    ) -> list[WaterIntakeRow]:
        """Return water intake rows for the inclusive date range."""

    def list_calendar_events(
        self, user_id: UUID, start: date, end: date
    ) -> list[CalendarEventRow]:
        """Return calendar events for the inclusive date range."""

    def get_user_profile(self, user_id: UUID) -> UserProfile | None:
        """Return lifetime totals for the user."""

    def list_recent_badges(
        self, user_id: UUID, since: datetime, limit: int
    ) -> list[GamificationBadge]:
        """Return badges achieved since ``since``, newest first."""


def month_range(year: int, month: int) -> tuple[date, date]:
    """Return the first and last date of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the preceding month."""
    if month == 1:
        return year - 1, DECEMBER
    return year, month - 1


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class CalendarStatsService:
    """Service computing monthly calendar reports."""

    repository: CalendarStatsRepository
    default_goals: DefaultGoals = field(default_factory=DefaultGoals)
    main_meal_periods: frozenset[str] = MAIN_MEAL_PERIODS
    clock: Callable[[], datetime] = _utc_now

    def compute_monthly_report(
        self, user_id: UUID, year: int, month: int, timezone_name: str = "UTC"
    ) -> MonthlyReport:
        """Return the full statistics report for a user's calendar month."""
        if not 1 <= month <= DECEMBER:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        tz = ZoneInfo(timezone_name)
        _logger.info(
            "Calculating calendar statistics: user_id=%s year=%s month=%s",
            user_id,
            year,
            month,
        )
        try:
            report = self._compute(user_id, year, month, tz)
        except Exception as exc:
            _logger.exception(
                "Failed to calculate statistics: user_id=%s year=%s month=%s",
                user_id,
                year,
                month,
            )
            raise StatisticsCalculationError("Failed to calculate statistics") from exc
        _logger.info(
            "Calendar statistics ready: user_id=%s progress=%s streak=%s",
            user_id,
            report.basic_stats.monthly_progress,
            report.basic_stats.streak_days,
        )
        return report

    def _compute(
        self, user_id: UUID, year: int, month: int, tz: ZoneInfo
    ) -> MonthlyReport:
        now = self.clock()
        today = now.astimezone(tz).date()
        start, end = month_range(year, month)
        prev_start, prev_end = month_range(*previous_month(year, month))

        days = build_day_records(
            meals=self.repository.list_meals(user_id, *_utc_bounds(start, end, tz)),
            goals=self.repository.list_daily_goals(user_id, start, end),
            water=self.repository.list_water_intake(user_id, start, end),
            events=self.repository.list_calendar_events(user_id, start, end),
            start=start,
            end=end,
            defaults=self.default_goals,
            tz=tz,
            main_meal_periods=self.main_meal_periods,
        )
        previous_days = build_day_records(
            meals=self.repository.list_meals(
                user_id, *_utc_bounds(prev_start, prev_end, tz)
            ),
            goals=self.repository.list_daily_goals(user_id, prev_start, prev_end),
            water=self.repository.list_water_intake(user_id, prev_start, prev_end),
            events=[],
            start=prev_start,
            end=prev_end,
            defaults=self.default_goals,
            tz=tz,
            main_meal_periods=self.main_meal_periods,
        )
        profile = self.repository.get_user_profile(user_id)
        badges = self.repository.list_recent_badges(
            user_id, now - timedelta(days=BADGE_WINDOW_DAYS), BADGE_LIMIT
        )

        basic_stats = calculate_basic_stats(days, today)
        comparison = compare_months(
            basic_stats,
            calculate_basic_stats(previous_days, today),
            previous_progress=calculate_progress(previous_days),
        )
        weekly = analyze_weeks(days)
        message = generate_motivational_message(
            basic_stats.monthly_progress,
            basic_stats.streak_days,
            comparison.progress_diff,
        )
        return MonthlyReport(
            year=year,
            month=month,
            basic_stats=basic_stats,
            nutrition_breakdown=calculate_nutrition_breakdown(
                days, self.default_goals.water_ml
            ),
            macro_trends=calculate_macro_trends(days),
            best_week=weekly.best_week,
            challenging_week=weekly.challenging_week,
            weekly_insights=weekly.insights,
            improvement_percent=round_int(comparison.progress_diff),
            motivational_message=message.text,
            motivational_message_key=message.key,
            comparison=comparison,
            total_points=profile.total_points if profile else 0,
            gamification_badges=tuple(badges[:BADGE_LIMIT]),
            days=tuple(days),
        )


def _utc_bounds(start: date, end: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    local_start = datetime.combine(start, time.min, tzinfo=tz)
    local_end = datetime.combine(end + timedelta(days=1), time.min, tzinfo=tz)
    return local_start.astimezone(UTC), local_end.astimezone(UTC)
