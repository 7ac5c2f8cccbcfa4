"""Seven-day window analysis with best and most challenging week."""

from collections.abc import Callable, Sequence

from nutrition_stats.domain.calendar import DayRecord
from nutrition_stats.domain.report import (
    NO_DATA_AVAILABLE,
    WeeklyAnalysis,
    WeeklyInsights,
    WeeklySummary,
)
from nutrition_stats.services.rounding import round_int

WEEK_LENGTH = 7
ALMOST_PERFECT_GOAL_DAYS = 6
GOOD_WEEK_GOAL_DAYS = 4
PERFECT_DAYS_HIGHLIGHT = 3
CHALLENGE_DAYS = 2
LOW_RATIO = 0.7
OVER_RATIO = 1.1


def analyze_weeks(days: Sequence[DayRecord]) -> WeeklySummary:
    """Split days into 7-day windows and pick the best and worst week.

    Windows without any data-bearing day are skipped. When no window is left
    both labels report ``NO_DATA_AVAILABLE``.
    """
    weeks = [
        analysis
        for start in range(0, len(days), WEEK_LENGTH)
        if (analysis := analyze_week(days[start : start + WEEK_LENGTH])) is not None
    ]
    if not weeks:
        return WeeklySummary(
            best_week=NO_DATA_AVAILABLE,
            challenging_week=NO_DATA_AVAILABLE,
            insights=WeeklyInsights(
                best_week_details=None,
                challenging_week_details=None,
            ),
        )

    best = max(weeks, key=lambda week: week.average_progress)
    worst = min(weeks, key=lambda week: week.average_progress)
    return WeeklySummary(
        best_week=week_label(best),
        challenging_week=week_label(worst),
        insights=WeeklyInsights(
            best_week_details=best,
            challenging_week_details=worst,
            all_weeks=tuple(weeks),
        ),
    )


def analyze_week(week: Sequence[DayRecord]) -> WeeklyAnalysis | None:
    """Score a single window, or return None when it holds no data."""
    data_days = [day for day in week if day.has_data]
    if not data_days:
        return None

    goal_days = sum(1 for day in week if day.meets_calorie_goal)
    perfect_days = sum(1 for day in week if day.is_perfect)
    average_progress = sum(_capped_progress(day) for day in week) / len(week)

    highlights = []
    if goal_days >= ALMOST_PERFECT_GOAL_DAYS:
        highlights.append("Almost perfect week!")
    if goal_days >= GOOD_WEEK_GOAL_DAYS:
        highlights.append(f"{goal_days} days of goal achievement")
    if perfect_days >= PERFECT_DAYS_HIGHLIGHT:
        highlights.append(f"{perfect_days} perfect days")

    challenges = []
    low_days = sum(1 for day in week if day.calorie_ratio() < LOW_RATIO)
    if low_days >= CHALLENGE_DAYS:
        challenges.append(f"{low_days} days below 70% of goal")
    over_days = sum(1 for day in week if day.calorie_ratio() > OVER_RATIO)
    if over_days >= CHALLENGE_DAYS:
        challenges.append(f"{over_days} days of overeating")

    return WeeklyAnalysis(
        week_start=week[0].day,
        week_end=week[-1].day,
        average_progress=average_progress,
        total_days=len(week),
        goal_days=goal_days,
        perfect_days=perfect_days,
        average_calories=_rounded_mean(data_days, lambda d: d.calories_actual),
        average_protein=_rounded_mean(data_days, lambda d: d.protein_actual),
        average_carbs=_rounded_mean(data_days, lambda d: d.carbs_actual),
        average_fat=_rounded_mean(data_days, lambda d: d.fat_actual),
        average_water=_rounded_mean(data_days, lambda d: d.water_intake_ml),
        highlights=tuple(highlights),
        challenges=tuple(challenges),
    )


def week_label(week: WeeklyAnalysis) -> str:
    """Return a human-readable label such as '2024-03-01 to 2024-03-07 (85% avg)'."""
    return (
        f"{week.week_start.isoformat()} to {week.week_end.isoformat()} "
        f"({round_int(week.average_progress)}% avg)"
    )


def _capped_progress(day: DayRecord) -> float:
    if day.calories_goal <= 0:
        return 0
    return min(day.calorie_ratio() * 100, 100)


def _rounded_mean(
    days: Sequence[DayRecord], value: Callable[[DayRecord], float]
) -> int:
    return round_int(sum(value(day) for day in days) / len(days))
