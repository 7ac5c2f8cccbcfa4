"""Month-level adherence figures and streak calculation."""

from collections.abc import Callable, Sequence
from datetime import date

from nutrition_stats.domain.calendar import CALORIE_GOAL_THRESHOLD, DayRecord
from nutrition_stats.domain.report import BasicStats
from nutrition_stats.services.rounding import round_half_up, round_int


def calculate_basic_stats(days: Sequence[DayRecord], today: date) -> BasicStats:
    """Return adherence, streak and per-macro averages for the given days."""
    total_days = len(days)
    goal_days = sum(1 for day in days if day.meets_calorie_goal)
    data_days = [day for day in days if day.has_data]

    return BasicStats(
        monthly_progress=round_int(calculate_progress(days)),
        streak_days=calculate_streak(days, today),
        total_goal_days=goal_days,
        total_days=total_days,
        perfect_days=sum(1 for day in days if day.is_perfect),
        average_calories=round_int(_mean(data_days, lambda d: d.calories_actual)),
        average_protein=round_int(_mean(data_days, lambda d: d.protein_actual)),
        average_carbs=round_int(_mean(data_days, lambda d: d.carbs_actual)),
        average_fat=round_int(_mean(data_days, lambda d: d.fat_actual)),
        average_water=round_int(_mean(data_days, lambda d: d.water_intake_ml)),
        average_quality_score=round_half_up(
            _mean(data_days, lambda d: d.quality_score), 1
        ),
        average_meal_count=round_half_up(_mean(data_days, lambda d: d.meal_count), 1),
    )


def calculate_progress(days: Sequence[DayRecord]) -> float:
    """Return the unrounded percentage of days meeting the calorie goal."""
    if not days:
        return 0.0
    goal_days = sum(1 for day in days if day.meets_calorie_goal)
    return 100 * goal_days / len(days)


def calculate_streak(days: Sequence[DayRecord], today: date) -> int:
    """Count consecutive qualifying days walking back from the latest day.

    Days after ``today`` are ignored. A day qualifies when calories were
    logged and reached 90% of the goal; the first day that does not qualify
    ends the streak.
    """
    streak = 0
    eligible = sorted(
        (day for day in days if day.day <= today),
        key=lambda day: day.day,
        reverse=True,
    )
    for day in eligible:
        if not (day.has_data and day.calorie_ratio() >= CALORIE_GOAL_THRESHOLD):
            break
        streak += 1
    return streak


def _mean(days: Sequence[DayRecord], value: Callable[[DayRecord], float]) -> float:
    if not days:
        return 0
    return sum(value(day) for day in days) / len(days)
