"""Per-macro summary statistics for a month."""

from collections.abc import Sequence

from nutrition_stats.domain.calendar import DayRecord
from nutrition_stats.domain.report import (
    MacroBreakdown,
    NutritionBreakdown,
    WaterBreakdown,
)
from nutrition_stats.services.rounding import round_int


def calculate_nutrition_breakdown(
    days: Sequence[DayRecord], water_goal_ml: int = 2000
) -> NutritionBreakdown:
    """Summarise each macro and water over the data-bearing days."""
    data_days = [day for day in days if day.has_data]
    water = [float(day.water_intake_ml) for day in data_days]
    water_average = _mean(water)
    return NutritionBreakdown(
        calories=_macro(
            [day.calories_actual for day in data_days],
            [day.calories_goal for day in data_days],
        ),
        protein=_macro(
            [day.protein_actual for day in data_days],
            [day.protein_goal for day in data_days],
        ),
        carbs=_macro(
            [day.carbs_actual for day in data_days],
            [day.carbs_goal for day in data_days],
        ),
        fat=_macro(
            [day.fat_actual for day in data_days],
            [day.fat_goal for day in data_days],
        ),
        water=WaterBreakdown(
            average=round_int(water_average),
            min=round_int(_floored_min(water)),
            max=round_int(_floored_max(water)),
            total=round_int(sum(water)),
            daily_goal=water_goal_ml,
            adherence_percent=adherence_percent(water_average, water_goal_ml),
        ),
    )


def adherence_percent(average: float, goal_average: float) -> int:
    """Return average as a rounded percentage of the goal, 0 without a goal."""
    if goal_average <= 0:
        return 0
    return round_int(100 * average / goal_average)


def _macro(values: list[float], goals: list[float]) -> MacroBreakdown:
    average = _mean(values)
    goal_average = _mean(goals)
    return MacroBreakdown(
        average=round_int(average),
        min=round_int(_floored_min(values)),
        max=round_int(_floored_max(values)),
        total=round_int(sum(values)),
        goal_average=round_int(goal_average),
        adherence_percent=adherence_percent(average, goal_average),
    )


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0


def _floored_min(values: list[float]) -> float:
    return max(min(values), 0) if values else 0


def _floored_max(values: list[float]) -> float:
    return max(max(values), 0) if values else 0
