"""Macro trend classification across the two halves of a month."""

from collections.abc import Callable, Sequence

from nutrition_stats.domain.calendar import DayRecord
from nutrition_stats.domain.report import MacroTrend, MacroTrends, OverallTrend

MIN_TREND_DAYS = 7
TREND_THRESHOLD = 0.1


def calculate_macro_trends(days: Sequence[DayRecord]) -> MacroTrends:
    """Classify each macro as increasing, decreasing or stable.

    Needs at least seven data-bearing days; with fewer, everything is stable.
    """
    data_days = [day for day in days if day.has_data]
    if len(data_days) < MIN_TREND_DAYS:
        return MacroTrends()

    midpoint = len(data_days) // 2
    first_half = data_days[:midpoint]
    second_half = data_days[midpoint:]

    def trend(value: Callable[[DayRecord], float]) -> MacroTrend:
        return _classify(_mean(first_half, value), _mean(second_half, value))

    return MacroTrends(
        calories_trend=trend(lambda day: day.calories_actual),
        protein_trend=trend(lambda day: day.protein_actual),
        carbs_trend=trend(lambda day: day.carbs_actual),
        fat_trend=trend(lambda day: day.fat_actual),
        water_trend=trend(lambda day: day.water_intake_ml),
        overall_trend=_overall(first_half, second_half),
    )


def _classify(first_avg: float, second_avg: float) -> MacroTrend:
    diff = second_avg - first_avg
    threshold = first_avg * TREND_THRESHOLD
    if diff > threshold:
        return "increasing"
    if diff < -threshold:
        return "decreasing"
    return "stable"


def _overall(
    first_half: Sequence[DayRecord], second_half: Sequence[DayRecord]
) -> OverallTrend:
    first = _mean(first_half, lambda day: 1 if day.meets_calorie_goal else 0)
    second = _mean(second_half, lambda day: 1 if day.meets_calorie_goal else 0)
    if second > first * (1 + TREND_THRESHOLD):
        return "improving"
    if second < first * (1 - TREND_THRESHOLD):
        return "declining"
    return "stable"


def _mean(days: Sequence[DayRecord], value: Callable[[DayRecord], float]) -> float:
    return sum(value(day) for day in days) / len(days)
