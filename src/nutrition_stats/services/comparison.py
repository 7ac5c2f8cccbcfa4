"""Month-over-month comparison."""

from nutrition_stats.domain.report import BasicStats, MonthComparison


def compare_months(
    current: BasicStats,
    previous: BasicStats,
    previous_progress: float | None = None,
) -> MonthComparison:
    """Return raw current-minus-previous deltas.

    ``previous_progress`` is the previous month's unrounded progress; when
    given, the progress delta is taken against it instead of the rounded
    ``previous.monthly_progress``.
    """
    if previous_progress is None:
        previous_progress = previous.monthly_progress
    return MonthComparison(
        calories_diff=current.average_calories - previous.average_calories,
        protein_diff=current.average_protein - previous.average_protein,
        carbs_diff=current.average_carbs - previous.average_carbs,
        fat_diff=current.average_fat - previous.average_fat,
        water_diff=current.average_water - previous.average_water,
        progress_diff=current.monthly_progress - previous_progress,
        streak_diff=current.streak_days - previous.streak_days,
    )
