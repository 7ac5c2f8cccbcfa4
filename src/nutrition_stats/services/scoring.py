"""Daily quality score."""

from nutrition_stats.services.rounding import round_half_up

BASE_SCORE = 10.0
MIN_SCORE = 1.0
CALORIES_CAP = 1.5
PROTEIN_CAP = 1.2
WATER_CAP = 1.0
CALORIES_WEIGHT = 2.0
PROTEIN_WEIGHT = 1.5
WATER_WEIGHT = 1.0


def calculate_quality_score(  # noqa: PLR0913
    *,
    calories_actual: float,
    calories_goal: float,
    protein_actual: float,
    protein_goal: float,
    water_intake_ml: float,
    water_goal_ml: float = 2000,
) -> float:
    """Return a 1-10 adherence score, or 0 when no calories were logged.

    Each ratio is capped, then penalised by its distance from 1.0 in either
    direction so that overeating costs as much as undereating.
    """
    if calories_actual <= 0:
        return 0
    penalty = (
        abs(1 - _capped_ratio(calories_actual, calories_goal, CALORIES_CAP))
        * CALORIES_WEIGHT
        + abs(1 - _capped_ratio(protein_actual, protein_goal, PROTEIN_CAP))
        * PROTEIN_WEIGHT
        + abs(1 - _capped_ratio(water_intake_ml, water_goal_ml, WATER_CAP))
        * WATER_WEIGHT
    )
    score = min(BASE_SCORE, max(MIN_SCORE, BASE_SCORE - penalty))
    return round_half_up(score, 1)


def _capped_ratio(actual: float, goal: float, cap: float) -> float:
    if goal <= 0:
        return cap if actual > 0 else 1.0
    return min(actual / goal, cap)
