"""Motivational message selection."""

from nutrition_stats.domain.report import MotivationalMessage

OUTSTANDING_PROGRESS = 90
GREAT_PROGRESS = 75
GOOD_PROGRESS = 50
IMPROVEMENT_DIFF = 10
STREAK_DAYS = 3


def generate_motivational_message(
    monthly_progress: float, streak_days: int, progress_diff: float
) -> MotivationalMessage:
    """Return the message for the first matching threshold."""
    if monthly_progress >= OUTSTANDING_PROGRESS:
        return MotivationalMessage(
            "outstanding", "Outstanding! You're crushing your goals!"
        )
    if monthly_progress >= GREAT_PROGRESS:
        return MotivationalMessage("great_job", "Great job! You're doing really well!")
    if monthly_progress >= GOOD_PROGRESS:
        return MotivationalMessage(
            "good_progress", "Good progress! Keep pushing forward!"
        )
    if progress_diff > IMPROVEMENT_DIFF:
        return MotivationalMessage("improvement", "Nice improvement from last month!")
    if streak_days >= STREAK_DAYS:
        return MotivationalMessage(
            "streak", f"{streak_days} day streak! Keep it going!"
        )
    return MotivationalMessage("default", "Every step counts! You've got this!")
