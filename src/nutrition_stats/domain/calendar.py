"""Domain models for calendar statistics inputs."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

CALORIE_GOAL_THRESHOLD = 0.9
PERFECT_DAY_SCORE = 9
MAIN_MEAL_PERIODS = frozenset({"breakfast", "lunch", "dinner", "late_night"})


@dataclass(frozen=True)
class MealRow:
    """Logged meal with its macro totals."""

    logged_at: datetime
    meal_period: str | None
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class DailyGoalRow:
    """Per-day nutrition goal; unset fields fall back to defaults."""

    day: date
    calories: float | None
    protein_g: float | None
    carbs_g: float | None
    fat_g: float | None


@dataclass(frozen=True)
class WaterIntakeRow:
    """Water consumed on a day."""

    day: date
    milliliters: int


@dataclass(frozen=True)
class CalendarEventRow:
    """Calendar event attached to a day."""

    event_id: str
    day: date
    title: str
    type: str
    description: str | None
    created_at: datetime


@dataclass(frozen=True)
class UserProfile:
    """Lifetime user totals."""

    user_id: UUID
    total_points: int


@dataclass(frozen=True)
class GamificationBadge:
    """Badge earned by a user."""

    id: str
    name: str
    description: str
    icon: str
    achieved_at: datetime
    points: int


@dataclass(frozen=True)
class DefaultGoals:
    """Goals used when a day has no goal row."""

    calories: float = 2000
    protein_g: float = 150
    carbs_g: float = 250
    fat_g: float = 67
    water_ml: int = 2000


@dataclass(frozen=True)
class CalendarEvent:
    """Simplified event shown on a calendar day."""

    id: str
    title: str
    type: str
    created_at: datetime
    description: str | None = None


@dataclass(frozen=True)
class DayRecord:
    """Goals, actual totals and derived score for one calendar date."""

    day: date
    calories_goal: float
    calories_actual: float
    protein_goal: float
    protein_actual: float
    carbs_goal: float
    carbs_actual: float
    fat_goal: float
    fat_actual: float
    meal_count: int = 0
    water_intake_ml: int = 0
    events: tuple[CalendarEvent, ...] = field(default_factory=tuple)
    quality_score: float = 0

    @property
    def has_data(self) -> bool:
        """Return True when any calories were logged."""
        return self.calories_actual > 0

    @property
    def meets_calorie_goal(self) -> bool:
        """Return True when at least 90% of the calorie goal was reached."""
        return self.calories_actual >= self.calories_goal * CALORIE_GOAL_THRESHOLD

    @property
    def is_perfect(self) -> bool:
        """Return True for days scoring 9 or higher."""
        return self.quality_score >= PERFECT_DAY_SCORE

    def calorie_ratio(self) -> float:
        """Return actual calories as a fraction of the goal."""
        if self.calories_goal <= 0:
            return float("inf") if self.calories_actual > 0 else 0.0
        return self.calories_actual / self.calories_goal
