"""Domain models for the monthly statistics report."""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from nutrition_stats.domain.calendar import DayRecord, GamificationBadge

MacroTrend = Literal["increasing", "decreasing", "stable"]
OverallTrend = Literal["improving", "declining", "stable"]

NO_DATA_AVAILABLE = "No data available"


@dataclass(frozen=True)
class BasicStats:
    """Month-level adherence and average figures."""

    monthly_progress: int
    streak_days: int
    total_goal_days: int
    total_days: int
    perfect_days: int
    average_calories: int
    average_protein: int
    average_carbs: int
    average_fat: int
    average_water: int
    average_quality_score: float
    average_meal_count: float


@dataclass(frozen=True)
class MacroBreakdown:
    """Summary of one macro across data-bearing days."""

    average: int
    min: int
    max: int
    total: int
    goal_average: int
    adherence_percent: int


@dataclass(frozen=True)
class WaterBreakdown:
    """Summary of water intake against a fixed daily goal."""

    average: int
    min: int
    max: int
    total: int
    daily_goal: int
    adherence_percent: int


@dataclass(frozen=True)
class NutritionBreakdown:
    """Per-macro summaries for a month."""

    calories: MacroBreakdown
    protein: MacroBreakdown
    carbs: MacroBreakdown
    fat: MacroBreakdown
    water: WaterBreakdown


@dataclass(frozen=True)
class MacroTrends:
    """Direction of each macro between the two halves of the month."""

    calories_trend: MacroTrend = "stable"
    protein_trend: MacroTrend = "stable"
    carbs_trend: MacroTrend = "stable"
    fat_trend: MacroTrend = "stable"
    water_trend: MacroTrend = "stable"
    overall_trend: OverallTrend = "stable"


@dataclass(frozen=True)
class WeeklyAnalysis:
    """Scores and notes for one 7-day window."""

    week_start: date
    week_end: date
    average_progress: float
    total_days: int
    goal_days: int
    perfect_days: int
    average_calories: int
    average_protein: int
    average_carbs: int
    average_fat: int
    average_water: int
    highlights: tuple[str, ...] = ()
    challenges: tuple[str, ...] = ()


@dataclass(frozen=True)
class WeeklyInsights:
    """Best, most challenging and all analysed weeks."""

    best_week_details: WeeklyAnalysis | None
    challenging_week_details: WeeklyAnalysis | None
    all_weeks: tuple[WeeklyAnalysis, ...] = ()


@dataclass(frozen=True)
class WeeklySummary:
    """Week labels plus the detailed insights."""

    best_week: str
    challenging_week: str
    insights: WeeklyInsights


@dataclass(frozen=True)
class MonthComparison:
    """Differences between the current and previous month."""

    calories_diff: int
    protein_diff: int
    carbs_diff: int
    fat_diff: int
    water_diff: int
    progress_diff: float
    streak_diff: int


@dataclass(frozen=True)
class MotivationalMessage:
    """Selected message with a key callers can localize."""

    key: str
    text: str


@dataclass(frozen=True)
class MonthlyReport:
    """Complete statistics for one user and calendar month."""

    year: int
    month: int
    basic_stats: BasicStats
    nutrition_breakdown: NutritionBreakdown
    macro_trends: MacroTrends
    best_week: str
    challenging_week: str
    weekly_insights: WeeklyInsights
    improvement_percent: int
    motivational_message: str
    motivational_message_key: str
    comparison: MonthComparison
    total_points: int = 0
    gamification_badges: tuple[GamificationBadge, ...] = field(default_factory=tuple)
    days: tuple[DayRecord, ...] = field(default_factory=tuple)
