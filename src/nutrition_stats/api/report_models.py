"""Response models for the statistics API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BasicStatsModel(_ApiModel):
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


class MacroBreakdownModel(_ApiModel):
    average: int
    min: int
    max: int
    total: int
    goal_average: int
    adherence_percent: int


class WaterBreakdownModel(_ApiModel):
    average: int
    min: int
    max: int
    total: int
    daily_goal: int
    adherence_percent: int


class NutritionBreakdownModel(_ApiModel):
    calories: MacroBreakdownModel
    protein: MacroBreakdownModel
    carbs: MacroBreakdownModel
    fat: MacroBreakdownModel
    water: WaterBreakdownModel


class MacroTrendsModel(_ApiModel):
    calories_trend: str
    protein_trend: str
    carbs_trend: str
    fat_trend: str
    water_trend: str
    overall_trend: str


class WeeklyAnalysisModel(_ApiModel):
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
    highlights: list[str]
    challenges: list[str]


class WeeklyInsightsModel(_ApiModel):
    best_week_details: WeeklyAnalysisModel | None
    challenging_week_details: WeeklyAnalysisModel | None
    all_weeks: list[WeeklyAnalysisModel]


class ComparisonModel(_ApiModel):
    calories_diff: int
    protein_diff: int
    carbs_diff: int
    fat_diff: int
    water_diff: int
    progress_diff: float
    streak_diff: int


class BadgeModel(_ApiModel):
    id: str
    name: str
    description: str
    icon: str
    achieved_at: datetime
    points: int


class CalendarEventModel(_ApiModel):
    id: str
    title: str
    type: str
    created_at: datetime
    description: str | None = None


class DayRecordModel(_ApiModel):
    day: date
    calories_goal: float
    calories_actual: float
    protein_goal: float
    protein_actual: float
    carbs_goal: float
    carbs_actual: float
    fat_goal: float
    fat_actual: float
    meal_count: int
    water_intake_ml: int
    quality_score: float
    events: list[CalendarEventModel]


class MonthlyReportResponse(_ApiModel):
    """Monthly statistics serialized with camelCase keys."""

    year: int
    month: int
    basic_stats: BasicStatsModel
    nutrition_breakdown: NutritionBreakdownModel
    macro_trends: MacroTrendsModel
    best_week: str
    challenging_week: str
    weekly_insights: WeeklyInsightsModel
    improvement_percent: int
    motivational_message: str
    motivational_message_key: str
    comparison: ComparisonModel
    total_points: int
    gamification_badges: list[BadgeModel]
    days: list[DayRecordModel]
