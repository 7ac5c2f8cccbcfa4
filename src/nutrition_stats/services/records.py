"""Build one DayRecord per calendar date from loaded rows."""

from collections import defaultdict
from collections.abc import Iterable
from datetime import UTC, date, timedelta, tzinfo

from nutrition_stats.domain.calendar import (
    MAIN_MEAL_PERIODS,
    CalendarEvent,
    CalendarEventRow,
    DailyGoalRow,
    DayRecord,
    DefaultGoals,
    MealRow,
    WaterIntakeRow,
)
from nutrition_stats.services.scoring import calculate_quality_score


def iter_days(start: date, end: date) -> Iterable[date]:
    """Yield every date in the inclusive range."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def build_day_records(  # noqa: PLR0913
    *,
    meals: Iterable[MealRow],
    goals: Iterable[DailyGoalRow],
    water: Iterable[WaterIntakeRow],
    events: Iterable[CalendarEventRow],
    start: date,
    end: date,
    defaults: DefaultGoals,
    tz: tzinfo = UTC,
    main_meal_periods: frozenset[str] = MAIN_MEAL_PERIODS,
) -> list[DayRecord]:
    """Merge row sets into ascending DayRecords covering every day in range."""
    meals_by_day: dict[date, list[MealRow]] = defaultdict(list)
    for meal in meals:
        meals_by_day[meal.logged_at.astimezone(tz).date()].append(meal)
    goals_by_day = {goal.day: goal for goal in goals}
    water_by_day = {entry.day: entry.milliliters for entry in water}
    events_by_day: dict[date, list[CalendarEvent]] = defaultdict(list)
    for event in events:
        events_by_day[event.day].append(
            CalendarEvent(
                id=event.event_id,
                title=event.title,
                type=event.type,
                created_at=event.created_at,
                description=event.description or None,
            )
        )

    return [
        _build_day(
            day,
            meals_by_day.get(day, []),
            goals_by_day.get(day),
            water_by_day.get(day, 0),
            events_by_day.get(day, []),
            defaults,
            main_meal_periods,
        )
        for day in iter_days(start, end)
    ]


def _build_day(  # noqa: PLR0913
    day: date,
    meals: list[MealRow],
    goal: DailyGoalRow | None,
    water_ml: int,
    events: list[CalendarEvent],
    defaults: DefaultGoals,
    main_meal_periods: frozenset[str],
) -> DayRecord:
    calories_goal = _goal_or_default(goal and goal.calories, defaults.calories)
    protein_goal = _goal_or_default(goal and goal.protein_g, defaults.protein_g)
    carbs_goal = _goal_or_default(goal and goal.carbs_g, defaults.carbs_g)
    fat_goal = _goal_or_default(goal and goal.fat_g, defaults.fat_g)
    calories = sum(meal.calories for meal in meals)
    protein = sum(meal.protein_g for meal in meals)
    meal_count = sum(
        1
        for meal in meals
        if meal.meal_period and meal.meal_period.lower() in main_meal_periods
    )
    return DayRecord(
        day=day,
        calories_goal=calories_goal,
        calories_actual=calories,
        protein_goal=protein_goal,
        protein_actual=protein,
        carbs_goal=carbs_goal,
        carbs_actual=sum(meal.carbs_g for meal in meals),
        fat_goal=fat_goal,
        fat_actual=sum(meal.fat_g for meal in meals),
        meal_count=meal_count,
        water_intake_ml=water_ml,
        events=tuple(events),
        quality_score=calculate_quality_score(
            calories_actual=calories,
            calories_goal=calories_goal,
            protein_actual=protein,
            protein_goal=protein_goal,
            water_intake_ml=water_ml,
            water_goal_ml=defaults.water_ml,
        ),
    )


def _goal_or_default(value: float | None, default: float) -> float:
    if value is None or value <= 0:
        return default
    return value
