"""Map raw storage rows onto the canonical calendar row types.

Rows reach us with whatever column names the producing client used
(``protein_g``, ``protein`` or ``proteins``; ``fats_g`` or ``fat``). This is
the only place that knows those spellings. Missing or non-numeric amounts
become 0 and invalid goals become ``None`` so the record builder can apply
defaults. Rows without a usable date or timestamp normalize to ``None`` and
are skipped by the repository.
"""

import math
from datetime import UTC, date, datetime, time
from uuid import UUID

from nutrition_stats.domain.calendar import (
    CalendarEventRow,
    DailyGoalRow,
    GamificationBadge,
    MealRow,
    UserProfile,
    WaterIntakeRow,
)

_CALORIE_KEYS = ("calories", "total_calories", "kcal")
_PROTEIN_KEYS = ("protein_g", "protein", "proteins", "total_protein_g")
_CARBS_KEYS = ("carbs_g", "carbs", "carbohydrates", "total_carbs_g")
_FAT_KEYS = ("fats_g", "fat_g", "fat", "fats", "total_fat_g")
_LOGGED_AT_KEYS = ("upload_time", "logged_at", "created_at")
_WATER_KEYS = ("milliliters_consumed", "milliliters", "water_ml")

Row = dict[str, object]


def normalize_meal(row: Row) -> MealRow | None:
    """Return a MealRow, or None when the row has no usable timestamp."""
    logged_at = parse_datetime(_first(row, _LOGGED_AT_KEYS))
    if logged_at is None:
        return None
    period = _first(row, ("meal_period", "period"))
    return MealRow(
        logged_at=logged_at,
        meal_period=str(period).lower() if period else None,
        calories=as_float(_first(row, _CALORIE_KEYS)),
        protein_g=as_float(_first(row, _PROTEIN_KEYS)),
        carbs_g=as_float(_first(row, _CARBS_KEYS)),
        fat_g=as_float(_first(row, _FAT_KEYS)),
    )


def normalize_daily_goal(row: Row) -> DailyGoalRow | None:
    """Return a DailyGoalRow, or None when the row has no usable date."""
    day = parse_date(row.get("date"))
    if day is None:
        return None
    return DailyGoalRow(
        day=day,
        calories=as_goal(_first(row, _CALORIE_KEYS)),
        protein_g=as_goal(_first(row, _PROTEIN_KEYS)),
        carbs_g=as_goal(_first(row, _CARBS_KEYS)),
        fat_g=as_goal(_first(row, _FAT_KEYS)),
    )


def normalize_water_intake(row: Row) -> WaterIntakeRow | None:
    """Return a WaterIntakeRow, or None when the row has no usable date."""
    day = parse_date(row.get("date"))
    if day is None:
        return None
    return WaterIntakeRow(
        day=day,
        milliliters=max(int(as_float(_first(row, _WATER_KEYS))), 0),
    )


def normalize_calendar_event(row: Row) -> CalendarEventRow | None:
    """Return a CalendarEventRow, or None when the row has no usable date."""
    day = parse_date(row.get("date"))
    if day is None:
        return None
    description = row.get("description")
    return CalendarEventRow(
        event_id=str(_first(row, ("event_id", "id")) or ""),
        day=day,
        title=str(row.get("title") or ""),
        type=str(row.get("type") or ""),
        description=str(description) if description else None,
        created_at=parse_datetime(row.get("created_at"))
        or datetime.combine(day, time.min, tzinfo=UTC),
    )


def normalize_user_profile(user_id: UUID, row: Row) -> UserProfile:
    """Return a UserProfile from a raw users row."""
    return UserProfile(
        user_id=user_id,
        total_points=int(as_float(row.get("total_points"))),
    )


def normalize_badge(row: Row) -> GamificationBadge | None:
    """Return a GamificationBadge, or None when ``achieved_at`` is unusable."""
    achieved_at = parse_datetime(row.get("achieved_at"))
    if achieved_at is None:
        return None
    return GamificationBadge(
        id=str(_first(row, ("badge_id", "id")) or ""),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        icon=str(row.get("icon") or ""),
        achieved_at=achieved_at,
        points=int(as_float(row.get("points"))),
    )


def as_float(value: object) -> float:
    """Coerce a numeric-looking value to float, 0.0 otherwise."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def as_goal(value: object) -> float | None:
    """Return a positive goal value, or None when it is unusable."""
    number = as_float(value)
    return number if number > 0 else None


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO timestamp; naive values are treated as UTC.

    Returns None for missing or unparseable values.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def parse_date(value: object) -> date | None:
    """Parse the date portion of a date or timestamp value."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _first(row: Row, keys: tuple[str, ...]) -> object:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None
