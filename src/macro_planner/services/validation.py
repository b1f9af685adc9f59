"""Input checks performed before any provider call."""

from collections.abc import Iterable
from enum import Enum

from macro_planner.domain.errors import ValidationError
from macro_planner.domain.ingredients import MIN_SHAKE_INGREDIENTS
from macro_planner.domain.profile import (
    ActivityLevel,
    Gender,
    Goal,
    MeatType,
    UserProfile,
)

AGE_RANGE = (10, 100)
HEIGHT_CM_RANGE = (100, 250)
WEIGHT_KG_RANGE = (30, 200)


def validate_profile(profile: UserProfile) -> UserProfile:
    """Return the profile unchanged or raise ValidationError with all problems."""
    problems: list[str] = []
    _check_range(problems, "age", profile.age, AGE_RANGE)
    _check_range(problems, "height_cm", profile.height_cm, HEIGHT_CM_RANGE)
    _check_range(problems, "weight_kg", profile.weight_kg, WEIGHT_KG_RANGE)
    _check_member(problems, "gender", profile.gender, Gender)
    _check_member(problems, "activity_level", profile.activity_level, ActivityLevel)
    _check_member(problems, "goal", profile.goal, Goal)
    for meat in profile.meat_preferences:
        _check_member(problems, "meat_preferences", meat, MeatType)
    if problems:
        raise ValidationError(problems)
    return profile


def validate_ingredients(ingredients: Iterable[str]) -> list[str]:
    """Normalize an ingredient selection and enforce the minimum size."""
    selected: list[str] = []
    seen: set[str] = set()
    for raw in ingredients:
        name = raw.strip() if isinstance(raw, str) else ""
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        selected.append(name)
    if len(selected) < MIN_SHAKE_INGREDIENTS:
        raise ValidationError(
            [f"Please select at least {MIN_SHAKE_INGREDIENTS} ingredients."]
        )
    return selected


def _check_range(
    problems: list[str], name: str, value: object, bounds: tuple[int, int]
) -> None:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, int | float):
        problems.append(f"{name} must be a number")
        return
    if not low <= value <= high:
        problems.append(f"{name} must be between {low} and {high}")


def _check_member(
    problems: list[str], name: str, value: object, enum_type: type[Enum]
) -> None:
    try:
        enum_type(value)
    except ValueError:
        problems.append(f"{name} has unsupported value {value!r}")
