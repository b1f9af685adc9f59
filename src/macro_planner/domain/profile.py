"""Domain models for user profiles and macro targets."""

from dataclasses import dataclass, field
from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Ordered activity tiers, least to most active."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(str, Enum):
    """Body composition goal."""

    LOSE_WEIGHT = "lose_weight"
    MAINTAIN = "maintain"
    GAIN_WEIGHT = "gain_weight"
    GAIN_MUSCLE = "gain_muscle"


class MeatType(str, Enum):
    """Meats a user may opt into; declaration order is prompt order."""

    CHICKEN = "chicken"
    FISH = "fish"
    BEEF = "beef"
    PORK = "pork"


GOAL_LABELS: dict[Goal, str] = {
    Goal.LOSE_WEIGHT: "Lose Weight",
    Goal.MAINTAIN: "Maintain Weight",
    Goal.GAIN_WEIGHT: "Gain Weight",
    Goal.GAIN_MUSCLE: "Gain Muscle",
}

ACTIVITY_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "Sedentary (little or no exercise)",
    ActivityLevel.LIGHT: "Lightly active (exercise 1-3 days/week)",
    ActivityLevel.MODERATE: "Moderately active (exercise 3-5 days/week)",
    ActivityLevel.ACTIVE: "Active (exercise 6-7 days/week)",
    ActivityLevel.VERY_ACTIVE: "Very active (hard exercise & physical job)",
}


@dataclass(frozen=True)
class UserProfile:
    """Body metrics and preferences supplied by the caller."""

    age: float
    height_cm: float
    weight_kg: float
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal
    meat_preferences: frozenset[MeatType] = field(default_factory=frozenset)


@dataclass(frozen=True)
class MacroTargets:
    """Daily targets in kcal and grams."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
