"""Pydantic models for planner API payloads."""

from pydantic import BaseModel, Field

from macro_planner.domain.profile import (
    ActivityLevel,
    Gender,
    Goal,
    MacroTargets,
    MeatType,
    UserProfile,
)
from macro_planner.domain.regions import Region


class ProfilePayload(BaseModel):
    """Profile submitted by the UI; ranges are checked by the core."""

    age: float
    height_cm: float
    weight_kg: float
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal
    meat_preferences: list[MeatType] = Field(default_factory=list)

    def to_profile(self) -> UserProfile:
        """Convert the payload into an immutable domain profile."""
        return UserProfile(
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            gender=self.gender,
            activity_level=self.activity_level,
            goal=self.goal,
            meat_preferences=frozenset(self.meat_preferences),
        )


class PlanPayload(BaseModel):
    """Meal plan request body."""

    profile: ProfilePayload
    region: Region | None = None


class ShakePayload(BaseModel):
    """Shake recipe request body."""

    ingredients: list[str]
    region: Region | None = None


class TargetsResponse(BaseModel):
    """Macro targets as returned to the UI."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    @classmethod
    def from_targets(cls, targets: MacroTargets) -> "TargetsResponse":
        return cls(
            calories=targets.calories,
            protein_g=targets.protein_g,
            fat_g=targets.fat_g,
            carbs_g=targets.carbs_g,
        )
