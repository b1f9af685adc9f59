"""Macro target calculation (Mifflin-St Jeor based)."""

from macro_planner.domain.profile import (
    ActivityLevel,
    Gender,
    Goal,
    MacroTargets,
    UserProfile,
)

_ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
_DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# goal -> (calorie offset from TDEE, protein grams per kg)
_GOAL_ADJUSTMENTS: dict[Goal, tuple[float, float]] = {
    Goal.LOSE_WEIGHT: (-500, 1.6),
    Goal.GAIN_WEIGHT: (500, 1.6),
    Goal.GAIN_MUSCLE: (300, 2.0),
    Goal.MAINTAIN: (0, 1.0),
}

FAT_CALORIE_SHARE = 0.25
KCAL_PER_G_FAT = 9
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Return BMR in kcal/day."""
    bmr = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    bmr += 5 if profile.gender == Gender.MALE else -161
    return bmr


def activity_multiplier(level: ActivityLevel | str) -> float:
    """Return the TDEE multiplier for an activity tier."""
    return _ACTIVITY_MULTIPLIERS.get(level, _DEFAULT_ACTIVITY_MULTIPLIER)


def goal_adjustment(goal: Goal | str) -> tuple[float, float]:
    """Return (calorie offset, protein g/kg); unknown goals maintain."""
    return _GOAL_ADJUSTMENTS.get(goal, _GOAL_ADJUSTMENTS[Goal.MAINTAIN])


def compute_targets(profile: UserProfile) -> MacroTargets:
    """Compute daily calorie and macro targets.

    Fat is fixed at a quarter of calories, protein scales with body weight
    and carbs take the remainder. Carbs are not clamped and go negative when
    protein and fat already exceed the calorie budget.
    """
    tdee = basal_metabolic_rate(profile) * activity_multiplier(profile.activity_level)
    calorie_offset, protein_per_kg = goal_adjustment(profile.goal)
    calories = tdee + calorie_offset

    protein_g = profile.weight_kg * protein_per_kg
    fat_kcal = calories * FAT_CALORIE_SHARE
    fat_g = fat_kcal / KCAL_PER_G_FAT
    protein_kcal = protein_g * KCAL_PER_G_PROTEIN
    carb_kcal = calories - fat_kcal - protein_kcal
    carbs_g = carb_kcal / KCAL_PER_G_CARB

    return MacroTargets(
        calories=calories,
        protein_g=protein_g,
        fat_g=fat_g,
        carbs_g=carbs_g,
    )
