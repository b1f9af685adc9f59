"""End-to-end planning flow: validate, calculate, compose, generate."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from macro_planner.domain.plans import DailyPlan, ShakeRecipe
from macro_planner.domain.profile import MacroTargets, UserProfile
from macro_planner.domain.regions import Region
from macro_planner.services.generation import PlanRequestClient, RecipeRequestClient
from macro_planner.services.macros import compute_targets
from macro_planner.services.prompts import (
    compose_meal_plan_request,
    compose_shake_request,
)
from macro_planner.services.validation import validate_ingredients, validate_profile

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanResult:
    """Targets together with the plan generated for them."""

    targets: MacroTargets
    plan: DailyPlan


@dataclass
class PlannerService:
    """Coordinates the planner core for a single caller action."""

    plan_client: PlanRequestClient
    recipe_client: RecipeRequestClient

    def calculate(self, profile: UserProfile) -> MacroTargets:
        """Validate a profile and return its macro targets."""
        return compute_targets(validate_profile(profile))

    async def generate_plan(self, profile: UserProfile, region: Region) -> PlanResult:
        """Compute targets and request a matching meal plan."""
        targets = self.calculate(profile)
        request = compose_meal_plan_request(profile, targets, region)
        _logger.info(
            "Generating meal plan: region=%s goal=%s calories=%s",
            Region(region).value,
            profile.goal,
            round(targets.calories),
        )
        plan = await self.plan_client.fetch_plan(request)
        return PlanResult(targets=targets, plan=plan)

    async def generate_shake(
        self, ingredients: Iterable[str], region: Region
    ) -> ShakeRecipe:
        """Request a shake recipe from a validated ingredient selection."""
        selected = validate_ingredients(ingredients)
        request = compose_shake_request(selected, region)
        _logger.info(
            "Generating shake recipe: region=%s ingredients=%s",
            Region(region).value,
            len(selected),
        )
        return await self.recipe_client.fetch_recipe(request)
