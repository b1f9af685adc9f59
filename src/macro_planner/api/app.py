"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from macro_planner.api.models import (
    PlanPayload,
    ProfilePayload,
    ShakePayload,
    TargetsResponse,
)
from macro_planner.app_logging import configure_logging
from macro_planner.containers import AppContainer, build_container
from macro_planner.domain.errors import GenerationFailure, ValidationError
from macro_planner.domain.ingredients import SHAKE_INGREDIENTS
from macro_planner.domain.profile import (
    ACTIVITY_LABELS,
    GOAL_LABELS,
    ActivityLevel,
    Gender,
    Goal,
    MeatType,
)
from macro_planner.domain.regions import REGION_PROFILES, Region


def create_app(container: AppContainer | None = None) -> FastAPI:
    """Create a FastAPI app configured with dependencies.

    Without a container the default one is built from the environment, which
    lets ASGI servers use this function as an app factory.
    """
    container = container or build_container()
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.problems},
        )

    @app.exception_handler(GenerationFailure)
    async def generation_failure_handler(
        request: Request, exc: GenerationFailure
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": exc.message},
        )

    def _region(request: Request, region: Region | None) -> Region:
        state_container: AppContainer = request.app.state.container
        return region or state_container.settings.default_region

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/regions")
    async def regions() -> dict[str, object]:
        """List supported regions with their display names."""
        return {
            "regions": [
                {
                    "key": profile.region.value,
                    "name": profile.display_name,
                    "currency": profile.currency_label,
                }
                for profile in REGION_PROFILES.values()
            ]
        }

    @app.get("/options")
    async def options() -> dict[str, object]:
        """List the accepted profile choices with their display labels."""
        return {
            "genders": [gender.value for gender in Gender],
            "activity_levels": [
                {"key": level.value, "label": ACTIVITY_LABELS[level]}
                for level in ActivityLevel
            ],
            "goals": [{"key": goal.value, "label": GOAL_LABELS[goal]} for goal in Goal],
            "meats": [meat.value for meat in MeatType],
        }

    @app.get("/ingredients")
    async def ingredients() -> dict[str, object]:
        """Return the shake pantry grouped by category."""
        return {
            "categories": [
                {"name": category.name, "items": list(category.items)}
                for category in SHAKE_INGREDIENTS
            ]
        }

    @app.post("/targets")
    async def targets(payload: ProfilePayload, request: Request) -> TargetsResponse:
        """Return macro targets for a profile."""
        state_container: AppContainer = request.app.state.container
        result = state_container.planner_service.calculate(payload.to_profile())
        return TargetsResponse.from_targets(result)

    @app.post("/plans")
    async def plans(payload: PlanPayload, request: Request) -> dict[str, object]:
        """Compute targets and generate a one-day meal plan."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.planner_service.generate_plan(
            payload.profile.to_profile(), _region(request, payload.region)
        )
        return {
            "targets": TargetsResponse.from_targets(result.targets).model_dump(),
            "plan": result.plan.model_dump(by_alias=True),
        }

    @app.post("/shakes")
    async def shakes(payload: ShakePayload, request: Request) -> dict[str, object]:
        """Generate a shake recipe from selected ingredients."""
        state_container: AppContainer = request.app.state.container
        recipe = await state_container.planner_service.generate_shake(
            payload.ingredients, _region(request, payload.region)
        )
        return {"recipe": recipe.model_dump(by_alias=True)}

    return app
