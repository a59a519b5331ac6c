"""API routes: JSON for scenarios, attempts, progress."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from liftplanner.core.errors import InvalidParameterError, MissingParameterError
from liftplanner.core.security import require_admin
from liftplanner.db.session import get_db
from liftplanner.schemas.attempt import AttemptCreateSchema, AttemptOutSchema
from liftplanner.schemas.envelope import MAX_ID, Success, SuccessList
from liftplanner.schemas.progress import ProgressStatsSchema
from liftplanner.schemas.scenario import ScenarioCreateSchema, ScenarioDetailSchema, ScenarioOutSchema
from liftplanner.services import attempts as attempt_service
from liftplanner.services import progress as progress_service
from liftplanner.services import scenarios as scenario_service

router = APIRouter(prefix="/api", tags=["api"])


def _parse_id(name: str, raw: str | None) -> int | None:
    """Optional integer query parameter; empty means absent."""
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        raise InvalidParameterError(f"{name} must be an integer") from None
    if not 1 <= value <= MAX_ID:
        raise InvalidParameterError(f"{name} is out of range")
    return value


# ---------- scenarios ----------

@router.get("/scenarios", response_model=SuccessList[ScenarioOutSchema])
async def list_scenarios(
    db: Annotated[AsyncSession, Depends(get_db)],
    difficulty: str | None = None,
    category: str | None = None,
):
    """List scenarios, optionally filtered by exact difficulty and/or category."""
    scenarios = await scenario_service.list_scenarios(db, difficulty=difficulty, category=category)
    data = [ScenarioOutSchema.model_validate(s) for s in scenarios]
    return SuccessList[ScenarioOutSchema](data=data, count=len(data))


@router.post(
    "/scenarios",
    status_code=201,
    response_model=Success[ScenarioDetailSchema],
    dependencies=[Depends(require_admin)],
)
async def create_scenario(
    body: ScenarioCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    scenario = await scenario_service.create_scenario(db, body)
    return Success[ScenarioDetailSchema](data=ScenarioDetailSchema.model_validate(scenario))


@router.get("/scenarios/{scenario_id}", response_model=Success[ScenarioDetailSchema])
async def get_scenario(
    scenario_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Get one scenario by ID, with its site obstructions."""
    scenario = await scenario_service.get_scenario(db, scenario_id)
    return Success[ScenarioDetailSchema](data=ScenarioDetailSchema.model_validate(scenario))


# ---------- attempts ----------

@router.get("/attempts", response_model=SuccessList[AttemptOutSchema])
async def list_attempts(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    scenario_id: Annotated[str | None, Query(alias="scenarioId")] = None,
):
    """Attempts newest first; userId and scenarioId narrow the list."""
    attempts = await attempt_service.list_attempts(
        db,
        user_id=_parse_id("userId", user_id),
        scenario_id=_parse_id("scenarioId", scenario_id),
    )
    data = [AttemptOutSchema.model_validate(a) for a in attempts]
    return SuccessList[AttemptOutSchema](data=data, count=len(data))


@router.post("/attempts", status_code=201, response_model=Success[AttemptOutSchema])
async def create_attempt(
    body: AttemptCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Record a completed attempt; score and passed are stored as submitted."""
    attempt = await attempt_service.record_attempt(db, body)
    return Success[AttemptOutSchema](data=AttemptOutSchema.model_validate(attempt))


# ---------- progress ----------

@router.get("/progress", response_model=Success[ProgressStatsSchema])
async def get_progress(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str | None, Query(alias="userId")] = None,
):
    """Get totals, average/best score, attempts by difficulty and the 5 most recent."""
    uid = _parse_id("userId", user_id)
    if uid is None:
        raise MissingParameterError("userId is required")
    stats = await progress_service.get_progress(db, uid)
    return Success[ProgressStatsSchema](data=stats)
