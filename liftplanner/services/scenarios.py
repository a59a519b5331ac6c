"""Scenario store: filtered listing, lookup and creation."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from liftplanner.core.errors import NotFoundError, StorageError
from liftplanner.models.scenario import Scenario, ScenarioObstruction
from liftplanner.schemas.scenario import ScenarioCreateSchema

logger = logging.getLogger(__name__)


async def list_scenarios(
    db: AsyncSession,
    difficulty: str | None = None,
    category: str | None = None,
) -> list[Scenario]:
    """Scenarios matching both filters exactly, ordered by difficulty then title."""
    stmt = select(Scenario)
    if difficulty:
        stmt = stmt.where(Scenario.difficulty == difficulty)
    if category:
        stmt = stmt.where(Scenario.category == category)
    stmt = stmt.order_by(Scenario.difficulty, Scenario.title)

    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching scenarios (difficulty=%r, category=%r)", difficulty, category)
        raise StorageError("Failed to fetch scenarios") from exc
    return list(result.scalars().all())


async def get_scenario(db: AsyncSession, scenario_id: int) -> Scenario:
    stmt = (
        select(Scenario)
        .options(selectinload(Scenario.obstructions))
        .where(Scenario.id == scenario_id)
        .execution_options(populate_existing=True)
    )
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching scenario %s", scenario_id)
        raise StorageError("Failed to fetch scenario") from exc

    scenario = result.scalar_one_or_none()
    if scenario is None:
        raise NotFoundError("Scenario not found")
    return scenario


async def create_scenario(db: AsyncSession, payload: ScenarioCreateSchema) -> Scenario:
    """Insert a scenario and its obstructions. Titles are not unique."""
    fields = payload.model_dump(exclude={"obstructions", "difficulty"})
    scenario = Scenario(difficulty=payload.difficulty.value, **fields)
    scenario.obstructions = [
        ScenarioObstruction(
            type=o.type.value,
            x=o.x,
            y=o.y,
            width=o.width,
            height=o.height,
            hazard_level=o.hazard_level.value,
        )
        for o in payload.obstructions
    ]
    db.add(scenario)
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Error creating scenario %r", payload.title)
        raise StorageError("Failed to create scenario") from exc

    logger.info("Created scenario: %s (ID: %s)", scenario.title, scenario.id)
    # reload so server defaults and the obstruction ids are populated
    return await get_scenario(db, scenario.id)
