"""Attempt recorder: write-once inserts and filtered history."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from liftplanner.core.errors import StorageError
from liftplanner.models.attempt import Attempt
from liftplanner.schemas.attempt import AttemptCreateSchema

logger = logging.getLogger(__name__)


async def record_attempt(db: AsyncSession, payload: AttemptCreateSchema) -> Attempt:
    """Insert one completed attempt and return the stored row.

    Unknown user or scenario ids are rejected by the foreign keys and surface
    as StorageError; nothing else is validated here.
    """
    attempt = Attempt(**payload.model_dump())
    db.add(attempt)
    try:
        await db.commit()
        await db.refresh(attempt)
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception(
            "Error creating attempt (user_id=%s, scenario_id=%s)",
            payload.user_id,
            payload.scenario_id,
        )
        raise StorageError("Failed to create attempt") from exc

    logger.info(
        "Recorded attempt %s: user %s, scenario %s, score %s, passed %s",
        attempt.id,
        attempt.user_id,
        attempt.scenario_id,
        attempt.score,
        attempt.passed,
    )
    return attempt


async def list_attempts(
    db: AsyncSession,
    user_id: int | None = None,
    scenario_id: int | None = None,
) -> list[Attempt]:
    """Attempts newest first, optionally narrowed to a user and/or scenario."""
    stmt = select(Attempt)
    if user_id is not None:
        stmt = stmt.where(Attempt.user_id == user_id)
    if scenario_id is not None:
        stmt = stmt.where(Attempt.scenario_id == scenario_id)
    stmt = stmt.order_by(Attempt.completed_at.desc(), Attempt.id.desc())

    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching attempts (user_id=%s, scenario_id=%s)", user_id, scenario_id)
        raise StorageError("Failed to fetch attempts") from exc
    return list(result.scalars().all())
