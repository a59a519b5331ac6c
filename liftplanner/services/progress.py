"""Progress aggregation: one joined read per request, statistics derived in memory.

Nothing is cached; every call recomputes from the user's attempts.
"""
import logging
import math
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from liftplanner.core.errors import StorageError
from liftplanner.models.attempt import Attempt
from liftplanner.models.scenario import Difficulty, Scenario
from liftplanner.schemas.progress import (
    DifficultyBreakdownSchema,
    ProgressAttemptSchema,
    ProgressStatsSchema,
)

logger = logging.getLogger(__name__)

RECENT_ATTEMPTS_LIMIT = 5


def _round_half_up(value: float) -> int:
    # scores are non-negative, so floor(x + 0.5) rounds .5 upwards
    return int(math.floor(value + 0.5))


def summarize_attempts(attempts: Sequence[ProgressAttemptSchema]) -> ProgressStatsSchema:
    """Derive progress statistics from attempts ordered most recent first.

    A missing score counts as 0 and the attempt still counts towards the
    average's denominator.
    """
    total = len(attempts)
    passed = sum(1 for a in attempts if a.passed)
    scores = [a.score or 0 for a in attempts]
    average = _round_half_up(sum(scores) / total) if total else 0
    best = max(scores) if scores else 0

    buckets: dict[str, list[ProgressAttemptSchema]] = {d.value: [] for d in Difficulty}
    for a in attempts:
        bucket = buckets.get(a.difficulty)
        if bucket is not None:
            bucket.append(a)

    return ProgressStatsSchema(
        total_attempts=total,
        passed_attempts=passed,
        average_score=average,
        best_score=best,
        by_difficulty=DifficultyBreakdownSchema(**buckets),
        recent_attempts=list(attempts[:RECENT_ATTEMPTS_LIMIT]),
    )


async def fetch_progress_rows(db: AsyncSession, user_id: int) -> list[ProgressAttemptSchema]:
    """User's attempts joined with scenario title/difficulty, newest first.

    attempt_count is a window count over the user's attempts per scenario.
    """
    attempt_count = func.count(Attempt.id).over(partition_by=Attempt.scenario_id)
    stmt = (
        select(
            Attempt.id,
            Attempt.scenario_id,
            Scenario.title.label("scenario_title"),
            Scenario.difficulty,
            Attempt.score,
            Attempt.passed,
            Attempt.completed_at,
            attempt_count.label("attempt_count"),
        )
        .join(Scenario, Attempt.scenario_id == Scenario.id)
        .where(Attempt.user_id == user_id)
        .order_by(Attempt.completed_at.desc(), Attempt.id.desc())
    )
    result = await db.execute(stmt)
    return [ProgressAttemptSchema(**row._mapping) for row in result]


async def get_progress(db: AsyncSession, user_id: int) -> ProgressStatsSchema:
    try:
        rows = await fetch_progress_rows(db, user_id)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching progress for user %s", user_id)
        raise StorageError("Failed to fetch progress") from exc
    return summarize_attempts(rows)
