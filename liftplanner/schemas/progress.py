"""Pydantic schemas for aggregated trainee progress."""
from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ProgressAttemptSchema(BaseModel):
    """Attempt joined with its scenario, as listed in progress buckets."""

    id: int
    scenario_id: int
    scenario_title: str
    difficulty: str
    score: int | None = None
    passed: bool
    completed_at: datetime
    attempt_count: int  # this user's attempts on the same scenario

    class Config:
        from_attributes = True


class DifficultyBreakdownSchema(BaseModel):
    beginner: list[ProgressAttemptSchema] = []
    intermediate: list[ProgressAttemptSchema] = []
    advanced: list[ProgressAttemptSchema] = []


class ProgressStatsSchema(BaseModel):
    total_attempts: int
    passed_attempts: int
    average_score: int
    best_score: int
    by_difficulty: DifficultyBreakdownSchema
    recent_attempts: list[ProgressAttemptSchema]

    class Config:
        # serialized camelCase (totalAttempts, byDifficulty, ...) for the UI
        alias_generator = to_camel
        populate_by_name = True
