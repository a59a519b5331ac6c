"""Pydantic schemas for recorded training attempts."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from liftplanner.schemas.envelope import RowId


class AttemptCreateSchema(BaseModel):
    user_id: RowId
    scenario_id: RowId
    selected_crane_id: str | None = Field(default=None, max_length=64)
    crane_x: float | None = None
    crane_y: float | None = None
    capacity_checked: bool = False
    radius_verified: bool = False
    ground_bearing_checked: bool = False
    obstacles_reviewed: bool = False
    outriggers_checked: bool = False
    score: int | None = Field(default=None, ge=0)
    passed: bool = False
    total_time_seconds: int | None = Field(default=None, ge=0)

    @field_validator("selected_crane_id", mode="before")
    @classmethod
    def stringify_crane_id(cls, v):
        # equipment ids arrive as numbers from older clients
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class AttemptOutSchema(BaseModel):
    id: int
    user_id: int
    scenario_id: int
    selected_crane_id: str | None
    crane_x: float | None
    crane_y: float | None
    capacity_checked: bool
    radius_verified: bool
    ground_bearing_checked: bool
    obstacles_reviewed: bool
    outriggers_checked: bool
    score: int | None
    passed: bool
    total_time_seconds: int | None
    completed_at: datetime

    class Config:
        from_attributes = True
