"""Pydantic schemas for scenarios and their site obstructions."""
from datetime import datetime

from pydantic import BaseModel, Field

from liftplanner.models.scenario import Difficulty, HazardLevel, ObstructionType


class ObstructionSchema(BaseModel):
    type: ObstructionType
    x: float
    y: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    hazard_level: HazardLevel = HazardLevel.medium


class ObstructionOutSchema(BaseModel):
    id: int
    type: str
    x: float
    y: float
    width: float
    height: float
    hazard_level: str

    class Config:
        from_attributes = True


class ScenarioCreateSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    difficulty: Difficulty
    category: str | None = Field(default=None, max_length=64)
    estimated_time_minutes: int | None = Field(default=None, ge=0)
    learning_objectives: str | None = None
    site_width: float | None = Field(default=None, ge=0)
    site_length: float | None = Field(default=None, ge=0)
    load_weight: float | None = Field(default=None, ge=0)
    load_width: float | None = Field(default=None, ge=0)
    load_length: float | None = Field(default=None, ge=0)
    load_height: float | None = Field(default=None, ge=0)
    load_fragile: bool = False
    obstructions: list[ObstructionSchema] = []


class ScenarioOutSchema(BaseModel):
    id: int
    title: str
    description: str | None
    difficulty: str
    category: str | None
    estimated_time_minutes: int | None
    learning_objectives: str | None
    site_width: float | None
    site_length: float | None
    load_weight: float | None
    load_width: float | None
    load_length: float | None
    load_height: float | None
    load_fragile: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class ScenarioDetailSchema(ScenarioOutSchema):
    obstructions: list[ObstructionOutSchema] = []
