"""Scenario model: one lift-planning exercise with site and load geometry."""
import enum

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from liftplanner.db.session import Base


class Difficulty(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class ObstructionType(str, enum.Enum):
    building = "building"
    tree = "tree"
    power_line = "power_line"
    fence = "fence"
    vehicle = "vehicle"
    other = "other"


class HazardLevel(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class Scenario(Base):
    __tablename__ = "training_scenarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # stored as plain text so the filter can compare against query strings
    difficulty = Column(String(32), nullable=False, index=True)
    category = Column(String(64), nullable=True, index=True)
    estimated_time_minutes = Column(Integer, nullable=True)
    learning_objectives = Column(Text, nullable=True)

    # site footprint, meters
    site_width = Column(Float, nullable=True)
    site_length = Column(Float, nullable=True)

    # load: weight in kg, dimensions in meters
    load_weight = Column(Float, nullable=True)
    load_width = Column(Float, nullable=True)
    load_length = Column(Float, nullable=True)
    load_height = Column(Float, nullable=True)
    load_fragile = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    obstructions = relationship(
        "ScenarioObstruction",
        back_populates="scenario",
        order_by="ScenarioObstruction.id",
        cascade="all, delete-orphan",
    )
    attempts = relationship("Attempt", back_populates="scenario")


class ScenarioObstruction(Base):
    __tablename__ = "scenario_obstructions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    scenario_id = Column(Integer, ForeignKey("training_scenarios.id"), nullable=False, index=True)
    type = Column(String(32), nullable=False)  # building | tree | power_line | fence | vehicle | other
    x = Column(Float, nullable=False)
    y = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    hazard_level = Column(String(16), nullable=False, default=HazardLevel.medium.value)

    scenario = relationship("Scenario", back_populates="obstructions")
