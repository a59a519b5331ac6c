"""Attempt model: one completed training session. Write-once."""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from liftplanner.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Attempt(Base):
    __tablename__ = "scenario_attempts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    scenario_id = Column(Integer, ForeignKey("training_scenarios.id"), nullable=False, index=True)

    # chosen equipment and where it was placed on the site plan
    selected_crane_id = Column(String(64), nullable=True)
    crane_x = Column(Float, nullable=True)
    crane_y = Column(Float, nullable=True)

    # pre-lift checklist
    capacity_checked = Column(Boolean, nullable=False, default=False)
    radius_verified = Column(Boolean, nullable=False, default=False)
    ground_bearing_checked = Column(Boolean, nullable=False, default=False)
    obstacles_reviewed = Column(Boolean, nullable=False, default=False)
    outriggers_checked = Column(Boolean, nullable=False, default=False)

    score = Column(Integer, nullable=True)  # 0-100, computed by the trainer UI
    passed = Column(Boolean, nullable=False, default=False)
    total_time_seconds = Column(Integer, nullable=True)

    completed_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        index=True,
    )

    user = relationship("User", back_populates="attempts")
    scenario = relationship("Scenario", back_populates="attempts")
