"""SQLAlchemy declarative base and model imports for Alembic."""
from liftplanner.db.session import Base

# Import all models so Alembic can see them
from liftplanner.models.attempt import Attempt  # noqa: F401
from liftplanner.models.scenario import Scenario, ScenarioObstruction  # noqa: F401
from liftplanner.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Scenario", "ScenarioObstruction", "Attempt"]
