from liftplanner.models.user import User
from liftplanner.models.scenario import Difficulty, Scenario, ScenarioObstruction
from liftplanner.models.attempt import Attempt

__all__ = ["User", "Difficulty", "Scenario", "ScenarioObstruction", "Attempt"]
