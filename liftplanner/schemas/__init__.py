from liftplanner.schemas.attempt import AttemptCreateSchema, AttemptOutSchema
from liftplanner.schemas.envelope import Failure, Success, SuccessList
from liftplanner.schemas.progress import (
    DifficultyBreakdownSchema,
    ProgressAttemptSchema,
    ProgressStatsSchema,
)
from liftplanner.schemas.scenario import (
    ObstructionOutSchema,
    ObstructionSchema,
    ScenarioCreateSchema,
    ScenarioDetailSchema,
    ScenarioOutSchema,
)

__all__ = [
    "AttemptCreateSchema",
    "AttemptOutSchema",
    "DifficultyBreakdownSchema",
    "Failure",
    "ObstructionOutSchema",
    "ObstructionSchema",
    "ProgressAttemptSchema",
    "ProgressStatsSchema",
    "ScenarioCreateSchema",
    "ScenarioDetailSchema",
    "ScenarioOutSchema",
    "Success",
    "SuccessList",
]
