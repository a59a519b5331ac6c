from liftplanner.services.progress import get_progress, summarize_attempts
from liftplanner.services.scoring import build_feedback, is_passing, score_checklist
from liftplanner.services.seeding import seed_scenarios

__all__ = [
    "build_feedback",
    "get_progress",
    "is_passing",
    "score_checklist",
    "seed_scenarios",
    "summarize_attempts",
]
