"""Checklist scoring for a training attempt, and the trainee feedback text.

Runs on the trainer side before an attempt is submitted; the API stores
``score``/``passed`` as given and never re-checks them.
"""

# Score: 20 points per satisfied criterion, 5 criteria -> 0..100
CRITERION_POINTS = 20
PASS_THRESHOLD = 80
MIN_SCORE = 0
MAX_SCORE = 100

FEEDBACK_PASSED = "Excellent work! You successfully planned this lift."
FEEDBACK_FAILED = "This lift plan has issues that need to be addressed."

# missed check -> feedback line
MISSED_CHECK_FEEDBACK = {
    "capacity_checked": "You did not verify the crane has sufficient capacity for the load.",
    "radius_verified": "You did not check if the boom radius is sufficient to reach the target.",
    "ground_bearing_checked": "You did not verify the ground can support the crane weight.",
    "obstacles_reviewed": "You did not identify all obstructions on the site.",
}


def score_checklist(
    *,
    crane_positioned: bool,
    capacity_checked: bool,
    radius_verified: bool,
    ground_bearing_checked: bool,
    obstacles_reviewed: bool,
) -> int:
    """Return 0..100 from the pre-lift checks the trainee completed."""
    criteria = (
        crane_positioned,
        capacity_checked,
        radius_verified,
        ground_bearing_checked,
        obstacles_reviewed,
    )
    score = sum(CRITERION_POINTS for met in criteria if met)
    return max(MIN_SCORE, min(MAX_SCORE, score))


def is_passing(score: int | None) -> bool:
    return (score or 0) >= PASS_THRESHOLD


def build_feedback(
    passed: bool,
    *,
    capacity_checked: bool,
    radius_verified: bool,
    ground_bearing_checked: bool,
    obstacles_reviewed: bool,
) -> list[str]:
    """Headline plus one line per missed pre-lift check."""
    lines = [FEEDBACK_PASSED if passed else FEEDBACK_FAILED]
    checks = {
        "capacity_checked": capacity_checked,
        "radius_verified": radius_verified,
        "ground_bearing_checked": ground_bearing_checked,
        "obstacles_reviewed": obstacles_reviewed,
    }
    for name, message in MISSED_CHECK_FEEDBACK.items():
        if not checks[name]:
            lines.append(message)
    return lines
