from datetime import datetime, timedelta, timezone

from liftplanner.schemas.progress import ProgressAttemptSchema
from liftplanner.services.progress import RECENT_ATTEMPTS_LIMIT, summarize_attempts

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def _attempt(id, score, passed, difficulty="beginner", scenario_id=1, minutes_ago=0):
    return ProgressAttemptSchema(
        id=id,
        scenario_id=scenario_id,
        scenario_title=f"Scenario {scenario_id}",
        difficulty=difficulty,
        score=score,
        passed=passed,
        completed_at=BASE_TIME - timedelta(minutes=minutes_ago),
        attempt_count=1,
    )


def test_empty_attempts_give_zero_stats():
    stats = summarize_attempts([])
    assert stats.total_attempts == 0
    assert stats.passed_attempts == 0
    assert stats.average_score == 0
    assert stats.best_score == 0
    assert stats.recent_attempts == []
    assert stats.by_difficulty.beginner == []
    assert stats.by_difficulty.intermediate == []
    assert stats.by_difficulty.advanced == []


def test_example_scores():
    attempts = [
        _attempt(3, 80, True, minutes_ago=0),
        _attempt(2, 95, True, minutes_ago=1),
        _attempt(1, 60, False, minutes_ago=2),
    ]
    stats = summarize_attempts(attempts)
    assert stats.total_attempts == 3
    assert stats.passed_attempts == 2
    assert stats.average_score == 78  # round(235 / 3)
    assert stats.best_score == 95


def test_missing_score_counts_as_zero_in_average():
    stats = summarize_attempts([_attempt(2, 100, True), _attempt(1, None, False)])
    assert stats.average_score == 50
    assert stats.best_score == 100


def test_average_rounds_half_up():
    stats = summarize_attempts([_attempt(2, 1, False), _attempt(1, 2, False)])
    assert stats.average_score == 2  # 1.5


def test_best_score_with_all_scores_missing():
    stats = summarize_attempts([_attempt(1, None, False)])
    assert stats.best_score == 0
    assert stats.average_score == 0


def test_by_difficulty_partitions_attempts_in_order():
    attempts = [
        _attempt(5, 50, False, "advanced"),
        _attempt(4, 70, True, "beginner"),
        _attempt(3, 90, True, "intermediate"),
        _attempt(2, 40, False, "beginner"),
        _attempt(1, 85, True, "advanced"),
    ]
    stats = summarize_attempts(attempts)
    groups = stats.by_difficulty
    assert [a.id for a in groups.beginner] == [4, 2]
    assert [a.id for a in groups.intermediate] == [3]
    assert [a.id for a in groups.advanced] == [5, 1]
    ids = sorted(a.id for g in (groups.beginner, groups.intermediate, groups.advanced) for a in g)
    assert ids == [1, 2, 3, 4, 5]
    assert stats.passed_attempts <= stats.total_attempts


def test_recent_attempts_is_prefix_of_at_most_five():
    attempts = [_attempt(i, i * 10, i % 2 == 0, minutes_ago=10 - i) for i in range(9, 1, -1)]
    stats = summarize_attempts(attempts)
    assert len(stats.recent_attempts) == RECENT_ATTEMPTS_LIMIT
    assert stats.recent_attempts == attempts[:RECENT_ATTEMPTS_LIMIT]


def test_serializes_with_camel_case_keys():
    stats = summarize_attempts([_attempt(1, 80, True)])
    dumped = stats.model_dump(by_alias=True)
    assert set(dumped) == {
        "totalAttempts",
        "passedAttempts",
        "averageScore",
        "bestScore",
        "byDifficulty",
        "recentAttempts",
    }
    assert set(dumped["byDifficulty"]) == {"beginner", "intermediate", "advanced"}
