import pytest

from liftplanner.services.scoring import (
    FEEDBACK_FAILED,
    FEEDBACK_PASSED,
    MISSED_CHECK_FEEDBACK,
    PASS_THRESHOLD,
    build_feedback,
    is_passing,
    score_checklist,
)

ALL_DONE = dict(
    crane_positioned=True,
    capacity_checked=True,
    radius_verified=True,
    ground_bearing_checked=True,
    obstacles_reviewed=True,
)


def test_all_checks_score_full_marks():
    assert score_checklist(**ALL_DONE) == 100


def test_each_criterion_is_worth_twenty_points():
    for name in ALL_DONE:
        checks = dict(ALL_DONE, **{name: False})
        assert score_checklist(**checks) == 80


def test_nothing_done_scores_zero():
    assert score_checklist(**{k: False for k in ALL_DONE}) == 0


def test_pass_threshold():
    assert PASS_THRESHOLD == 80
    assert is_passing(80)
    assert not is_passing(60)
    assert not is_passing(None)


def test_feedback_lists_missed_checks():
    lines = build_feedback(
        False,
        capacity_checked=False,
        radius_verified=True,
        ground_bearing_checked=True,
        obstacles_reviewed=False,
    )
    assert lines == [
        FEEDBACK_FAILED,
        MISSED_CHECK_FEEDBACK["capacity_checked"],
        MISSED_CHECK_FEEDBACK["obstacles_reviewed"],
    ]


def test_feedback_for_clean_pass():
    checks = {k: v for k, v in ALL_DONE.items() if k != "crane_positioned"}
    assert build_feedback(True, **checks) == [FEEDBACK_PASSED]


def test_feedback_requires_every_check():
    with pytest.raises(TypeError):
        build_feedback(True, capacity_checked=True)
