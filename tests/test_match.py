"""Tests for scores, the win predicate and restart."""

import pytest

from pong.entities import LEFT, RIGHT


def test_new_match_starts_level(match):
    assert (match.left_score, match.right_score) == (0, 0)
    assert not match.check_win()
    assert match.winner() is None


@pytest.mark.parametrize(
    "left, right, over",
    [(6, 6, False), (7, 0, True), (0, 7, True), (9, 3, True), (6, 0, False)],
)
def test_check_win(match, left, right, over):
    match.left_score, match.right_score = left, right
    assert match.check_win() is over


def test_award_each_side(match):
    match.award(LEFT)
    match.award(RIGHT)
    match.award(RIGHT)
    assert (match.left_score, match.right_score) == (1, 2)


def test_award_unknown_side_raises(match):
    with pytest.raises(ValueError):
        match.award("middle")


def test_winner_is_leading_side(match):
    match.left_score, match.right_score = 3, 7
    assert match.winner() == RIGHT


def test_restart_ignored_mid_rally(match):
    match.left_score, match.right_score = 4, 2
    assert match.restart() is False
    assert (match.left_score, match.right_score) == (4, 2)


def test_restart_after_win_resets_scores_and_ball(match):
    match.left_score = 7
    match.ball.x, match.ball.y = 12.0, 34.0
    assert match.restart() is True
    assert (match.left_score, match.right_score) == (0, 0)
    assert (match.ball.x, match.ball.y) == match.court.center
    assert match.ball.speed_x in (-4, -3, 3, 4)


def test_custom_winning_score(config, rng):
    from pong.match import MatchState

    config.winning_score = 3
    m = MatchState(config, rng)
    m.left_score = 3
    assert m.check_win()
