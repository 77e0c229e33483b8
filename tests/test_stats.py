import math
from datetime import datetime, timedelta, timezone

import pytest

from mathmentor.models import User
from mathmentor.services.stats import apply_answer, calculate_accuracy, reset_stats


@pytest.mark.parametrize(
    "correct, total, expected",
    [
        (0, 0, 0),
        (3, 0, 0),
        (1, 1, 100),
        (1, 2, 50),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (5, 8, 63),
        (0, 7, 0),
    ],
)
def test_calculate_accuracy(correct, total, expected):
    assert calculate_accuracy(correct, total) == expected


def test_accuracy_tracks_counters_after_every_answer():
    user = User(name="Bo", name_key="bo")
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    pattern = [True, False, False, True, True, False, True, True, False, True]
    for i, correct in enumerate(pattern):
        apply_answer(user, correct, 10 if correct else 0, now + timedelta(seconds=i))
        assert user.accuracy == calculate_accuracy(user.correct_answers, user.total_questions)
        assert user.accuracy == math.floor(user.correct_answers / user.total_questions * 100 + 0.5)
    assert user.total_questions == len(pattern)
    assert user.correct_answers == sum(pattern)
    assert user.xp == 10 * sum(pattern)
    assert user.last_played == now + timedelta(seconds=len(pattern) - 1)


def test_reset_stats_keeps_identity():
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    user = User(id="abc", name="Bo", name_key="bo", created_at=created, last_played=created)
    apply_answer(user, True, 15, created)
    later = created + timedelta(minutes=5)

    reset_stats(user, later)

    assert (user.xp, user.total_questions, user.correct_answers, user.accuracy) == (0, 0, 0, 0)
    assert user.id == "abc"
    assert user.created_at == created
    assert user.last_played == later
