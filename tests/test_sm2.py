# tests/test_sm2.py
import pytest

from supermemo2.models import InvalidQualityError
from supermemo2.sm2 import (
    interval_for, next_ease_factor, next_repetitions, sm2_update,
)


def test_sm2_first_review_correct():
    """First correct answer: interval=1, repetitions=1."""
    result = sm2_update(quality=4, repetitions=0, ease_factor=2.5)
    assert result["interval"] == 1
    assert result["repetitions"] == 1
    assert result["ease_factor"] == pytest.approx(2.5)


def test_sm2_second_review_correct():
    """Second correct answer: interval=6."""
    result = sm2_update(quality=4, repetitions=1, ease_factor=2.5)
    assert result["interval"] == 6
    assert result["repetitions"] == 2


def test_sm2_third_review_correct():
    """Third+ correct: interval = ceil(6 * new ease factor)."""
    result = sm2_update(quality=4, repetitions=2, ease_factor=2.5)
    assert result["interval"] == 15  # ceil(6 * 2.5)
    assert result["repetitions"] == 3


def test_sm2_incorrect_resets_to_one():
    """Quality < 3 restarts the cycle at one repetition, not zero."""
    result = sm2_update(quality=1, repetitions=5, ease_factor=2.5)
    assert result["repetitions"] == 1
    assert result["interval"] == 1


def test_sm2_easy_increases_ease():
    result = sm2_update(quality=5, repetitions=2, ease_factor=2.5)
    assert result["ease_factor"] > 2.5


def test_sm2_rejects_invalid_quality():
    with pytest.raises(InvalidQualityError):
        sm2_update(quality=6, repetitions=0, ease_factor=2.5)


@pytest.mark.parametrize("quality", [0, 1, 2])
def test_next_repetitions_lapse(quality):
    assert next_repetitions(quality, 0) == 1
    assert next_repetitions(quality, 7) == 1


@pytest.mark.parametrize("quality", [3, 4, 5])
def test_next_repetitions_success(quality):
    assert next_repetitions(quality, 0) == 1
    assert next_repetitions(quality, 7) == 8


@pytest.mark.parametrize("quality,delta", [
    (5, 0.1), (4, 0.0), (3, -0.14), (2, -0.32), (1, -0.54), (0, -0.8),
])
def test_next_ease_factor_deltas(quality, delta):
    assert next_ease_factor(quality, 2.5) == pytest.approx(2.5 + delta)


def test_next_ease_factor_floors_the_value_read():
    assert next_ease_factor(5, 0.5) == pytest.approx(1.4)


def test_next_ease_factor_result_can_drop_below_floor():
    assert next_ease_factor(0, 1.3) == pytest.approx(0.5)


def test_interval_onboarding_table():
    assert interval_for(0, 2.5) == 0
    assert interval_for(1, 2.5) == 1
    assert interval_for(2, 2.5) == 6


def test_interval_geometric_growth():
    assert interval_for(3, 2.5) == 15
    assert interval_for(4, 2.5) == 38  # ceil(37.5)
    assert interval_for(5, 3.9) == 356  # ceil(355.914)


def test_interval_does_not_floor_ease_factor():
    assert interval_for(4, 1.0) == 6
