"""SM-2 spaced repetition algorithm."""
import math

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3

MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


def next_repetitions(quality: int, repetitions: int) -> int:
    """Repetition count after a review graded *quality*.

    A lapse restarts the cycle at 1, not 0: the item counts as learned once.
    """
    if quality < PASSING_QUALITY:
        return 1
    return repetitions + 1


def next_ease_factor(quality: int, ease_factor: float) -> float:
    """Ease factor after a review graded *quality*.

    The floor is applied to the value read, not to the result, so the
    returned factor can drop below MIN_EASE_FACTOR until the next review.
    """
    ef = max(ease_factor, MIN_EASE_FACTOR)
    q = float(quality)
    return ef + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))


def interval_for(repetitions: int, ease_factor: float) -> int:
    """Days until the next review for the given state."""
    if repetitions == 0:
        return 0
    if repetitions == 1:
        return FIRST_INTERVAL
    if repetitions == 2:
        return SECOND_INTERVAL
    return math.ceil(SECOND_INTERVAL * ease_factor ** (repetitions - 2))


def sm2_update(
    quality: int,
    repetitions: int,
    ease_factor: float,
) -> dict:
    """Calculate next review parameters using SM-2.

    Args:
        quality: Rating 0-5 (0=complete blackout, 5=perfect)
        repetitions: Number of consecutive correct reviews
        ease_factor: Current ease factor (floored at 1.3 before use)

    Returns:
        Dict with updated interval, repetitions, ease_factor.

    Raises:
        InvalidQualityError: quality is outside 0-5.
    """
    from supermemo2.models import make_quality

    q = make_quality(quality).value
    new_repetitions = next_repetitions(q, repetitions)
    new_ef = next_ease_factor(q, ease_factor)

    return {
        "interval": interval_for(new_repetitions, new_ef),
        "repetitions": new_repetitions,
        "ease_factor": new_ef,
    }
