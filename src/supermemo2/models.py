"""Data classes for the SM-2 scheduling model."""
import logging
from dataclasses import dataclass, replace
from typing import Union

from supermemo2.sm2 import (
    DEFAULT_EASE_FACTOR, MAX_QUALITY, MIN_QUALITY, PASSING_QUALITY,
    interval_for, next_ease_factor, next_repetitions,
)

log = logging.getLogger(__name__)

QUALITY_LABELS = {
    0: "complete blackout",
    1: "incorrect, but the correct answer was recognised",
    2: "incorrect, but the correct answer seemed easy",
    3: "correct, recalled with serious difficulty",
    4: "correct, after a hesitation",
    5: "perfect response",
}


class InvalidQualityError(ValueError):
    """Raised when a quality grade falls outside 0-5."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, {value} was given."
        )


@dataclass(frozen=True, order=True)
class Quality:
    """A validated recall grade for one review."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Quality must be an integer, got {type(self.value).__name__}")
        if self.value < MIN_QUALITY or self.value > MAX_QUALITY:
            raise InvalidQualityError(self.value)

    @property
    def is_success(self) -> bool:
        return self.value >= PASSING_QUALITY

    @property
    def is_lapse(self) -> bool:
        return not self.is_success

    @property
    def label(self) -> str:
        return QUALITY_LABELS[self.value]


def make_quality(raw: Union[int, Quality]) -> Quality:
    """Validate *raw* and wrap it as a Quality.

    Passing an existing Quality returns it unchanged.
    """
    if isinstance(raw, Quality):
        return raw
    return Quality(raw)


@dataclass
class Item:
    """Scheduling state of one learnable unit.

    ``ease_factor`` is stored as computed. The 1.3 floor is applied when a
    review reads it, so a restored item, or one that just had a bad review,
    may report a lower value, and ``interval()`` uses it as is.
    """
    repetitions: int = 0
    ease_factor: float = DEFAULT_EASE_FACTOR

    def interval(self) -> int:
        """Days after the previous review at which this item is due again."""
        return interval_for(self.repetitions, self.ease_factor)

    def review(self, quality: Union[int, Quality]) -> "Item":
        """Return the state that follows a review graded *quality*.

        Raises InvalidQualityError for grades outside 0-5; the receiver is
        never modified.
        """
        q = make_quality(quality)
        reviewed = replace(
            self,
            repetitions=next_repetitions(q.value, self.repetitions),
            ease_factor=next_ease_factor(q.value, self.ease_factor),
        )
        log.debug(
            "Reviewed item (q=%d) reps %d -> %d, ef %.3f -> %.3f",
            q.value, self.repetitions, reviewed.repetitions,
            self.ease_factor, reviewed.ease_factor,
        )
        return reviewed

    def review_in_place(self, quality: Union[int, Quality]) -> None:
        """Apply a review to this item."""
        reviewed = self.review(quality)
        self.repetitions = reviewed.repetitions
        self.ease_factor = reviewed.ease_factor

    def as_dict(self) -> dict:
        return {
            "repetitions": self.repetitions,
            "ease_factor": self.ease_factor,
            "interval": self.interval(),
        }


@dataclass
class ReviewStep:
    number: int
    quality: Quality
    item: Item


def new_item() -> Item:
    """A never-reviewed item: 0 repetitions, ease factor 2.5."""
    return Item()


def restore_item(repetitions: int, ease_factor: float) -> Item:
    """Rebuild an item from previously stored state, without validation."""
    return Item(repetitions=repetitions, ease_factor=ease_factor)
