"""Replay a history of review grades over an item."""
import logging
from typing import Iterable, Optional, Union

from supermemo2.models import Item, Quality, ReviewStep, make_quality, new_item

log = logging.getLogger(__name__)


def replay(
    grades: Iterable[Union[int, Quality]],
    item: Optional[Item] = None,
) -> list[ReviewStep]:
    """Review *item* once per grade, oldest first.

    Returns one step per grade holding the state after that review. The
    starting item is not modified. An invalid grade raises
    InvalidQualityError.
    """
    current = item if item is not None else new_item()
    steps = []
    for number, grade in enumerate(grades, 1):
        quality = make_quality(grade)
        current = current.review(quality)
        steps.append(ReviewStep(number=number, quality=quality, item=current))
    log.debug("Replayed %d reviews, final interval %d", len(steps), current.interval())
    return steps


def final_item(
    grades: Iterable[Union[int, Quality]],
    item: Optional[Item] = None,
) -> Item:
    """State after replaying *grades*; the starting item when there are none."""
    steps = replay(grades, item)
    if not steps:
        return item if item is not None else new_item()
    return steps[-1].item


def parse_grades(text: str) -> list[Quality]:
    """Parse a comma or space separated list of grades such as ``"4, 3, 5"``."""
    grades = []
    for token in text.replace(",", " ").split():
        try:
            raw = int(token)
        except ValueError:
            raise ValueError(f"Not a grade: {token!r}") from None
        grades.append(make_quality(raw))
    return grades
