"""SuperMemo 2 scheduling for a single learnable item.

    >>> from supermemo2 import new_item
    >>> new_item().review(4).review(3).review(5).interval()
    15
"""
from supermemo2.history import final_item, parse_grades, replay
from supermemo2.models import (
    QUALITY_LABELS, InvalidQualityError, Item, Quality, ReviewStep,
    make_quality, new_item, restore_item,
)
from supermemo2.sm2 import sm2_update

__all__ = [
    "QUALITY_LABELS", "InvalidQualityError", "Item", "Quality", "ReviewStep",
    "final_item", "make_quality", "new_item", "parse_grades", "replay",
    "restore_item", "sm2_update",
]
