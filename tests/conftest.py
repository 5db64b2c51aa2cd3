import pytest

from supermemo2.models import new_item, restore_item


@pytest.fixture
def item():
    """A never-reviewed item."""
    return new_item()


@pytest.fixture
def mature_item():
    """An item restored from stored state with several successful reviews."""
    return restore_item(5, 2.5)
