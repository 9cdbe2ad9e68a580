import pytest

from menu import ItemList


def test_initial_selection():
    assert ItemList("abc").current_item() == "a"
    assert ItemList("abc", 1).current_item() == "b"


def test_navigation_clamps_at_both_ends():
    items = ItemList("abc")
    items.move_back()
    assert items.current_item() == "a"
    for _ in range(5):
        items.move_forward()
    assert items.current_item() == "c"


def test_invalid_construction():
    with pytest.raises(ValueError):
        ItemList([])
    with pytest.raises(ValueError):
        ItemList("ab", 2)
