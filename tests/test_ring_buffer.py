import copy

import pytest

from arcext.ring_buffer import RingBuffer


def filled(capacity, items):
    buffer = RingBuffer(capacity)
    for item in items:
        buffer.push_back(item)
    return buffer


def test_new_buffer_is_empty():
    buffer = RingBuffer(4)
    assert len(buffer) == 0
    assert list(buffer) == []
    assert buffer.capacity == 4


def test_push_within_capacity_keeps_order():
    items = [10, 20, 30]
    buffer = filled(5, items)
    assert list(buffer) == items
    assert len(buffer) == len(items)


def test_push_over_capacity_drops_oldest():
    items = list(range(1, 8))
    buffer = filled(3, items)
    assert list(buffer) == items[-3:]
    assert len(buffer) == 3


def test_size_never_exceeds_capacity():
    buffer = RingBuffer(4)
    for i in range(20):
        buffer.push_back(i)
        assert len(buffer) == min(i + 1, 4)
        assert buffer.back() == i


def test_back_returns_newest():
    buffer = filled(2, ["a", "b", "c"])
    assert buffer.back() == "c"


def test_back_on_empty_raises():
    with pytest.raises(IndexError):
        RingBuffer(3).back()


def test_clear_empties_and_keeps_capacity():
    buffer = filled(3, [1, 2, 3, 4])
    buffer.clear()
    assert len(buffer) == 0
    assert buffer.capacity == 3
    buffer.push_back(9)
    assert list(buffer) == [9]


def test_indexing_follows_iteration_order():
    items = list(range(10))
    buffer = filled(4, items)
    assert [buffer[i] for i in range(len(buffer))] == list(buffer)
    assert buffer[0] == items[-4]
    assert buffer[-1] == items[-1]


def test_index_out_of_range_raises():
    buffer = filled(3, [1, 2])
    with pytest.raises(IndexError):
        buffer[2]
    with pytest.raises(IndexError):
        buffer[-3]
    assert buffer[1] == 2
    assert buffer[-2] == 1
    assert len(buffer) == 2


def test_setitem_replaces_element():
    buffer = filled(3, [1, 2, 3, 4])
    buffer[0] = "x"
    assert buffer[0] == "x"
    assert list(buffer)[1:] == [3, 4]


def test_setitem_out_of_range_raises():
    buffer = filled(3, [1])
    with pytest.raises(IndexError):
        buffer[1] = 5
    assert list(buffer) == [1]
    assert len(buffer) == 1


def test_reversed_is_newest_first():
    items = list(range(7))
    buffer = filled(5, items)
    assert list(reversed(buffer)) == list(buffer)[::-1]


def test_resize_larger_keeps_all_and_allows_growth():
    buffer = filled(3, [1, 2, 3, 4])
    buffer.resize(5)
    assert list(buffer) == [2, 3, 4]
    assert buffer.capacity == 5
    buffer.push_back(5)
    buffer.push_back(6)
    assert list(buffer) == [2, 3, 4, 5, 6]


def test_resize_smaller_keeps_newest():
    items = list(range(6))
    buffer = filled(6, items)
    buffer.resize(2)
    assert list(buffer) == items[-2:]
    assert buffer.capacity == 2


def test_copy_has_same_items_and_capacity_of_its_size():
    buffer = filled(10, [1, 2, 3])
    duplicate = buffer.copy()
    assert list(duplicate) == list(buffer)
    assert duplicate.capacity == len(buffer)


def test_copy_is_independent():
    buffer = filled(4, [1, 2, 3])
    duplicate = copy.copy(buffer)
    duplicate.push_back(4)
    buffer[0] = 100
    assert list(buffer) == [100, 2, 3]
    assert list(duplicate) == [2, 3, 4]


def test_copy_of_wrapped_buffer_preserves_order():
    items = list(range(9))
    buffer = filled(4, items)
    assert list(buffer.copy()) == items[-4:]


def test_zero_capacity_rejects_push():
    buffer = RingBuffer(0)
    with pytest.raises(ValueError):
        buffer.push_back(1)
    assert len(buffer) == 0


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        RingBuffer(-1)
    with pytest.raises(ValueError):
        RingBuffer(2).resize(-3)