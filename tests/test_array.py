import pytest

from sclib.array import Array


def test_example_str_delete_first():
    arr = Array()
    arr.add("item0")
    arr.add("item1")
    arr.add("item2")
    arr.delete(0)
    assert list(arr) == ["item1", "item2"]


def test_example_int():
    arr = Array()
    for value in (0, 1, 2):
        arr.add(value)
    assert [arr[i] for i in range(len(arr))] == [0, 1, 2]


def test_add_and_index():
    arr = Array()
    assert len(arr) == 0
    arr.add(1)
    arr.add(2)
    arr.add(3)
    assert arr[0] == 1
    assert arr[1] == 2
    assert arr[2] == 3


def test_delete_sort_and_last():
    arr = Array()
    arr.add(3)
    arr.add(4)
    arr.add(5)
    assert len(arr) == 3

    arr.delete(0)
    assert arr[0] == 4
    arr.delete_last()
    assert arr[0] == 4

    for value in (1, 3, 2, 0):
        arr.add(value)
    assert arr.last() == 0

    arr.sort()
    assert sum(arr) == 10
    assert list(arr) == [0, 1, 2, 3, 4]


def test_iteration_on_empty_array():
    arr = Array()
    assert list(arr) == []


def test_single_item_delete_last_and_unordered():
    arr = Array()
    arr.add(1)
    assert list(arr) == [1]
    arr.delete_last()
    assert list(arr) == []

    arr.add(1)
    arr.delete_unordered(0)
    assert list(arr) == []


def test_at_after_deletes():
    arr = Array()
    arr.add(100)
    arr.add(200)
    arr.add(300)
    assert arr[0] == 100
    arr.delete_last()
    assert arr[0] == 100
    arr.delete(0)
    assert arr[0] == 200


def test_bounds():
    arr = Array()
    arr.add(3)
    arr.add(4)
    assert sum(arr) == 7

    empty = Array()
    assert sum(empty) + sum(empty) == 0

    arr = Array()
    for value in (0, 1, 2, 4, 3):
        arr.add(value)
    arr.delete(3)
    assert list(arr) == list(range(len(arr)))

    arr.add(3)
    arr.add(4)
    arr.delete(3)
    assert list(arr) == list(range(len(arr)))


def test_delete_unordered_moves_last():
    arr = Array(["a", "b", "c", "d", "e", "f"])
    arr.delete_unordered(2)
    assert list(arr) == ["a", "b", "f", "d", "e"]


def test_sorted_unordered_delete_and_clear_keeps_capacity():
    arr = Array()
    for value in (4, 1, 3, 2, 0):
        arr.add(value)
    arr.sort()
    arr.delete_unordered(0)
    assert arr[0] == 4
    assert len(arr) == 4

    cap = arr.capacity
    arr.clear()
    assert arr.capacity == cap
    assert len(arr) == 0
    arr.add(10)
    assert len(arr) == 1
    assert arr[0] == 10

    arr.clear()
    assert len(arr) == 0
    assert arr.capacity == cap

    for i in range(100):
        arr.add(i * 514)
    assert [arr[i] for i in range(100)] == [i * 514 for i in range(100)]

    cap = arr.capacity
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity == cap


def test_capacity_starts_at_eight_and_doubles():
    arr = Array()
    assert arr.capacity == 0
    arr.add(0)
    assert arr.capacity == 8
    for i in range(8):
        arr.add(i)
    assert arr.capacity == 16


def test_limit_stops_growth_and_recovers_after_delete():
    arr = Array(limit=64)
    failures = 0
    for i in range(69):
        try:
            arr.add(i)
        except OverflowError:
            failures += 1
    assert failures == 5
    assert len(arr) == 64

    with pytest.raises(OverflowError):
        arr.add(1)

    arr.delete(0)
    arr.add(400)
    assert arr.last() == 400
    assert len(arr) == 64


def test_sort_with_key():
    arr = Array(["bb", "a", "ccc"])
    arr.sort(key=len)
    assert list(arr) == ["a", "bb", "ccc"]


@pytest.mark.parametrize("index", [0, 5, -4])
def test_delete_out_of_range_raises(index):
    arr = Array([1, 2, 3]) if index != 0 else Array()
    with pytest.raises(IndexError):
        arr.delete(index)


def test_empty_operations_raise():
    arr = Array()
    with pytest.raises(IndexError):
        arr.delete_last()
    with pytest.raises(IndexError):
        arr.last()
    with pytest.raises(IndexError):
        arr.delete_unordered(0)


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        Array(limit=-1)