import pytest

from gostudy.heap import (
    Heap,
    build_heap,
    build_heap_array,
    find_kth_largest,
    heapify,
)

NODES = [15, 4, 23, 8, 42, 16, 1, 9, 30]


def _is_min_heap(data, size):
    return all(data[i // 2] <= data[i] for i in range(2, size + 1))


def test_build_heap_orders_all_values():
    heap = build_heap(NODES, len(NODES))
    assert heap.size == len(NODES)
    assert _is_min_heap(heap.data, heap.size)
    assert sorted(heap.values) == sorted(NODES)
    assert heap.data[1] == min(NODES)


def test_build_heap_array_keeps_placeholder():
    m = build_heap_array([2, 1], 2)
    assert m[0] == 0
    assert m[1:] == sorted([2, 1])


def test_heapify_sifts_root_down():
    nums = [0, 50, 2, 3, 4, 5]
    heapify(nums, 1, 5)
    assert _is_min_heap(nums, 5)
    assert sorted(nums[1:]) == [2, 3, 4, 5, 50]


def test_insert_keeps_heap_property():
    heap = Heap()
    for value in NODES:
        heap.insert(value)
        assert _is_min_heap(heap.data, heap.size)
    assert sorted(heap.values) == sorted(NODES)


def test_delete_returns_values_in_ascending_order():
    heap = build_heap(NODES, len(NODES))
    removed = [heap.delete() for _ in NODES]
    assert removed == sorted(NODES)
    assert heap.size == 0


def test_delete_on_empty_heap_raises():
    with pytest.raises(IndexError):
        Heap().delete()


@pytest.mark.parametrize("n", [1, 3, 5])
def test_top_n_returns_largest(n):
    heap = build_heap(list(NODES), n)
    assert sorted(heap.top_n(n)) == sorted(NODES)[-n:]


def test_top_n_larger_than_heap_returns_everything():
    heap = build_heap(NODES, len(NODES))
    assert sorted(heap.top_n(len(NODES) + 5)) == sorted(NODES)


@pytest.mark.parametrize("k", [1, 2, 4, 9])
def test_find_kth_largest(k):
    m = build_heap_array(NODES, k)
    result = find_kth_largest(m, k)
    assert result is m
    assert result[1] == sorted(NODES)[-k]
    assert sorted(result[1 : k + 1]) == sorted(NODES)[-k:]