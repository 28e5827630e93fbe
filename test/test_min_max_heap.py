import numpy as np
import pytest

from minmaxheap import MinMaxHeap, minmaxheapproperty
from minmaxheap import core


def random_values(n, seed=0):
    rng = np.random.default_rng(seed=seed)
    return [int(x) for x in rng.integers(0, 5 * n + 1, size=n)]


def drain(heap, pop):
    out = []
    while heap:
        out.append(pop())
    return out


def test_level_parity():
    assert [core.level(i) for i in range(8)] == [0, 1, 1, 2, 2, 2, 2, 3]
    assert core.is_min_level(0)
    assert not core.is_min_level(2)
    assert core.is_min_level(6)
    assert not core.is_min_level(7)


def test_parent_and_grandparent():
    assert core.parent(0) is None
    assert core.parent(1) == 0 and core.parent(2) == 0
    assert core.parent(6) == 2
    assert core.grandparent(2) is None
    assert core.grandparent(3) == 0 and core.grandparent(6) == 0
    assert core.grandparent(7) == 1


def test_insertall_example():
    heap = MinMaxHeap()
    heap.insertall([5, 1, 4, 2, 8])
    assert heap.popmin() == 1
    assert heap.popmax() == 8
    assert heap.peekmin() == 2
    assert drain(heap, heap.popmin) == [2, 4, 5]


def test_single_element_example():
    heap = MinMaxHeap([3])
    assert heap.peekmax() == 3
    assert heap.popmax() == 3
    assert heap.is_empty()
    assert heap.popmin() is None


def test_replacemin_example():
    heap = MinMaxHeap([5, 1, 4, 2, 8])
    assert heap.replacemin(0) == 1
    assert heap.peekmin() == 0
    assert len(heap) == 5
    assert minmaxheapproperty(heap.a)


def test_empty_heap_reports_absent():
    heap = MinMaxHeap()
    assert heap.is_empty() and not heap
    assert heap.peekmin() is None
    assert heap.peekmax() is None
    assert heap.popmin() is None
    assert heap.popmax() is None
    assert heap.replacemin(1) is None
    assert heap.replacemax(1) is None
    assert heap.unordered() == []
    assert len(heap) == 0


def test_from_empty_sequence():
    heap = MinMaxHeap([])
    assert heap.is_empty()
    heap.insertall([])
    assert heap.is_empty()


def test_small_maximum_positions():
    heap = MinMaxHeap([2, 7])
    assert heap.peekmin() == 2
    assert heap.peekmax() == 7
    heap = MinMaxHeap([7, 2])
    assert heap.unordered() == [2, 7]
    heap.insert(9)
    assert heap.peekmax() == 9


def test_popmax_prefers_left_on_tie():
    heap = MinMaxHeap([0, 5, 5, 1])
    assert heap.unordered() == [0, 5, 5, 1]
    assert heap.popmax() == 5
    assert heap.unordered() == [0, 1, 5]


def test_replacemax_prefers_left_on_tie():
    heap = MinMaxHeap([0, 5, 5])
    assert heap.replacemax(1) == 5
    assert heap.unordered() == [0, 1, 5]


def test_replacemax_small_heaps():
    heap = MinMaxHeap([4])
    assert heap.replacemax(9) == 4
    assert heap.unordered() == [9]

    heap = MinMaxHeap([4, 6])
    assert heap.replacemax(1) == 6
    assert heap.unordered() == [1, 4]


def test_replacemax_below_minimum():
    heap = MinMaxHeap(range(10))
    assert heap.replacemax(-1) == 9
    assert heap.peekmin() == -1
    assert heap.peekmax() == 8
    assert minmaxheapproperty(heap.a)


def test_replacemin_above_maximum():
    heap = MinMaxHeap(range(10))
    assert heap.replacemin(20) == 0
    assert heap.peekmin() == 1
    assert heap.peekmax() == 20
    assert minmaxheapproperty(heap.a)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 8, 31, 100])
def test_heapify_then_popmin_sorts(n):
    values = random_values(n, seed=n)
    heap = MinMaxHeap(values)
    assert minmaxheapproperty(heap.a)
    assert drain(heap, heap.popmin) == sorted(values)


@pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 31, 100])
def test_insert_then_popmax_sorts_descending(n):
    values = random_values(n, seed=n + 1)
    heap = MinMaxHeap()
    for x in values:
        heap.insert(x)
        assert minmaxheapproperty(heap.a)
    assert drain(heap, heap.popmax) == sorted(values, reverse=True)


def test_insertall_on_nonempty_heap():
    heap = MinMaxHeap([10, 20])
    heap.insertall(iter([5, 30, 15]))
    assert len(heap) == 5
    assert minmaxheapproperty(heap.a)
    assert heap.peekmin() == 5
    assert heap.peekmax() == 30


def test_random_operations_keep_invariant():
    rng = np.random.default_rng(seed=42)
    heap = MinMaxHeap()
    values = []
    for _ in range(2000):
        op = rng.integers(5)
        x = int(rng.integers(100))
        before = len(heap)
        if op == 0 or not values:
            heap.insert(x)
            values.append(x)
            assert len(heap) == before + 1
        elif op == 1:
            values.remove(heap.popmin())
            assert len(heap) == before - 1
        elif op == 2:
            values.remove(heap.popmax())
            assert len(heap) == before - 1
        elif op == 3:
            e = heap.replacemin(x)
            assert e == min(values)
            values.remove(e)
            values.append(x)
            assert len(heap) == before
        else:
            e = heap.replacemax(x)
            assert e == max(values)
            values.remove(e)
            values.append(x)
            assert len(heap) == before
        assert minmaxheapproperty(heap.a)
        if values:
            assert heap.peekmin() == min(values)
            assert heap.peekmax() == max(values)
        assert sorted(heap.unordered()) == sorted(values)


def test_tuple_elements():
    heap = MinMaxHeap()
    for score, name in [(0.5, 'b'), (-1.0, 'a'), (2.0, 'c'), (0.5, 'a')]:
        heap.insert((score, name))
    assert heap.popmax() == (2.0, 'c')
    assert heap.popmin() == (-1.0, 'a')
    assert heap.popmin() == (0.5, 'a')


def test_unordered_and_iteration_are_copies():
    heap = MinMaxHeap([3, 1, 2])
    snapshot = heap.unordered()
    snapshot.append(0)
    assert len(heap) == 3
    assert sorted(heap) == [1, 2, 3]
    assert len(heap) == 3
    assert heap.size == 3


def test_clear_and_repr():
    heap = MinMaxHeap([2, 1])
    assert repr(heap) == "MinMaxHeap([1, 2])"
    heap.clear()
    assert heap.is_empty()
    assert repr(heap) == "MinMaxHeap([])"


def test_property_checker_rejects_violations():
    assert minmaxheapproperty([])
    assert minmaxheapproperty([1])
    assert not minmaxheapproperty([1, 0])
    # child of a max level node larger than it
    assert not minmaxheapproperty([0, 5, 4, 6])
    # grandchild of the root smaller than it
    assert not minmaxheapproperty([2, 5, 4, 1])
