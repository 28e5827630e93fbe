"""Randomized differential checks of the min-max heap against a sorted
list reference. Used by ``stress.py`` and the test suite.
"""
import collections
import logging

import numpy as np
from sortedcontainers import SortedList

from minmaxheap.bounded import BoundedMinMaxHeap
from minmaxheap.core import MinMaxHeap, minmaxheapproperty


OPERATIONS = ['insert', 'popmin', 'popmax', 'replacemin', 'replacemax']
"""Mutating heap operations exercised by ``random_trial``. """


OPERATION_PROBS = [0.1, 0.3, 0.3, 0.15, 0.15]
"""Insertions are rare so that every trial drains the heap. """


def check_state(heap, reference, op):
    """Asserts that ``heap`` matches the ``SortedList`` ``reference``."""
    assert minmaxheapproperty(heap.a), "Heap property violated after %s" % op
    assert len(heap) == len(reference), (
        "Count mismatch after %s: %d != %d" % (op, len(heap), len(reference)))
    if reference:
        assert heap.peekmin() == reference[0], (
            "Wrong minimum after %s: %r != %r" % (op, heap.peekmin(), reference[0]))
        assert heap.peekmax() == reference[-1], (
            "Wrong maximum after %s: %r != %r" % (op, heap.peekmax(), reference[-1]))
    else:
        assert heap.peekmin() is None and heap.peekmax() is None, (
            "Empty heap reports an extreme after %s" % op)


def random_trial(size, rng=None, seed=0, max_value=None, capacity=0):
    """Inserts ``size`` random integers, then applies random operations
    until the heap is drained, checking every intermediate state.

    Args:
        size (int): Number of initial insertions
        rng (Generator): numpy random generator, created from ``seed``
                         if not given
        seed (int): Seed for a new generator
        max_value (int): Values are drawn from [0, max_value]. Defaults
                         to ``5 * size``
        capacity (int): If positive, check a ``BoundedMinMaxHeap`` of
                        that capacity instead

    Returns:
        Counter. Number of times each operation was applied
    """
    if rng is None:
        rng = np.random.default_rng(seed=seed)
    if max_value is None:
        max_value = 5 * size
    values = [int(x) for x in rng.integers(0, max_value, size=size, endpoint=True)]
    if capacity > 0:
        return _bounded_trial(values, capacity)

    counts = collections.Counter()
    check_state(MinMaxHeap(values), SortedList(values), 'heapify')
    counts['heapify'] += 1

    heap = MinMaxHeap()
    reference = SortedList()
    for x in values:
        heap.insert(x)
        reference.add(x)
        counts['insert'] += 1
        check_state(heap, reference, 'insert')

    while heap:
        op = str(rng.choice(OPERATIONS, p=OPERATION_PROBS))
        x = int(rng.integers(0, max_value, endpoint=True))
        if op == 'insert':
            heap.insert(x)
            reference.add(x)
        elif op == 'popmin':
            e = heap.popmin()
            assert e == reference.pop(0), "popmin returned %r" % (e,)
        elif op == 'popmax':
            e = heap.popmax()
            assert e == reference.pop(-1), "popmax returned %r" % (e,)
        elif op == 'replacemin':
            e = heap.replacemin(x)
            assert e == reference.pop(0), "replacemin returned %r" % (e,)
            reference.add(x)
        else:
            e = heap.replacemax(x)
            assert e == reference.pop(-1), "replacemax returned %r" % (e,)
            reference.add(x)
        counts[op] += 1
        check_state(heap, reference, op)

    assert heap.popmin() is None and heap.popmax() is None, (
        "Pop on empty heap did not return None")
    assert heap.replacemin(0) is None and heap.replacemax(0) is None, (
        "Replace on empty heap did not return None")
    assert heap.is_empty(), "Operation on empty heap mutated it"
    logging.debug("Trial with %d elements passed: %s" % (size, dict(counts)))
    return counts


def _bounded_trial(values, capacity):
    counts = collections.Counter()
    heap = BoundedMinMaxHeap(capacity)
    reference = SortedList()
    for x in values:
        heap.insert(x)
        reference.add(x)
        counts['insert'] += 1
        kept = reference[-capacity:]
        check_state(heap, kept, 'bounded insert')
        assert sorted(heap.unordered()) == list(kept), (
            "Bounded heap does not hold the %d largest elements" % capacity)
    assert heap.num_pruned == max(0, len(values) - capacity), (
        "Pruned %d elements" % heap.num_pruned)

    kept = list(reference[-capacity:])
    while heap:
        e = heap.popmax()
        assert e == kept.pop(), "popmax returned %r" % (e,)
        counts['popmax'] += 1
    logging.debug("Bounded trial with capacity %d passed: %s"
                  % (capacity, dict(counts)))
    return counts
