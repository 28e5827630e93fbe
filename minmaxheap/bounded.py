import logging

from minmaxheap.core import MinMaxHeap


class BoundedMinMaxHeap(MinMaxHeap):
    """Min-max heap holding at most ``capacity`` elements. Once full, a new
    element only gets in by evicting the current minimum, so the heap keeps
    the ``capacity`` largest elements seen. This is the open set of a
    beam-limited best-first search: ``popmax`` yields the next element to
    expand, the minimum is what gets pruned.
    """

    def __init__(self, capacity, initial=None):
        self.capacity = capacity
        self.num_pruned = 0
        if capacity <= 0:
            logging.warning("Heap capacity <= 0 used. No elements will be pruned!")
        super(BoundedMinMaxHeap, self).__init__(initial)
        self._prune()

    def is_bounded(self):
        return self.capacity > 0

    def is_full(self):
        return self.is_bounded() and len(self.a) >= self.capacity

    def insert(self, key):
        """Insert ``key`` if there is room or if it beats the minimum.

        Returns:
            The pruned element: ``None`` if nothing was pruned, the old
            minimum if ``key`` replaced it, ``key`` itself if rejected.
        """
        if not self.is_full():
            super(BoundedMinMaxHeap, self).insert(key)
            return None
        self.num_pruned += 1
        # only push if element can beat lower bound
        if key > self.peekmin():
            return self.replacemin(key)
        return key

    def insertall(self, keys):
        """Insert all keys, then prune minima down to capacity.

        Returns:
            list. Pruned elements in ascending order
        """
        super(BoundedMinMaxHeap, self).insertall(keys)
        return self._prune()

    def _prune(self):
        pruned = []
        if not self.is_bounded():
            return pruned
        while len(self.a) > self.capacity:
            pruned.append(self.popmin())
        if pruned:
            self.num_pruned += len(pruned)
            logging.debug("Pruned %d elements to capacity %d"
                          % (len(pruned), self.capacity))
        return pruned
