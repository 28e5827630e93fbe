import logging
import operator


class MinMaxHeap(object):
    """
    Implementation of a Min-max heap following Atkinson, Sack, Santoro, and
    Strothotte (1986): https://doi.org/10.1145/6617.6621

    Elements live in a single list laid out as a complete binary tree.
    Nodes on even levels (the root included) are no larger than their
    children and grandchildren, nodes on odd levels are no smaller. Empty
    heap operations return ``None`` instead of raising.
    """
    def __init__(self, initial=None):
        self.a = list(initial) if initial is not None else []
        heapify(self.a)

    @property
    def size(self):
        return len(self.a)

    def __len__(self):
        return len(self.a)

    def __bool__(self):
        return bool(self.a)

    def __iter__(self):
        return iter(self.unordered())

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.a)

    def is_empty(self):
        return not self.a

    def unordered(self):
        """
        Copy of the elements in heap order (not sorted).
        """
        return list(self.a)

    def clear(self):
        del self.a[:]

    def insert(self, key):
        """
        Insert key into heap. Complexity: O(log(n))
        """
        insert(self.a, key)

    def insertall(self, keys):
        """
        Insert all keys into heap. An empty heap is rebuilt with heapify in
        O(n), otherwise keys are inserted one by one in iteration order.
        """
        if not self.a:
            self.a = list(keys)
            heapify(self.a)
            return
        for key in keys:
            insert(self.a, key)

    def peekmin(self):
        """
        Get minimum element. Complexity: O(1)
        """
        return peekmin(self.a)

    def peekmax(self):
        """
        Get maximum element. Complexity: O(1)
        """
        return peekmax(self.a)

    def popmin(self):
        """
        Remove and return minimum element. Complexity: O(log(n))
        """
        return removemin(self.a)

    def popmax(self):
        """
        Remove and return maximum element. Complexity: O(log(n))
        """
        return removemax(self.a)

    def replacemin(self, val):
        """
        Replace the minimum element by val and return the old minimum.
        Complexity: O(log(n))
        """
        return replacemin(self.a, val)

    def replacemax(self, val):
        """
        Replace the maximum element by val and return the old maximum.
        Complexity: O(log(n))
        """
        return replacemax(self.a, val)


def level(i):
    return (i+1).bit_length() - 1


def is_min_level(i):
    return level(i) % 2 == 0


def parent(i):
    if i > 0:
        return (i-1) // 2
    return None


def grandparent(i):
    if i > 2:
        return (i-3) // 4
    return None


def extreme_descendant(array, i, better):
    """Index of the most extreme child or grandchild of ``i`` under
    ``better``, or ``None`` for a leaf. Ties keep the earlier index.
    """
    size = len(array)
    m = i*2 + 1
    if m >= size:
        return None
    if i*2 + 2 < size and better(array[i*2+2], array[m]):
        m = i*2 + 2
    for j in range(i*4+3, min(i*4+7, size)):
        if better(array[j], array[m]):
            m = j
    return m


def trickledown(array, i):
    if is_min_level(i):
        _trickledown(array, i, operator.lt)
    else:
        _trickledown(array, i, operator.gt)


def _trickledown(array, i, better):
    while True:
        m = extreme_descendant(array, i, better)
        if m is None or not better(array[m], array[i]):
            return
        array[i], array[m] = array[m], array[i]
        if not i*4 + 3 <= m <= i*4 + 6:
            return
        # m is a grandchild: the element may now violate its new parent
        p = (m-1) // 2
        if better(array[p], array[m]):
            array[m], array[p] = array[p], array[m]
        i = m


def bubbleup(array, i):
    p = parent(i)
    if p is None:
        return
    if is_min_level(i):
        if array[i] > array[p]:
            array[i], array[p] = array[p], array[i]
            _bubbleup(array, p, operator.gt)
        else:
            _bubbleup(array, i, operator.lt)
    else:  # max level
        if array[i] < array[p]:
            array[i], array[p] = array[p], array[i]
            _bubbleup(array, p, operator.lt)
        else:
            _bubbleup(array, i, operator.gt)


def _bubbleup(array, i, better):
    g = grandparent(i)
    while g is not None and better(array[i], array[g]):
        array[i], array[g] = array[g], array[i]
        i = g
        g = grandparent(i)


def heapify(array):
    for i in reversed(range(len(array))):
        trickledown(array, i)
    logging.debug("Heapified %d elements" % len(array))


def insert(array, key):
    array.append(key)
    bubbleup(array, len(array) - 1)


def peekmin(array):
    if not array:
        return None
    return array[0]


def peekmax(array):
    if len(array) <= 2:
        return array[-1] if array else None
    return max(array[1], array[2])


def _maxindex(array):
    # left wins ties
    return 1 if array[1] >= array[2] else 2


def removemin(array):
    if not array:
        return None
    elem = array.pop()
    if array:
        array[0], elem = elem, array[0]
        trickledown(array, 0)
    return elem


def removemax(array):
    if not array:
        return None
    elem = array.pop()
    if len(array) == 2:
        if array[1] > elem:
            array[1], elem = elem, array[1]
    elif len(array) > 2:
        i = _maxindex(array)
        array[i], elem = elem, array[i]
        trickledown(array, i)
    return elem


def replacemin(array, val):
    if not array:
        return None
    elem = array[0]
    array[0] = val
    trickledown(array, 0)
    return elem


def replacemax(array, val):
    if not array:
        return None
    if len(array) == 1:
        elem = array[0]
        array[0] = val
    elif len(array) == 2:
        elem = array[1]
        array[1] = val
        bubbleup(array, 1)
    else:
        i = _maxindex(array)
        elem = array[i]
        array[i] = val
        bubbleup(array, i)
        trickledown(array, i)
    return elem


def minmaxheapproperty(array):
    size = len(array)
    for i, k in enumerate(array):
        if is_min_level(i):
            violates = operator.lt  # children and grand children must be larger
        else:
            violates = operator.gt
        descendants = list(range(2 * i + 1, min(2 * i + 3, size)))
        descendants.extend(range(4 * i + 3, min(4 * i + 7, size)))
        for j in descendants:
            if violates(array[j], k):
                logging.debug("Heap property violated at index %d (level %d) "
                              "by descendant %d: %r vs %r"
                              % (i, level(i), j, k, array[j]))
                return False
    return True
