from .core import MinMaxHeap, minmaxheapproperty
from .bounded import BoundedMinMaxHeap

__all__ = ['MinMaxHeap', 'BoundedMinMaxHeap', 'minmaxheapproperty']
