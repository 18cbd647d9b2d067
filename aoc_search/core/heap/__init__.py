"""heap package."""

from .binary_heap import BinaryHeap
from .priority_queue import PriorityQueue

__all__ = ["BinaryHeap", "PriorityQueue"]
