"""Indexable binary min-heap."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ...config import CONFIG
from ..errors import HeapEmptyError, InvalidDecreaseError
from .priority_queue import PriorityQueue

T = TypeVar("T")

KeyFunc = Callable[[Any], Any]
MoveCallback = Callable[[Any, int], None]


class BinaryHeap(PriorityQueue[T]):
    """Minimum heap stored as a complete binary tree in a list.

    Every child compares greater than or equal to its parent. Ordering is the
    natural ``<`` order of the elements unless ``key`` is given, in which case
    ``key(element)`` values are compared instead.

    ``on_move(element, index)`` is called whenever an element comes to rest
    at a new index. Callers that need to find an element again later (for
    :meth:`decrease_element`) keep their own index map up to date with it.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        key: Optional[KeyFunc] = None,
        on_move: Optional[MoveCallback] = None,
        check_invariants: Optional[bool] = None,
    ) -> None:
        if capacity is None:
            capacity = CONFIG.heap.default_capacity
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._elems: List[Any] = [None] * capacity
        self._last = -1
        self._key = key
        self._on_move = on_move
        if check_invariants is None:
            check_invariants = CONFIG.heap.check_invariants
        self._check = check_invariants

    @classmethod
    def from_items(
        cls,
        items: Iterable[T],
        key: Optional[KeyFunc] = None,
        on_move: Optional[MoveCallback] = None,
        check_invariants: Optional[bool] = None,
    ) -> "BinaryHeap[T]":
        """Build a heap from ``items`` in O(n)."""

        heap: BinaryHeap[T] = cls(0, key=key, on_move=on_move, check_invariants=check_invariants)
        heap._elems = list(items)
        heap._last = len(heap._elems) - 1
        heap._build_heap()
        return heap

    @classmethod
    def sort(cls, items: Iterable[T], key: Optional[KeyFunc] = None) -> Iterator[T]:
        """Yield ``items`` in ascending order (heap-sort)."""

        heap = cls.from_items(items, key=key)
        while heap.count > 0:
            yield heap.extract_min()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def count(self) -> int:
        return self._last + 1

    @property
    def capacity(self) -> int:
        """Number of allocated slots in the backing list."""
        return len(self._elems)

    def contains(self, value: T) -> Tuple[bool, int]:
        """Return ``(True, index)`` of the first element equal to ``value``.

        Runs in O(n). Returns ``(False, -1)`` when ``value`` is absent.
        """

        for pos in range(self._last + 1):
            if self._elems[pos] == value:
                return True, pos
        return False, -1

    @property
    def min(self) -> T:
        if self._last < 0:
            raise HeapEmptyError("min")
        return self._elems[0]

    def extract_min(self) -> T:
        """Remove and return the minimum element in O(log n).

        The last element takes the root's place and is sifted down.
        """

        if self._last < 0:
            raise HeapEmptyError("extract_min")

        smallest = self._elems[0]
        self._swap(0, self._last)
        self._elems[self._last] = None
        self._last -= 1

        if self._last > 0:
            self._heapify(0)
            self._test_invariant()

        return smallest

    def try_extract_min(self) -> Tuple[bool, Optional[T]]:
        if self._last < 0:
            return False, None
        return True, self.extract_min()

    def decrease_element(self, position: int, value: T) -> int:
        """Replace the element at ``position`` with the smaller ``value``.

        Returns the index where ``value`` ends up after sifting up.
        """

        if not 0 <= position <= self._last:
            raise IndexError(f"heap position {position} out of range (count={self.count})")
        old = self._elems[position]
        if self._less(old, value):
            raise InvalidDecreaseError(position, old, value)
        return self._decrease(position, value)

    def insert(self, value: T) -> int:
        """Append ``value`` and sift it up. Returns its final index."""

        self._ensure_capacity(self._last + 1)
        self._last += 1
        return self._decrease(self._last, value)

    def clear(self) -> None:
        """Forget all elements in O(1) without shrinking the backing list.

        The dropped elements stay referenced by their slots until later
        inserts overwrite them; build a new heap to release them at once.
        """
        self._last = -1

    def is_valid(self) -> bool:
        """Return ``True`` if every child compares >= its parent."""

        for idx in range(1, self._last + 1):
            if self._less(self._elems[idx], self._elems[self._parent(idx)]):
                return False
        return True

    def __getitem__(self, position: int) -> T:
        """Return the element stored at heap index ``position``."""
        if not 0 <= position <= self._last:
            raise IndexError(f"heap position {position} out of range (count={self.count})")
        return self._elems[position]

    def __iter__(self) -> Iterator[T]:
        """Iterate elements in heap (array) order, not sorted order."""
        return iter(self._elems[: self._last + 1])

    def __repr__(self) -> str:
        return f"BinaryHeap({self._elems[: self._last + 1]!r})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _parent(idx: int) -> int:
        return (idx + 1) // 2 - 1

    @staticmethod
    def _left(idx: int) -> int:
        return idx * 2 + 1

    @staticmethod
    def _right(idx: int) -> int:
        return idx * 2 + 2

    def _less(self, a: Any, b: Any) -> bool:
        if self._key is None:
            return a < b
        return self._key(a) < self._key(b)

    def _place(self, idx: int, value: Any) -> None:
        self._elems[idx] = value
        if self._on_move is not None:
            self._on_move(value, idx)

    def _swap(self, i: int, j: int) -> None:
        a, b = self._elems[i], self._elems[j]
        self._place(i, b)
        if i != j:
            self._place(j, a)

    def _decrease(self, pos: int, value: Any) -> int:
        self._place(pos, value)

        while pos > 0:
            parent = self._parent(pos)
            if not self._less(self._elems[pos], self._elems[parent]):
                break
            self._swap(parent, pos)
            pos = parent

        self._test_invariant()
        return pos

    def _heapify(self, i: int) -> None:
        """Sift the element at ``i`` down until the heap property holds."""

        while True:
            smallest = i
            left = self._left(i)
            if left <= self._last and self._less(self._elems[left], self._elems[smallest]):
                smallest = left
            right = self._right(i)
            if right <= self._last and self._less(self._elems[right], self._elems[smallest]):
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _build_heap(self) -> None:
        # bottom-up: every node after _last // 2 is a leaf
        for i in range(self._last // 2, -1, -1):
            self._heapify(i)
        if self._on_move is not None:
            for idx in range(self._last + 1):
                self._on_move(self._elems[idx], idx)
        self._test_invariant()

    def _ensure_capacity(self, index: int) -> None:
        if index >= len(self._elems):
            new_capacity = max(index + 1, len(self._elems) * 2)
            self._elems.extend([None] * (new_capacity - len(self._elems)))

    def _test_invariant(self) -> None:
        if self._check:
            assert self.is_valid(), f"heap property violated: {self!r}"


__all__ = ["BinaryHeap"]
