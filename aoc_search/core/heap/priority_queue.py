from __future__ import annotations

"""Abstract minimum priority queue interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(ABC, Generic[T]):
    """Minimum queue where the first element is the one with the lowest priority.

    Positions returned by :meth:`insert` and :meth:`decrease_element` are only
    valid until the next mutating call.
    """

    @property
    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def contains(self, value: T) -> Tuple[bool, int]:
        raise NotImplementedError

    @property
    @abstractmethod
    def min(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def extract_min(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def try_extract_min(self) -> Tuple[bool, Optional[T]]:
        raise NotImplementedError

    @abstractmethod
    def decrease_element(self, position: int, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def insert(self, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    def __len__(self) -> int:
        return self.count


__all__ = ["PriorityQueue"]
