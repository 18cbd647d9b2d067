"""Exceptions raised by the heap and search modules."""

from __future__ import annotations


class HeapEmptyError(IndexError):
    """Raised when the minimum of an empty heap is requested."""

    def __init__(self, operation: str = "min") -> None:
        super().__init__(f"{operation} called on an empty heap")
        self.operation = operation


class InvalidDecreaseError(ValueError):
    """Raised when ``decrease_element`` would increase an element."""

    def __init__(self, position: int, old: object, new: object) -> None:
        super().__init__(
            f"cannot decrease element at position {position}: {new!r} is greater than {old!r}"
        )
        self.position = position
        self.old = old
        self.new = new


__all__ = ["HeapEmptyError", "InvalidDecreaseError"]
