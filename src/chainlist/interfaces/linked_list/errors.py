"""Errors raised by LinkedList implementations."""

from .digits import decimal_text


class LinkedListError(Exception):
    """Base class for LinkedList errors."""


class AllocationError(LinkedListError):
    """Raised when storage for a new node cannot be obtained.

    The list is left exactly as it was before the failing call.

    Attributes:
        reason (str): Why the allocation failed.
    """

    def __init__(self, reason: str):
        super().__init__(f"Could not allocate a list node: {reason}.")
        self.reason = reason


class EmptyListError(LinkedListError):
    """Raised when an element is removed or read from a list with no elements.

    Attributes:
        operation (str): Name of the operation that was attempted.
    """

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation} on an empty list.")
        self.operation = operation


class IndexOutOfRangeError(LinkedListError):
    """Raised when a 1-based index falls outside the range valid for an operation.

    Attributes:
        operation (str): Name of the operation that was attempted.
        index (int): The offending index.
        lower (int): Smallest valid index.
        upper (int): Largest valid index.
    """

    def __init__(self, operation: str, index: int, lower: int, upper: int):
        super().__init__(
            f"Index {decimal_text(index)} is out of range for {operation}; "
            f"valid range is [{lower}, {upper}]."
        )
        self.operation = operation
        self.index = index
        self.lower = lower
        self.upper = upper


class ValueNotFoundError(LinkedListError):
    """Raised when a value is looked up but no element holds it.

    Attributes:
        value (int): The value that was searched for.
    """

    def __init__(self, value: int):
        super().__init__(f"Value {decimal_text(value)} is not in the list.")
        self.value = value


class AbsentContainerError(LinkedListError):
    """Raised when an operation is invoked on a list that has been destroyed.

    Attributes:
        operation (str): Name of the operation that was attempted.
    """

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: the list has been destroyed.")
        self.operation = operation


class InvalidElementError(LinkedListError):
    """Raised when a value that is not integer-like is offered as an element.

    Attributes:
        value (object): The rejected value.
    """

    def __init__(self, value: object):
        super().__init__(
            f"List elements must be integers, got {type(value).__name__} {value!r}."
        )
        self.value = value


class InvalidIndexError(LinkedListError):
    """Raised when a position is not integer-like.

    Attributes:
        operation (str): Name of the operation that was attempted.
        index (object): The rejected index.
    """

    def __init__(self, operation: str, index: object):
        super().__init__(
            f"Index for {operation} must be an integer, "
            f"got {type(index).__name__} {index!r}."
        )
        self.operation = operation
        self.index = index
