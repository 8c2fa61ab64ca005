"""LinkedList interface and related errors."""

from .digits import decimal_text
from .errors import (
    AbsentContainerError,
    AllocationError,
    EmptyListError,
    IndexOutOfRangeError,
    InvalidElementError,
    InvalidIndexError,
    LinkedListError,
    ValueNotFoundError,
)
from .linked_list import InsertPolicy, LinkedList, as_element

__all__ = [
    "LinkedList",
    "InsertPolicy",
    "as_element",
    "decimal_text",
    "LinkedListError",
    "AllocationError",
    "EmptyListError",
    "IndexOutOfRangeError",
    "ValueNotFoundError",
    "AbsentContainerError",
    "InvalidElementError",
    "InvalidIndexError",
]
