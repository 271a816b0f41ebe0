"""Result types for railway-oriented programming.

Write operations of the security configuration return a Result instead of
raising, so callers branch on the outcome explicitly.

Usage:
    result = await configuration.update_role(role)
    match result:
        case Success():
            ...
        case Failure(error=NotFoundError()):
            ...
        case Failure(error=ConcurrentModificationError() as err):
            print(err.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
