"""Result types for railway-oriented programming.

Registry lookups report a missing code as data instead of raising, so the
caller (request binding, catalog endpoint, test) decides whether absence is
fatal.

Usage:
    from src.core.result import Failure, Success

    match resolve(course_types, 103):
        case Success(value=variant):
            print(variant.label)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error value describing why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
