"""Result monad for operations that touch the outside world.

Persistence calls can fail for reasons outside the session's control
(missing config directory, permissions, corrupt files). They return a
Result instead of raising so the interactive loop can log the problem
and carry on.

Example usage:
    >>> def read_counter(raw: dict) -> Result[int, str]:
    ...     if "next_task_id" not in raw:
    ...         return Err("next_task_id missing")
    ...     return Ok(raw["next_task_id"])
    ...
    >>> result = read_counter({"next_task_id": 7})
    >>> if isinstance(result, Ok):
    ...     print(f"Next id: {result.value}")
    Next id: 7
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007

