"""Result type for explicit error handling.

Every step of a release (reading tags, pushing, calling gh) can fail. Instead
of raising, those steps return ``Ok(value)`` or ``Err(error)`` and the caller
decides whether the failure aborts the run or only degrades it.

Usage:
    def parse_count(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Err(f"not a number: {text}")
        return Ok(int(text))

    match parse_count("5"):
        case Ok(value):
            print(value)
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
