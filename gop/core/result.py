"""Result type for explicit error handling.

Every component in gop returns a ``Result`` instead of exiting the process.
The CLI is the only place that turns an ``Err`` into an exit status.

Usage:
    match read_project_info(Path("go.mod")):
        case Ok(info):
            print(info.project_name)
        case Err(error):
            print(f"failed: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
