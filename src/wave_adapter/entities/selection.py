"""Result variant for outcomes that need the caller to choose."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SelectionRequired(Generic[T]):
    """Automatic resolution was not confident enough.

    Returned (never raised) by resolvers and services. The caller is expected
    to resubmit with an explicit id picked from ``options``.

    Attributes:
        message: Prompt shown to the caller (e.g. "Select anchor account")
        options: Ordered candidates, best first where a ranking exists
    """

    message: str
    options: tuple[T, ...] = ()
