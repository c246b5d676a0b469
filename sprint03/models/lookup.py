"""Explicit result type for lookups by id."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A lookup that located its record."""
    value: T


@dataclass(frozen=True)
class NotFound:
    """A lookup whose id has no matching record."""
    id: int


Lookup = Union[Found[T], NotFound]
