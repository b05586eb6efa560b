"""
Type definitions for the collection algorithms.

This module contains the custom types shared by the algorithms,
organized by their primary use cases.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, NamedTuple


# Absent marker
class Absent(Enum):
    """Marker for a missing value, distinct from every real element (None included)."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT

type Maybe[T] = T | Literal[Absent.ABSENT]

# Collections of collections
type Partition[T] = tuple[frozenset[T], ...]


class Triplet[T](NamedTuple):
    """Context window (previous, current, next) over one element occurrence."""

    previous: Maybe[T]
    current: T
    next: Maybe[T]

    @property
    def has_previous(self) -> bool:
        return self.previous is not ABSENT

    @property
    def has_next(self) -> bool:
        return self.next is not ABSENT

    @property
    def is_inner(self) -> bool:
        """True when both neighbors are present."""
        return self.has_previous and self.has_next


type NeighborGroup[T] = tuple[Triplet[T], ...]


class Segmentation[T](NamedTuple):
    """
    Disjoint segments together with the way each input set is rebuilt from them.

    covers[i] holds the indices (into segments) whose union is the
    i-th relevant input set.
    """

    segments: Partition[T]
    covers: tuple[tuple[int, ...], ...]


# Errors
class ArgumentError(TypeError):
    """A required argument was None (or otherwise unusable)."""


def ensure_not_none(value: Any, name: str) -> None:
    if value is None:
        raise ArgumentError(f"{name} must not be None")


def ensure_callable(value: Any, name: str) -> None:
    ensure_not_none(value, name)
    if not callable(value):
        raise ArgumentError(f"{name} must be callable, got {type(value).__name__}")


__all__ = [
    # Absent marker
    "Absent",
    "ABSENT",
    "Maybe",
    # Collections
    "Partition",
    "Triplet",
    "NeighborGroup",
    "Segmentation",
    # Errors
    "ArgumentError",
    "ensure_not_none",
    "ensure_callable",
]
