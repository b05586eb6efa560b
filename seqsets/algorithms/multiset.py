"""
Multiset containment over sequences.

Elements are compared by occurrence counts, so duplicates matter:
[1] is contained in [1, 1] but [1, 1] is not contained in [1].
Empty or None inputs are never contained in anything.
"""

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def _counts(sequence: Iterable[T] | None) -> Counter[T] | None:
    """Count occurrences, consuming the sequence once. None when nothing was counted."""
    if sequence is None:
        return None
    counts = Counter(sequence)
    return counts if counts else None


def _counts_contained(current: Counter[T], other: Counter[T]) -> bool:
    return current <= other


def is_subset_of(current: Iterable[T] | None, other: Iterable[T] | None) -> bool:
    """
    Check whether current is a multiset subset of other.

    Args:
        current: Sequence tested for containment.
        other: Sequence tested against.

    Returns:
        True iff both are non-empty and every value occurs in current
        no more often than in other.
    """
    current_counts = _counts(current)
    other_counts = _counts(other)
    if current_counts is None or other_counts is None:
        return False
    return _counts_contained(current_counts, other_counts)


def is_subset_of_or_either(
    current: Iterable[T] | None, other: Iterable[T] | None
) -> bool:
    """Check multiset containment in either direction."""
    current_counts = _counts(current)
    other_counts = _counts(other)
    if current_counts is None or other_counts is None:
        return False
    return _counts_contained(current_counts, other_counts) or _counts_contained(
        other_counts, current_counts
    )
