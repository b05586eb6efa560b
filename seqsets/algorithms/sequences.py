"""
Functions for combining and reshaping sequences.
"""

import itertools
from collections.abc import Iterable, Iterator
from typing import TypeVar

from seqsets.localtypes import ABSENT, ensure_not_none

T = TypeVar("T")
U = TypeVar("U")


def cartesian_product(sequences: Iterable[Iterable[T] | None]) -> Iterator[tuple[T, ...]]:
    """
    Create all possible combinations of elements, one from each input sequence
    (Cartesian product), the last sequence varying fastest.

    A None sequence contributes no element, so no combination exists.
    Zero sequences yield a single empty combination.

    Raises:
        ArgumentError: If sequences is None.
    """
    ensure_not_none(sequences, "sequences")
    pools = [() if sequence is None else sequence for sequence in sequences]
    return itertools.product(*pools)


def transponded(
    sequences: Iterable[Iterable[T] | None], fill: U = ABSENT
) -> list[tuple[T | U, ...]]:
    """
    Turn rows into columns.

    Column i holds, for each row, the element at position i or `fill` when
    the row is shorter, None or empty. There are as many columns as
    elements in the longest row.

    Rows are read once up front, so one-shot iterables are fine.

    Raises:
        ArgumentError: If sequences is None.

    Example:
        >>> transponded([["a", "b"], ["c"]], fill=None)
        [('a', 'c'), ('b', None)]
    """
    ensure_not_none(sequences, "sequences")

    rows: list[tuple[T, ...]] = [() if row is None else tuple(row) for row in sequences]
    length = max(map(len, rows), default=0)

    return [
        tuple(row[index] if index < len(row) else fill for row in rows)
        for index in range(length)
    ]

