"""
Disjoint segmentation of overlapping collections.

Given several collections, find the pairwise-disjoint non-empty segments
such that every collection is exactly the union of some of them
(the atoms of the Venn diagram of the collections).

Two ways of computing the same segments:
    segmented(sequences)           - incremental refinement of a partition
    membership_segments(sequences) - grouping elements by membership signature

segment_cover(sequences) additionally tells which segments rebuild each input.

Complexity (s=relevant sets, n=distinct elements, p=segments):
- segmented: O(s × p × n) set operations in the worst case
- membership_segments: O(n × s) to fill the incidence matrix, O(n log n × s) for the unique rows
"""

import logging
from collections.abc import Hashable, Iterable
from itertools import chain
from typing import TypeVar

import numpy as np

from seqsets.display import format_partition
from seqsets.localtypes import Partition, Segmentation, ensure_not_none

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def relevant_sets(sequences: Iterable[Iterable[T] | None]) -> tuple[frozenset[T], ...]:
    """
    Normalize collections into distinct non-empty sets.

    None and empty collections are dropped, duplicates inside a collection
    are collapsed, and identical sets are kept once in first-seen order.
    """
    distinct = (frozenset(sequence) for sequence in sequences if sequence is not None)
    return tuple(dict.fromkeys(s for s in distinct if s))


def _refine(partition: list[set[T]], new_set: frozenset[T]) -> None:
    """
    Refine the partition in place so new_set becomes a union of its cells.

    Every cell overlapping new_set is split into (cell - overlap, overlap),
    the overlap taking the slot right after the cell. Whatever is left of
    new_set once all cells are scanned becomes a new cell.
    """
    remainder = set(new_set)
    index = 0

    while index < len(partition) and remainder:
        cell = partition[index]

        if cell == remainder:
            remainder.clear()
            break

        overlap = cell & remainder
        if not overlap:
            index += 1
            continue

        rest = cell - overlap
        if rest:
            partition[index] = rest
            partition.insert(index + 1, overlap)
            index += 2
        else:
            partition[index] = overlap
            index += 1

        remainder -= overlap
        logger.debug(f"Split {len(cell)} elements into {len(rest)} + {len(overlap)}")

    if remainder:
        partition.append(remainder)


def segmented(sequences: Iterable[Iterable[T] | None]) -> Partition[T]:
    """
    Split collections into pairwise-disjoint segments.

    Args:
        sequences: Collections of hashable elements. None or empty
            collections are ignored.

    Returns:
        Non-empty, pairwise-disjoint segments such that each relevant
        collection's distinct elements are exactly a union of some of them.

    Raises:
        ArgumentError: If sequences is None.

    Example:
        >>> segmented([[1, 2, 3], [2, 3, 4]])
        (frozenset({1}), frozenset({2, 3}), frozenset({4}))
    """
    ensure_not_none(sequences, "sequences")

    relevants = relevant_sets(sequences)
    logger.debug(f"Segmenting {len(relevants)} relevant set(s)")

    partition: list[set[T]] = []
    for relevant in relevants:
        _refine(partition, relevant)

    result = tuple(frozenset(cell) for cell in partition)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Segments: {format_partition(result)}")

    return result


def membership_segments(sequences: Iterable[Iterable[T] | None]) -> Partition[T]:
    """
    Split collections into disjoint segments by membership signature.

    Two elements share a segment iff exactly the same relevant collections
    contain them. The memberships are stored as a boolean incidence matrix
    (elements × collections) whose unique rows are the segments.

    Args:
        sequences: Collections of hashable elements. None or empty
            collections are ignored.

    Returns:
        The same segments as `segmented`, ordered by their earliest element
        in reading order of the input collections.

    Raises:
        ArgumentError: If sequences is None.
    """
    ensure_not_none(sequences, "sequences")

    rows = [tuple(sequence) for sequence in sequences if sequence is not None]
    relevants = relevant_sets(rows)
    if not relevants:
        return ()

    # Reading order of the rows, not set iteration order
    elements = tuple(dict.fromkeys(chain.from_iterable(rows)))
    position = {element: row for row, element in enumerate(elements)}

    incidence = np.zeros((len(elements), len(relevants)), dtype=bool)
    for column, relevant in enumerate(relevants):
        incidence[[position[element] for element in relevant], column] = True

    _, first_rows, labels = np.unique(
        incidence, axis=0, return_index=True, return_inverse=True
    )
    labels = labels.reshape(-1)
    logger.debug(
        f"Incidence matrix {incidence.shape} has {len(first_rows)} distinct signature(s)"
    )

    members: list[list[T]] = [[] for _ in first_rows]
    for row, label in enumerate(labels):
        members[label].append(elements[row])

    # np.unique sorts signatures lexicographically, restore first-seen order
    by_first_seen = np.argsort(first_rows, kind="stable")
    return tuple(frozenset(members[label]) for label in by_first_seen)


def segment_cover(sequences: Iterable[Iterable[T] | None]) -> Segmentation[T]:
    """
    Segment collections and record which segments rebuild each of them.

    Returns:
        Segmentation whose covers[i] lists, in increasing order, the indices
        of the segments whose union is the i-th relevant set (relevant sets
        in first-seen order, duplicates removed).

    Raises:
        ArgumentError: If sequences is None.
    """
    ensure_not_none(sequences, "sequences")

    relevants = relevant_sets(sequences)
    segments = segmented(relevants)

    segment_of: dict[T, int] = {
        element: index for index, segment in enumerate(segments) for element in segment
    }
    covers = tuple(
        tuple(sorted({segment_of[element] for element in relevant}))
        for relevant in relevants
    )
    return Segmentation(segments, covers)
