"""
Neighbor grouping of element occurrences.

Every occurrence of an element in a sequence is seen through its context
window (previous, current, next). Occurrences whose current elements share
a key are clustered, then each cluster is split into groups of mutually
compatible contexts, keeping apart occurrences that plausibly stand for
different logical positions.

Compatibility between two triplets of a cluster:
- primary side (previous or next): keys agree, or either side is absent
- secondary side: same rule, unless merge_ends ignores it
- no crossing: one's previous key never equals the other's next key

Algorithm per cluster:
    1. Inner triplets (both neighbors present) are considered first
    2. Build previous-based and next-based candidate groups around
       representatives, first compatible representative wins
    3. Greedily emit the candidate holding the most unassigned triplets
    4. Left-over triplets become singleton groups

Complexity (n=triplets in a cluster, r=representatives):
- Candidate construction: O(n × r)
- Greedy assembly: O(n × (candidates × n)) in the worst case
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from seqsets.constants import MERGE_ENDS
from seqsets.display import format_neighbor_groups
from seqsets.localtypes import (
    ABSENT,
    Maybe,
    NeighborGroup,
    Triplet,
    ensure_callable,
    ensure_not_none,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
TKey = TypeVar("TKey", bound=Hashable)


@dataclass(frozen=True, slots=True)
class KeyedTriplet(Generic[T, TKey]):
    """
    A triplet together with its keys and its occurrence number.

    Absent neighbors have ABSENT keys. The occurrence number identifies the
    triplet, so equal triplets coming from different sequences stay distinct.
    """

    occurrence: int
    triplet: Triplet[T]
    previous_key: Maybe[TKey]
    current_key: TKey
    next_key: Maybe[TKey]

    @property
    def is_inner(self) -> bool:
        return self.triplet.is_inner

    def mirrored(self) -> "KeyedTriplet[T, TKey]":
        """Swap previous and next, turning next-based logic into previous-based logic."""
        previous, current, next_ = self.triplet
        return KeyedTriplet(
            occurrence=self.occurrence,
            triplet=Triplet(next_, current, previous),
            previous_key=self.next_key,
            current_key=self.current_key,
            next_key=self.previous_key,
        )


def _keys_agree(a: object, b: object) -> bool:
    """Neighbor keys agree when equal or when either neighbor is absent."""
    return a is ABSENT or b is ABSENT or a == b


def _is_crossing(a: KeyedTriplet, b: KeyedTriplet) -> bool:
    """
    Check whether one triplet's previous key is the other's next key.

    Such triplets belong to different logical chains: (A, B, -) ends a
    sequence after A, while (C, B, A) continues into A.
    """
    if (
        a.previous_key is ABSENT
        and a.next_key is ABSENT
        and b.previous_key is ABSENT
        and b.next_key is ABSENT
    ):
        return False

    if (
        a.previous_key is not ABSENT
        and b.next_key is not ABSENT
        and a.previous_key == b.next_key
    ):
        return True

    return (
        b.previous_key is not ABSENT
        and a.next_key is not ABSENT
        and b.previous_key == a.next_key
    )


def _is_compatible_by_previous(
    representative: KeyedTriplet, candidate: KeyedTriplet, merge_ends: bool
) -> bool:
    if representative.current_key != candidate.current_key:
        return False

    if not _keys_agree(representative.previous_key, candidate.previous_key):
        return False

    if not merge_ends and not _keys_agree(
        representative.next_key, candidate.next_key
    ):
        return False

    return not _is_crossing(representative, candidate)


def _candidates_by_previous(
    cluster: Sequence[KeyedTriplet[T, TKey]], merge_ends: bool
) -> list[list[int]]:
    """
    Partition a cluster around representatives compared on their previous side.

    Each triplet joins the first compatible representative that it does not
    cross any member of, otherwise it becomes a new representative. A
    representative with an absent previous adopts the previous of the first
    member that has one.

    Returns:
        Candidate groups as lists of occurrence numbers.
    """
    representatives: list[KeyedTriplet[T, TKey]] = []
    candidates: list[list[KeyedTriplet[T, TKey]]] = []

    for keyed in cluster:
        for index, representative in enumerate(representatives):
            if _is_compatible_by_previous(
                representative, keyed, merge_ends
            ) and not any(_is_crossing(member, keyed) for member in candidates[index]):
                candidates[index].append(keyed)
                if representative.previous_key is ABSENT and keyed.previous_key is not ABSENT:
                    representatives[index] = replace(
                        representative,
                        triplet=representative.triplet._replace(
                            previous=keyed.triplet.previous
                        ),
                        previous_key=keyed.previous_key,
                    )
                break
        else:
            representatives.append(keyed)
            candidates.append([keyed])

    return [[member.occurrence for member in members] for members in candidates]


def _candidates_by_next(
    cluster: Sequence[KeyedTriplet[T, TKey]], merge_ends: bool
) -> list[list[int]]:
    """Same as _candidates_by_previous with next as the compared side."""
    return _candidates_by_previous(
        [keyed.mirrored() for keyed in cluster], merge_ends
    )


def _assemble_groups(
    cluster: Sequence[KeyedTriplet[T, TKey]], merge_ends: bool
) -> list[NeighborGroup[T]]:
    """
    Greedily pick candidate groups by largest count of unassigned triplets.

    Ties go to previous-based candidates, then to the earliest built one.
    """
    by_occurrence = {keyed.occurrence: keyed.triplet for keyed in cluster}
    candidates = _candidates_by_previous(cluster, merge_ends) + _candidates_by_next(
        cluster, merge_ends
    )
    remaining = set(by_occurrence)
    groups: list[NeighborGroup[T]] = []

    while remaining:
        best: list[int] = []
        best_count = 0
        for candidate in candidates:
            count = sum(1 for occurrence in candidate if occurrence in remaining)
            if count > best_count:
                best, best_count = candidate, count

        if best_count == 0:
            break

        chosen = [occurrence for occurrence in best if occurrence in remaining]
        groups.append(tuple(by_occurrence[occurrence] for occurrence in chosen))
        remaining.difference_update(chosen)

    # Leftovers as singletons, in cluster order
    groups.extend(
        (keyed.triplet,) for keyed in cluster if keyed.occurrence in remaining
    )
    return groups


def _keyed_triplets(
    sequences: Iterable[Sequence[T]], key_selector: Callable[[T], TKey]
) -> Iterable[KeyedTriplet[T, TKey]]:
    """Yield one keyed triplet per element occurrence, numbered in reading order."""
    occurrence = 0
    for sequence in sequences:
        keys = [key_selector(element) for element in sequence]
        last = len(sequence) - 1
        for i, element in enumerate(sequence):
            has_previous = i > 0
            has_next = i < last
            yield KeyedTriplet(
                occurrence=occurrence,
                triplet=Triplet(
                    sequence[i - 1] if has_previous else ABSENT,
                    element,
                    sequence[i + 1] if has_next else ABSENT,
                ),
                previous_key=keys[i - 1] if has_previous else ABSENT,
                current_key=keys[i],
                next_key=keys[i + 1] if has_next else ABSENT,
            )
            occurrence += 1


def to_neighbor_groups(
    sequences: Iterable[Iterable[T] | None],
    key_selector: Callable[[T], TKey],
    merge_ends: bool = MERGE_ENDS,
) -> list[NeighborGroup[T]]:
    """
    Group element occurrences by key and compatible neighbor context.

    Args:
        sequences: Sequences of elements. None or empty sequences are ignored.
        key_selector: Maps an element to the key used for every comparison.
        merge_ends: Ignore the opposite side when comparing neighbors, so
            sequence ends merge with any context sharing the compared side.

    Returns:
        Groups of triplets (previous, current, next), one triplet per element
        occurrence. Groups of the same current key are contiguous, ordered
        by first appearance of the key.

    Raises:
        ArgumentError: If sequences or key_selector is None.

    Example:
        >>> groups = to_neighbor_groups([["A", "B"], ["A", "B", "C"]], str.upper)
        >>> [len(group) for group in groups]
        [2, 2, 1]
    """
    ensure_not_none(sequences, "sequences")
    ensure_callable(key_selector, "key_selector")

    relevants = [tuple(s) for s in sequences if s is not None]
    relevants = [s for s in relevants if s]

    clusters: dict[TKey, list[KeyedTriplet[T, TKey]]] = {}
    for keyed in _keyed_triplets(relevants, key_selector):
        clusters.setdefault(keyed.current_key, []).append(keyed)

    logger.debug(
        f"Built {sum(map(len, clusters.values()))} triplet(s) "
        f"in {len(clusters)} cluster(s) from {len(relevants)} sequence(s)"
    )

    result: list[NeighborGroup[T]] = []
    for key, cluster in clusters.items():
        # Most specific contexts first
        ordered = sorted(cluster, key=lambda keyed: not keyed.is_inner)
        groups = _assemble_groups(ordered, merge_ends)
        logger.debug(
            f"Cluster {key!r}: {len(ordered)} triplet(s) -> {len(groups)} group(s)"
        )
        result.extend(groups)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Neighbor groups:\n{format_neighbor_groups(result)}")

    return result
