"""
Generic algorithms over collections of collections.

**Multisets** (algorithms/multiset.py)
    Duplicate-aware containment between sequences.
    - is_subset_of(current, other)
    - is_subset_of_or_either(current, other)

**Segmentation** (algorithms/segmentation.py)
    Pairwise-disjoint segments whose unions rebuild every input collection.
    - segmented(sequences) -> segments
    - membership_segments(sequences) -> segments
    - segment_cover(sequences) -> Segmentation(segments, covers)

**Neighbors** (algorithms/neighbors.py)
    Groups of (previous, current, next) contexts sharing a key.
    - to_neighbor_groups(sequences, key_selector, merge_ends=False)

**Sequences** (algorithms/sequences.py)
    - cartesian_product(sequences)
    - transponded(sequences, fill=ABSENT)
"""

from .algorithms import (
    cartesian_product,
    is_subset_of,
    is_subset_of_or_either,
    membership_segments,
    segment_cover,
    segmented,
    to_neighbor_groups,
    transponded,
)
from .localtypes import ABSENT, Absent, ArgumentError, Segmentation, Triplet
from .log import configure_logging

__all__ = [
    # Types
    "ABSENT",
    "Absent",
    "ArgumentError",
    "Segmentation",
    "Triplet",
    # Algorithms
    "cartesian_product",
    "is_subset_of",
    "is_subset_of_or_either",
    "membership_segments",
    "segment_cover",
    "segmented",
    "to_neighbor_groups",
    "transponded",
    # Logging
    "configure_logging",
]
