"""
Pure algorithms over collections of collections.

Modules:
    multiset     - Multiset containment (duplicate-aware subset tests)
    segmentation - Disjoint segmentation of overlapping collections
    neighbors    - Grouping of element occurrences by neighbor context
    sequences    - Cartesian product and transposition
"""

from .multiset import is_subset_of, is_subset_of_or_either
from .neighbors import to_neighbor_groups
from .segmentation import (
    membership_segments,
    relevant_sets,
    segment_cover,
    segmented,
)
from .sequences import cartesian_product, transponded

__all__ = [
    # Multisets
    "is_subset_of",
    "is_subset_of_or_either",
    # Segmentation
    "relevant_sets",
    "segmented",
    "membership_segments",
    "segment_cover",
    # Neighbors
    "to_neighbor_groups",
    # Sequences
    "cartesian_product",
    "transponded",
]
