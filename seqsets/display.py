"""
Text rendering of algorithm results, used for debug logging.
"""

from collections.abc import Iterable, Set

from seqsets.localtypes import Triplet


def _element_text(element: object) -> str:
    return repr(element)


def format_segment(segment: Set[object]) -> str:
    """Render a segment with its elements sorted by their text, e.g. {1, 2}."""
    return "{" + ", ".join(sorted(map(_element_text, segment))) + "}"


def format_partition(partition: Iterable[Set[object]]) -> str:
    return " | ".join(format_segment(segment) for segment in partition)


def format_triplet(triplet: Triplet) -> str:
    """Render a triplet as (previous, current, next); absent neighbors show as ABSENT."""
    return f"({', '.join(map(_element_text, triplet))})"


def format_neighbor_groups(groups: Iterable[Iterable[Triplet]]) -> str:
    lines = []
    for i, group in enumerate(groups):
        triplets = " ".join(format_triplet(triplet) for triplet in group)
        lines.append(f"Group n°{i}: {triplets}")
    return "\n".join(lines)
