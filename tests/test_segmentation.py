"""Tests for seqsets/algorithms/segmentation.py"""

from itertools import combinations

import pytest

from seqsets import ArgumentError
from seqsets.algorithms.segmentation import (
    membership_segments,
    relevant_sets,
    segment_cover,
    segmented,
)


def assert_is_segmentation(segments, sequences):
    """Segments are non-empty, pairwise disjoint and rebuild every relevant input."""
    assert all(segments)
    for a, b in combinations(segments, 2):
        assert not a & b

    for relevant in relevant_sets(sequences):
        rebuilt = frozenset().union(*(s for s in segments if s <= relevant))
        assert rebuilt == relevant


OVERLAPPING_INPUTS = [
    [[1, 2, 3], [2, 3, 4]],
    [[1, 2], [2, 3], [3, 1]],
    [[1, 2, 3, 4, 5], [2, 3], [3, 4], [5, 6, 7], [7]],
    [["a", "b"], ["c"], ["a", "b"], ["b", "c", "d"], ["e", "a"]],
    [[1], [1, 2], [1, 2, 3], [1, 2, 3, 4]],
    [[0, None, ""], [None], [0, False, 1]],
]


class TestRelevantSets:
    def test_drops_empty_and_none(self):
        assert relevant_sets([[1], [], None, [2]]) == (frozenset({1}), frozenset({2}))

    def test_duplicates_kept_once_in_first_seen_order(self):
        result = relevant_sets([[3, 2], [1], [2, 3, 3], [1, 1]])
        assert result == (frozenset({2, 3}), frozenset({1}))


class TestSegmented:
    def test_two_overlapping_sets(self):
        """{1,2,3} and {2,3,4} overlap on {2,3}: three segments."""
        result = segmented([[1, 2, 3], [2, 3, 4]])
        assert result == (frozenset({1}), frozenset({2, 3}), frozenset({4}))

    def test_grouped_values(self):
        sequences = [[1, 2, 3], [1, 1, 2, 2, 3, 3], [2, 3, 4], [4, 3, 2], [], None]
        result = segmented(sequences)
        assert result == (frozenset({1}), frozenset({2, 3}), frozenset({4}))

    def test_none_elements_are_values(self):
        """None inside a collection is an element, only a None collection is ignored."""
        sequences = [
            [1, None, 3],
            [1, 1, None, 3, None, 3],
            [None, 3, 4],
            [4, 3, None],
            [],
            None,
        ]
        result = segmented(sequences)
        assert result == (frozenset({1}), frozenset({None, 3}), frozenset({4}))

    def test_singletons(self):
        result = segmented([[1], [2], [2], [1], [], None])
        assert result == (frozenset({1}), frozenset({2}))

    def test_nested_sets(self):
        result = segmented([[1, 2, 3, 4], [2, 3], [3]])
        assert result == (frozenset({1, 4}), frozenset({2}), frozenset({3}))

    def test_subset_absorbs_whole_cell(self):
        """A cell fully inside the new set is kept in place."""
        result = segmented([[1], [1, 2]])
        assert result == (frozenset({1}), frozenset({2}))

    def test_disjoint_sets_are_kept(self):
        result = segmented([["a", "b"], ["c"]])
        assert result == (frozenset({"a", "b"}), frozenset({"c"}))

    def test_empty_inputs(self):
        assert segmented([]) == ()
        assert segmented([[], None, ()]) == ()

    def test_none_raises(self):
        with pytest.raises(ArgumentError, match="sequences"):
            segmented(None)

    def test_generators_are_read_once(self):
        sequences = (iter(s) for s in [[1, 2, 3], [2, 3, 4]])
        assert len(segmented(sequences)) == 3

    def test_deterministic(self):
        sequences = OVERLAPPING_INPUTS[3]
        assert segmented(sequences) == segmented(sequences)

    @pytest.mark.parametrize("sequences", OVERLAPPING_INPUTS)
    def test_is_segmentation(self, sequences):
        assert_is_segmentation(segmented(sequences), sequences)


class TestMembershipSegments:
    @pytest.mark.parametrize("sequences", OVERLAPPING_INPUTS)
    def test_same_segments_as_refinement(self, sequences):
        assert set(membership_segments(sequences)) == set(segmented(sequences))

    @pytest.mark.parametrize("sequences", OVERLAPPING_INPUTS)
    def test_is_segmentation(self, sequences):
        assert_is_segmentation(membership_segments(sequences), sequences)

    def test_disjoint_inputs_keep_input_order(self):
        result = membership_segments([[1], [2], [3, 4]])
        assert result == (frozenset({1}), frozenset({2}), frozenset({3, 4}))

    def test_order_follows_input_not_hashing(self):
        """String hashes vary between processes, the segment order must not."""
        result = membership_segments([["pear", "fig"], ["kiwi", "fig"], ["plum"]])
        assert result == (
            frozenset({"pear"}),
            frozenset({"fig"}),
            frozenset({"kiwi"}),
            frozenset({"plum"}),
        )

    def test_generator_rows(self):
        rows = (iter(row) for row in [["b", "a"], ["a"]])
        assert membership_segments(rows) == (frozenset({"b"}), frozenset({"a"}))

    def test_empty_inputs(self):
        assert membership_segments([None, []]) == ()

    def test_none_raises(self):
        with pytest.raises(ArgumentError):
            membership_segments(None)


class TestSegmentCover:
    def test_covers_rebuild_inputs(self):
        segments, covers = segment_cover([[1, 2, 3], [2, 3, 4], [1, 2, 3]])
        assert segments == (frozenset({1}), frozenset({2, 3}), frozenset({4}))
        assert covers == ((0, 1), (1, 2))

    @pytest.mark.parametrize("sequences", OVERLAPPING_INPUTS)
    def test_covers_are_exact(self, sequences):
        segmentation = segment_cover(sequences)
        for relevant, cover in zip(relevant_sets(sequences), segmentation.covers):
            rebuilt = frozenset().union(*(segmentation.segments[i] for i in cover))
            assert rebuilt == relevant

    def test_one_shot_outer_iterable(self):
        sequences = iter([[1, 2], [2]])
        segmentation = segment_cover(sequences)
        assert segmentation.covers == ((0, 1), (1,))

    def test_none_raises(self):
        with pytest.raises(ArgumentError):
            segment_cover(None)
