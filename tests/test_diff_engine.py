"""Unit tests for the line diff engine."""

import random
import time

import pytest

from conftest import TEXT_PAIRS
from models.diff import Segment, SegmentKind
from services import diff_engine
from services.diff_engine import (
    ALGORITHMS,
    compute_diff,
    group_edits,
    lcs_edit_script,
    myers_edit_script,
    split_lines,
)


def _kinds(result):
    return [(segment.kind, segment.lines) for segment in result.segments]


def _old_lines(result):
    return [line for s in result.segments if s.kind != SegmentKind.ADDED for line in s.lines]


def _new_lines(result):
    return [line for s in result.segments if s.kind != SegmentKind.REMOVED for line in s.lines]


class TestSplitLines:
    """Tests for splitting text into lines."""

    def test_empty_text_has_no_lines(self):
        assert split_lines("") == []

    def test_plain_split(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_trailing_newline_is_dropped(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_only_one_trailing_element_is_dropped(self):
        assert split_lines("a\n\n") == ["a", ""]
        assert split_lines("\n") == [""]

    def test_whitespace_lines_are_kept(self):
        assert split_lines("  \n\t") == ["  ", "\t"]


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
class TestComputeDiff:
    """Behavior shared by every algorithm."""

    def test_identity(self, algorithm):
        result = compute_diff("a\nb\nc", "a\nb\nc", algorithm)
        assert _kinds(result) == [(SegmentKind.UNCHANGED, ["a", "b", "c"])]

    def test_both_empty(self, algorithm):
        assert compute_diff("", "", algorithm).segments == []

    def test_empty_old(self, algorithm):
        result = compute_diff("", "a\nb", algorithm)
        assert _kinds(result) == [(SegmentKind.ADDED, ["a", "b"])]

    def test_empty_new(self, algorithm):
        result = compute_diff("a\nb", "", algorithm)
        assert _kinds(result) == [(SegmentKind.REMOVED, ["a", "b"])]

    def test_replaced_middle_line(self, algorithm):
        result = compute_diff("a\nb\nc", "a\nx\nc", algorithm)
        assert _kinds(result) == [
            (SegmentKind.UNCHANGED, ["a"]),
            (SegmentKind.REMOVED, ["b"]),
            (SegmentKind.ADDED, ["x"]),
            (SegmentKind.UNCHANGED, ["c"]),
        ]

    def test_appended_line(self, algorithm):
        result = compute_diff("a\nb", "a\nb\nc", algorithm)
        assert _kinds(result) == [
            (SegmentKind.UNCHANGED, ["a", "b"]),
            (SegmentKind.ADDED, ["c"]),
        ]

    def test_trailing_newline_does_not_count_as_a_change(self, algorithm):
        result = compute_diff("a\nb\n", "a\nb", algorithm)
        assert _kinds(result) == [(SegmentKind.UNCHANGED, ["a", "b"])]

    def test_swap_prefers_deletion_first(self, algorithm):
        result = compute_diff("a\nb", "b\na", algorithm)
        assert _kinds(result) == [
            (SegmentKind.REMOVED, ["a"]),
            (SegmentKind.UNCHANGED, ["b"]),
            (SegmentKind.ADDED, ["a"]),
        ]

    def test_repeated_lines(self, algorithm):
        result = compute_diff("x\nx", "x", algorithm)
        assert _kinds(result) == [
            (SegmentKind.UNCHANGED, ["x"]),
            (SegmentKind.REMOVED, ["x"]),
        ]

    def test_no_common_lines_removes_before_adding(self, algorithm):
        result = compute_diff("p\nq", "r\ns", algorithm)
        assert _kinds(result) == [
            (SegmentKind.REMOVED, ["p", "q"]),
            (SegmentKind.ADDED, ["r", "s"]),
        ]

    def test_classic_edit_distance(self, algorithm):
        # ABCABBA -> CBABAC has an LCS of length 4
        result = compute_diff("a\nb\nc\na\nb\nb\na", "c\nb\na\nb\na\nc", algorithm)
        assert result.edit_distance == 5
        assert result.unchanged_count == 4

    def test_unicode_and_whitespace(self, algorithm):
        result = compute_diff("héllo\n世界\n  \n\t", "héllo\n世界\n  ", algorithm)
        assert _kinds(result) == [
            (SegmentKind.UNCHANGED, ["héllo", "世界", "  "]),
            (SegmentKind.REMOVED, ["\t"]),
        ]

    @pytest.mark.parametrize("old_text,new_text", TEXT_PAIRS)
    def test_reconstruction(self, algorithm, old_text, new_text):
        result = compute_diff(old_text, new_text, algorithm)
        assert _old_lines(result) == split_lines(old_text)
        assert _new_lines(result) == split_lines(new_text)

    @pytest.mark.parametrize("old_text,new_text", TEXT_PAIRS)
    def test_segments_are_maximal_and_non_empty(self, algorithm, old_text, new_text):
        segments = compute_diff(old_text, new_text, algorithm).segments
        assert all(segment.lines for segment in segments)
        for previous, current in zip(segments, segments[1:]):
            assert previous.kind != current.kind

    @pytest.mark.parametrize("old_text,new_text", TEXT_PAIRS)
    def test_never_worse_than_full_replacement(self, algorithm, old_text, new_text):
        result = compute_diff(old_text, new_text, algorithm)
        assert result.edit_distance <= len(split_lines(old_text)) + len(split_lines(new_text))

    def test_deterministic(self, algorithm):
        old_text, new_text = "a\nb\na\nc\nb", "b\na\nc\na\nb\nb"
        first = compute_diff(old_text, new_text, algorithm)
        second = compute_diff(old_text, new_text, algorithm)
        assert first.model_dump_json() == second.model_dump_json()


class TestAlgorithmsAgree:
    """Myers and the LCS fallback must produce the same segments."""

    def test_repeated_lines_resolve_ties_the_same_way(self):
        old_text, new_text = "c\na\nb\na\nc", "a\nc\na\nc\na\nb"
        expected = [
            (SegmentKind.REMOVED, ["c"]),
            (SegmentKind.UNCHANGED, ["a"]),
            (SegmentKind.REMOVED, ["b"]),
            (SegmentKind.ADDED, ["c"]),
            (SegmentKind.UNCHANGED, ["a", "c"]),
            (SegmentKind.ADDED, ["a", "b"]),
        ]
        assert _kinds(compute_diff(old_text, new_text, "lcs")) == expected
        assert _kinds(compute_diff(old_text, new_text, "myers")) == expected

    def test_random_inputs(self):
        rng = random.Random(1234)
        alphabet = ["a", "b", "c"]
        for _ in range(3000):
            old_text = "\n".join(rng.choice(alphabet) for _ in range(rng.randint(1, 7)))
            new_text = "\n".join(rng.choice(alphabet) for _ in range(rng.randint(1, 7)))

            myers = compute_diff(old_text, new_text, "myers")
            lcs = compute_diff(old_text, new_text, "lcs")

            assert myers.model_dump() == lcs.model_dump(), (old_text, new_text)
            assert _old_lines(myers) == split_lines(old_text)
            assert _new_lines(myers) == split_lines(new_text)

    def test_edit_scripts_match_without_trimming_or_budget(self):
        rng = random.Random(99)
        alphabet = ["a", "b", "c", "d", ""]
        for _ in range(500):
            old_lines = [rng.choice(alphabet) for _ in range(rng.randint(0, 12))]
            new_lines = [rng.choice(alphabet) for _ in range(rng.randint(0, 12))]

            assert myers_edit_script(old_lines, new_lines) == lcs_edit_script(old_lines, new_lines), (
                old_lines,
                new_lines,
            )

    def test_larger_input(self):
        old_lines = [f"line {i}" for i in range(500)]
        new_lines = [line for i, line in enumerate(old_lines) if i % 7 != 0]
        new_lines[100:100] = ["inserted"] * 5
        old_text, new_text = "\n".join(old_lines), "\n".join(new_lines)

        result = compute_diff(old_text, new_text)

        assert result.removed_count == len([i for i in range(500) if i % 7 == 0])
        assert result.added_count == 5
        assert result == compute_diff(old_text, new_text, "lcs")


class TestMyersCost:
    """The Myers trace never grows past the size of the LCS table."""

    def test_trace_budget_gives_up(self):
        old_lines = [f"old {i}" for i in range(50)]
        new_lines = [f"new {i}" for i in range(50)]
        assert myers_edit_script(old_lines, new_lines, budget=100) is None

    def test_disjoint_texts_skip_the_search(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("trace search should not run for disjoint texts")

        monkeypatch.setattr(diff_engine, "myers_edit_script", fail)
        old_text = "\n".join(f"old {i}" for i in range(300))
        new_text = "\n".join(f"new {i}" for i in range(300))

        result = compute_diff(old_text, new_text)

        assert _kinds(result) == [
            (SegmentKind.REMOVED, split_lines(old_text)),
            (SegmentKind.ADDED, split_lines(new_text)),
        ]

    def test_large_disjoint_texts(self):
        old_text = "\n".join(f"old {i}" for i in range(1500))
        new_text = "\n".join(f"new {i}" for i in range(1500))

        start = time.perf_counter()
        result = compute_diff(old_text, new_text)
        elapsed = time.perf_counter() - start

        assert result.removed_count == 1500
        assert result.added_count == 1500
        assert elapsed < 10

    def test_common_prefix_and_suffix_are_matched_first(self, monkeypatch):
        seen = []
        original = diff_engine.ALGORITHMS["myers"]

        def record(old, new):
            seen.append((old, new))
            return original(old, new)

        monkeypatch.setitem(diff_engine.ALGORITHMS, "myers", record)
        compute_diff("h1\nh2\nx\nt1", "h1\nh2\ny\nz\nt1")

        assert seen == [(["x"], ["y", "z"])]


class TestGroupEdits:
    """Tests for merging edit scripts into segments."""

    def test_additions_before_removals_are_reordered(self):
        segments = group_edits([
            (SegmentKind.ADDED, "x"),
            (SegmentKind.REMOVED, "y"),
        ])
        assert segments == [
            Segment(kind=SegmentKind.REMOVED, lines=["y"]),
            Segment(kind=SegmentKind.ADDED, lines=["x"]),
        ]

    def test_unchanged_runs_are_merged(self):
        segments = group_edits([
            (SegmentKind.UNCHANGED, "a"),
            (SegmentKind.UNCHANGED, "b"),
            (SegmentKind.REMOVED, "c"),
            (SegmentKind.UNCHANGED, "d"),
        ])
        assert [(s.kind, s.lines) for s in segments] == [
            (SegmentKind.UNCHANGED, ["a", "b"]),
            (SegmentKind.REMOVED, ["c"]),
            (SegmentKind.UNCHANGED, ["d"]),
        ]

    def test_empty_script(self):
        assert group_edits([]) == []


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError, match="Unknown diff algorithm"):
        compute_diff("a", "b", "patience")
