"""
Diff Engine - Line-level diff between two text blocks

Two algorithms produce the same edit script:
- "myers": Myers' O(ND) greedy search, the default
- "lcs": O(NM) dynamic-programming LCS table, kept as a fallback for
  small inputs (a few thousand lines) and as a cross-check

Both walk the texts front to back and, where several minimal scripts
exist, delete from the old text before inserting from the new one.
Common leading and trailing lines are matched before either runs.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable

from models.diff import DiffResult, Segment, SegmentKind

DEFAULT_ALGORITHM = "myers"

# An edit is (kind, line); kind is one of the SegmentKind members
Edit = tuple[SegmentKind, str]


def split_lines(text: str) -> list[str]:
    """Split text on "\\n", dropping the empty element left by a trailing newline"""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _common_affixes(old: list[str], new: list[str]) -> tuple[int, int]:
    """Lengths of the common prefix and the (non-overlapping) common suffix"""
    limit = min(len(old), len(new))
    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1

    suffix = 0
    while suffix < limit - prefix and old[-1 - suffix] == new[-1 - suffix]:
        suffix += 1

    return prefix, suffix


def lcs_edit_script(old: list[str], new: list[str]) -> list[Edit]:
    """Edit script from a suffix LCS table, walked front to back"""
    n, m = len(old), len(new)
    # table[i][j] = LCS length of old[i:] and new[j:]
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if old[i] == new[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])

    edits: list[Edit] = []
    i = j = 0
    while i < n and j < m:
        if old[i] == new[j]:
            edits.append((SegmentKind.UNCHANGED, old[i]))
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            edits.append((SegmentKind.REMOVED, old[i]))
            i += 1
        else:
            edits.append((SegmentKind.ADDED, new[j]))
            j += 1

    edits.extend((SegmentKind.REMOVED, line) for line in old[i:])
    edits.extend((SegmentKind.ADDED, line) for line in new[j:])
    return edits


def _myers_trace(old: list[str], new: list[str], budget: int | None = None) -> list[list[int]] | None:
    """
    Myers' greedy search over the reversed sequences.

    trace[d][k + d] is the furthest reversed x reachable on diagonal k with
    at most d edits, for d below the edit distance. Returns None once the
    stored entries exceed budget.
    """
    rev_old, rev_new = old[::-1], new[::-1]
    n, m = len(old), len(new)
    max_d = n + m
    offset = max_d + 1
    v = [0] * (2 * max_d + 3)
    trace: list[list[int]] = []
    stored = 0

    for d in range(max_d + 1):
        for k in range(-d, d + 1, 2):
            # Diagonals outside the edit grid
            if k < -m or k > n:
                continue

            if k == -d:
                x = v[offset + k + 1]
            elif k == d:
                x = v[offset + k - 1] + 1
            else:
                x = max(v[offset + k - 1] + 1, v[offset + k + 1])
            x = min(x, n, m + k)
            y = x - k

            while x < n and y < m and rev_old[x] == rev_new[y]:
                x += 1
                y += 1

            v[offset + k] = x

            if x >= n and y >= m:
                return trace

        trace.append(v[offset - d : offset + d + 1])
        stored += 2 * d + 1
        if budget is not None and stored > budget:
            return None

    return trace


def _within(trace: list[list[int]], edits: int, x: int, y: int) -> bool:
    """Whether reversed point (x, y) is at most `edits` edits from the reversed origin"""
    k = x - y
    if abs(k) > edits:
        return False
    return x <= trace[edits][k + edits]


def myers_edit_script(old: list[str], new: list[str], budget: int | None = None) -> list[Edit] | None:
    """
    Edit script from Myers' search, walked front to back.

    The search runs on the reversed sequences, so the trace gives the edit
    distance of every remaining suffix pair. The walk deletes whenever
    deleting keeps the script minimal. Returns None if the trace exceeds budget.
    """
    trace = _myers_trace(old, new, budget)
    if trace is None:
        return None

    n, m = len(old), len(new)
    edits: list[Edit] = []
    remaining = len(trace)
    i = j = 0

    while i < n or j < m:
        if i < n and j < m and old[i] == new[j]:
            edits.append((SegmentKind.UNCHANGED, old[i]))
            i += 1
            j += 1
            continue

        if j == m or (i < n and _within(trace, remaining - 1, n - i - 1, m - j)):
            edits.append((SegmentKind.REMOVED, old[i]))
            i += 1
        else:
            edits.append((SegmentKind.ADDED, new[j]))
            j += 1
        remaining -= 1

    return edits


def _distance_lower_bound(old: list[str], new: list[str]) -> int:
    shared = sum((Counter(old) & Counter(new)).values())
    return len(old) + len(new) - 2 * shared


def _myers_edits(old: list[str], new: list[str]) -> list[Edit]:
    # The trace grows with the square of the edit distance; past the size of
    # the LCS table the table is the cheaper way to the same script
    budget = len(old) * len(new)
    if _distance_lower_bound(old, new) ** 2 > budget:
        return lcs_edit_script(old, new)

    edits = myers_edit_script(old, new, budget)
    if edits is None:
        return lcs_edit_script(old, new)
    return edits


ALGORITHMS: dict[str, Callable[[list[str], list[str]], list[Edit]]] = {
    "myers": _myers_edits,
    "lcs": lcs_edit_script,
}


def group_edits(edits: list[Edit]) -> list[Segment]:
    """
    Merge an edit script into segments.

    Between two unchanged runs, every removed line is emitted before every
    added line, so adjacent segments never share a kind.
    """
    segments: list[Segment] = []
    removed: list[str] = []
    added: list[str] = []

    def flush_changes() -> None:
        if removed:
            segments.append(Segment(kind=SegmentKind.REMOVED, lines=removed.copy()))
            removed.clear()
        if added:
            segments.append(Segment(kind=SegmentKind.ADDED, lines=added.copy()))
            added.clear()

    for kind, line in edits:
        if kind == SegmentKind.REMOVED:
            removed.append(line)
        elif kind == SegmentKind.ADDED:
            added.append(line)
        else:
            flush_changes()
            if segments and segments[-1].kind == SegmentKind.UNCHANGED:
                segments[-1].lines.append(line)
            else:
                segments.append(Segment(kind=SegmentKind.UNCHANGED, lines=[line]))

    flush_changes()
    return segments


def compute_diff(old_text: str, new_text: str, algorithm: str = DEFAULT_ALGORITHM) -> DiffResult:
    """
    Compute the line diff of two texts.

    Args:
        old_text: The original text
        new_text: The modified text
        algorithm: "myers" (default) or "lcs"

    Returns:
        DiffResult whose segments reconstruct both line sequences

    Raises:
        ValueError: If the algorithm name is unknown
    """
    try:
        edit_script = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown diff algorithm: {algorithm!r} (expected one of {', '.join(ALGORITHMS)})"
        ) from None

    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)

    # Fast paths for identical and one-sided inputs
    if old_lines == new_lines:
        if not old_lines:
            return DiffResult(segments=[])
        return DiffResult(segments=[Segment(kind=SegmentKind.UNCHANGED, lines=old_lines)])
    if not old_lines:
        return DiffResult(segments=[Segment(kind=SegmentKind.ADDED, lines=new_lines)])
    if not new_lines:
        return DiffResult(segments=[Segment(kind=SegmentKind.REMOVED, lines=old_lines)])

    prefix, suffix = _common_affixes(old_lines, new_lines)
    old_end, new_end = len(old_lines) - suffix, len(new_lines) - suffix

    edits: list[Edit] = [(SegmentKind.UNCHANGED, line) for line in old_lines[:prefix]]
    edits.extend(edit_script(old_lines[prefix:old_end], new_lines[prefix:new_end]))
    edits.extend((SegmentKind.UNCHANGED, line) for line in old_lines[old_end:])

    return DiffResult(segments=group_edits(edits))
