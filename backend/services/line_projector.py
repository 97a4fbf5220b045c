"""
Line Projector - Turn diff segments into numbered rows for one panel
"""

from __future__ import annotations

from models.diff import DiffResult, Highlight, Row, SegmentKind, Side

# Segment kind hidden on each side, and the highlight for the kind shown only there
_HIDDEN_KIND = {Side.OLD: SegmentKind.ADDED, Side.NEW: SegmentKind.REMOVED}
_SIDE_HIGHLIGHT = {Side.OLD: Highlight.REMOVED, Side.NEW: Highlight.ADDED}


def project(diff: DiffResult, side: Side | str) -> list[Row]:
    """
    Project a diff onto one side of the view.

    The old side shows unchanged and removed lines, the new side unchanged
    and added lines. Line numbers start at 1 and count only the rows shown.
    """
    side = Side(side)
    hidden = _HIDDEN_KIND[side]
    rows: list[Row] = []
    line_number = 1

    for segment in diff.segments:
        if segment.kind == hidden:
            continue
        highlight = Highlight.NONE if segment.kind == SegmentKind.UNCHANGED else _SIDE_HIGHLIGHT[side]
        for line in segment.lines:
            rows.append(Row(side=side, line_number=line_number, text=line, highlight=highlight))
            line_number += 1

    return rows


def project_both(diff: DiffResult) -> tuple[list[Row], list[Row]]:
    """Old-side and new-side rows"""
    return project(diff, Side.OLD), project(diff, Side.NEW)


def rows_to_text(rows: list[Row]) -> str:
    """Rejoin row texts with newlines"""
    return "\n".join(row.text for row in rows)
