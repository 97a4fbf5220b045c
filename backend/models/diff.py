"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SegmentKind(str, Enum):
    """Classification of a run of lines"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class Side(str, Enum):
    """Panel of the side-by-side view"""

    OLD = "old"
    NEW = "new"


class Highlight(str, Enum):
    """Row highlight; the renderer maps it to a background style"""

    NONE = "none"
    ADDED = "added"
    REMOVED = "removed"


class Segment(BaseModel):
    """A maximal run of lines sharing the same classification"""

    kind: SegmentKind
    lines: list[str]


class DiffResult(BaseModel):
    """Ordered segments covering both texts"""

    segments: list[Segment] = []

    def _count(self, kind: SegmentKind) -> int:
        return sum(len(s.lines) for s in self.segments if s.kind == kind)

    @property
    def added_count(self) -> int:
        return self._count(SegmentKind.ADDED)

    @property
    def removed_count(self) -> int:
        return self._count(SegmentKind.REMOVED)

    @property
    def unchanged_count(self) -> int:
        return self._count(SegmentKind.UNCHANGED)

    @property
    def edit_distance(self) -> int:
        return self.added_count + self.removed_count


class Row(BaseModel):
    """One numbered line on one side of the comparison view"""

    side: Side
    line_number: int = Field(ge=1)  # 1-indexed, per side
    text: str
    highlight: Highlight = Highlight.NONE
