"""Comparison API data models"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .diff import Row, Segment, Side


class CompareRequest(BaseModel):
    """Request to compare two text blocks"""

    old_text: str = ""
    new_text: str = ""
    algorithm: str | None = None  # "myers" or "lcs"; None uses the configured default


class RenderRequest(CompareRequest):
    """Request for a server-rendered side-by-side view"""

    theme: str | None = None  # "light" or "dark"; None uses the configured theme
    title: str = "Diff Result"


class DiffStats(BaseModel):
    """Line counts of a comparison"""

    added: int
    removed: int
    unchanged: int
    old_line_count: int
    new_line_count: int


class ComparisonResult(BaseModel):
    """Segments plus both projected row lists"""

    segments: list[Segment]
    old_rows: list[Row]
    new_rows: list[Row]
    stats: DiffStats
    algorithm: str


class ProjectRequest(BaseModel):
    """Request to project an existing segment list onto one side"""

    segments: list[Segment]
    side: Side


class ScrollMetrics(BaseModel):
    """Scroll geometry of one panel"""

    scroll_top: float = Field(default=0.0, ge=0)
    scroll_height: float = Field(ge=0)
    client_height: float = Field(ge=0)


class ScrollSyncRequest(BaseModel):
    """Mirror the source panel's scroll position onto the target panel"""

    source: ScrollMetrics
    target: ScrollMetrics


class ScrollSyncResponse(BaseModel):
    """Fractional offset and the target's new scroll_top"""

    ratio: float
    scroll_top: float


class RowSyncRequest(BaseModel):
    """Mirror a 0-based top row using only the two panels' row counts"""

    row_index: int = Field(ge=0)
    source_rows: int = Field(ge=0)
    target_rows: int = Field(ge=0)


class RowSyncResponse(BaseModel):
    """Top row to show in the target panel"""

    row_index: int


class ExamplePair(BaseModel):
    """Built-in example texts"""

    name: str
    old_text: str
    new_text: str


class StreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "segment", "rows", "done", "error"
    segment: Segment | None = None
    side: Side | None = None
    rows: list[Row] | None = None
    metadata: dict | None = None
    done: bool = False
    error: str | None = None


class SessionUpdateRequest(BaseModel):
    """New texts for a session, tagged with the caller's revision"""

    revision: int = Field(ge=0)
    old_text: str = ""
    new_text: str = ""
    algorithm: str | None = None


class SessionResponse(BaseModel):
    """Latest retained comparison of a session"""

    session_id: str
    revision: int
    accepted: bool = True
    result: ComparisonResult
