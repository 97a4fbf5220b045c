"""Models module - Pydantic data models"""

from .diff import DiffResult, Highlight, Row, Segment, SegmentKind, Side
from .compare import (
    CompareRequest,
    ComparisonResult,
    DiffStats,
    ExamplePair,
    ProjectRequest,
    RenderRequest,
    ScrollMetrics,
    RowSyncRequest,
    RowSyncResponse,
    ScrollSyncRequest,
    ScrollSyncResponse,
    SessionResponse,
    SessionUpdateRequest,
    StreamEvent,
)

__all__ = [
    # Diff models
    "DiffResult",
    "Highlight",
    "Row",
    "Segment",
    "SegmentKind",
    "Side",
    # Comparison API models
    "CompareRequest",
    "ComparisonResult",
    "DiffStats",
    "ExamplePair",
    "ProjectRequest",
    "RenderRequest",
    "ScrollMetrics",
    "RowSyncRequest",
    "RowSyncResponse",
    "ScrollSyncRequest",
    "ScrollSyncResponse",
    "SessionResponse",
    "SessionUpdateRequest",
    "StreamEvent",
]
