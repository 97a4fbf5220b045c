"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from sse_starlette.sse import EventSourceResponse
from starlette.concurrency import iterate_in_threadpool

from models.compare import (
    CompareRequest,
    ComparisonResult,
    ExamplePair,
    ProjectRequest,
    RenderRequest,
    RowSyncRequest,
    RowSyncResponse,
    ScrollSyncRequest,
    ScrollSyncResponse,
    StreamEvent,
)
from models.diff import DiffResult, Row
from services.config_manager import ConfigManager
from services.diff_engine import ALGORITHMS
from services.diff_generator import DiffGenerator
from services.examples import get_example
from services.html_renderer import THEME_COLORS, render_side_by_side
from services.line_projector import project
from services.scroll_sync import mirror_row, mirror_scroll, scroll_ratio

router = APIRouter()


def get_diff_generator() -> DiffGenerator:
    """Generator using the configured default algorithm"""
    return DiffGenerator(ConfigManager.get_instance().get_algorithm())


def check_algorithm(algorithm: str | None):
    if algorithm is not None and algorithm not in ALGORITHMS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown diff algorithm '{algorithm}' (expected one of {', '.join(ALGORITHMS)})",
        )


@router.post("", response_model=ComparisonResult)
def compare(request: CompareRequest) -> ComparisonResult:
    """Compare two texts and return segments with both projected sides"""
    check_algorithm(request.algorithm)
    generator = get_diff_generator()
    try:
        return generator.generate(request.old_text, request.new_text, request.algorithm)
    except ValueError as e:
        # Configured default may be invalid if the config file was edited by hand
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/stream")
async def compare_stream(request: CompareRequest):
    """Compare two texts and stream segments and rows (SSE)"""
    check_algorithm(request.algorithm)
    generator = get_diff_generator()

    async def event_generator():
        try:
            events = generator.iter_events(request.old_text, request.new_text, request.algorithm)
            async for event in iterate_in_threadpool(events):
                yield {"event": "message", "data": event.model_dump_json()}
        except Exception as e:
            event = StreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.post("/project", response_model=list[Row])
def project_rows(request: ProjectRequest) -> list[Row]:
    """Project an existing segment list onto one side"""
    return project(DiffResult(segments=request.segments), request.side)


@router.post("/html", response_class=HTMLResponse)
def render_html(request: RenderRequest) -> HTMLResponse:
    """Render a side-by-side HTML view of two texts"""
    check_algorithm(request.algorithm)
    theme = request.theme or ConfigManager.get_instance().get_theme()
    if theme not in THEME_COLORS:
        raise HTTPException(status_code=400, detail=f"Unknown theme '{theme}'")

    try:
        result = get_diff_generator().generate(request.old_text, request.new_text, request.algorithm)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    document = render_side_by_side(result.old_rows, result.new_rows, theme=theme, title=request.title)
    return HTMLResponse(content=document)


@router.post("/scroll", response_model=ScrollSyncResponse)
async def sync_scroll(request: ScrollSyncRequest) -> ScrollSyncResponse:
    """Mirror the source panel's scroll offset onto the target panel"""
    source = request.source
    return ScrollSyncResponse(
        ratio=scroll_ratio(source.scroll_top, source.scroll_height, source.client_height),
        scroll_top=mirror_scroll(source, request.target),
    )


@router.post("/scroll/rows", response_model=RowSyncResponse)
async def sync_scroll_rows(request: RowSyncRequest) -> RowSyncResponse:
    """Mirror the source panel's top row onto the target panel using row counts"""
    return RowSyncResponse(
        row_index=mirror_row(request.row_index, request.source_rows, request.target_rows),
    )


@router.get("/example", response_model=ExamplePair)
async def example() -> ExamplePair:
    """Get the built-in example texts"""
    return get_example()
