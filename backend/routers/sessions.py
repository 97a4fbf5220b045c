"""Session API endpoints - latest comparison per editing session"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from models.compare import SessionResponse, SessionUpdateRequest
from routers.diff import check_algorithm, get_diff_generator
from services.session_store import get_session_store

router = APIRouter()


@router.put("/{session_id}", response_model=SessionResponse)
def update_session(session_id: str, request: SessionUpdateRequest) -> SessionResponse:
    """Recompute a session's comparison; stale revisions are discarded"""
    check_algorithm(request.algorithm)
    try:
        result = get_diff_generator().generate(request.old_text, request.new_text, request.algorithm)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    state, accepted = get_session_store().submit(session_id, request.revision, result)

    return SessionResponse(
        session_id=state.session_id,
        revision=state.revision,
        accepted=accepted,
        result=state.result,
    )


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Get the latest retained comparison"""
    state = get_session_store().get(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")

    return SessionResponse(
        session_id=state.session_id,
        revision=state.revision,
        result=state.result,
    )


@router.delete("/{session_id}")
async def delete_session(session_id: str) -> dict[str, Any]:
    """Discard a session"""
    if not get_session_store().discard(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")

    return {"status": "success", "message": f"Session '{session_id}' discarded"}
