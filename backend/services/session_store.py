"""
Session Store - Keep the latest comparison per editing session

Rapid successive edits can submit recomputations out of order; a submission
tagged with an older revision than the stored one is discarded.
"""

from __future__ import annotations

import threading

from pydantic import BaseModel

from models.compare import ComparisonResult


class SessionState(BaseModel):
    """Latest retained comparison of a session"""

    session_id: str
    revision: int
    result: ComparisonResult


class SessionStore:
    """In-memory, last-write-wins session storage"""

    def __init__(self):
        self._sessions: dict[str, SessionState] = {}
        # Handlers submit from the server's worker threads
        self._lock = threading.Lock()

    def submit(
        self,
        session_id: str,
        revision: int,
        result: ComparisonResult,
    ) -> tuple[SessionState, bool]:
        """Store result unless a newer revision is already held; returns (state, accepted)"""
        with self._lock:
            current = self._sessions.get(session_id)
            if current is not None and revision < current.revision:
                print(
                    f"[SessionStore] Discarded stale revision {revision} for session {session_id} "
                    f"(current: {current.revision})"
                )
                return current, False

            state = SessionState(session_id=session_id, revision=revision, result=result)
            self._sessions[session_id] = state
            return state, True

    def get(self, session_id: str) -> SessionState | None:
        return self._sessions.get(session_id)

    def discard(self, session_id: str) -> bool:
        """Drop a session; False if it was unknown"""
        return self._sessions.pop(session_id, None) is not None

    def clear(self):
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get the process-wide store"""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
