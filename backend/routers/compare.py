"""Comparison and merge API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from models.session import BulkSelectRequest, CompareRequest, MergedOutput, MergeMode, SessionView
from services.config_manager import ConfigManager
from services.merge_engine import create_engine
from services.session_manager import MergeSession, SessionRegistry

logger = logging.getLogger(__name__)

router = APIRouter()

# In-memory comparison sessions (gone on restart)
sessions = SessionRegistry()


def get_session(session_id: str) -> MergeSession:
    """Look up a live session or answer 404"""
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session


@router.post("/{mode}", response_model=SessionView)
async def start_comparison(mode: MergeMode, request: CompareRequest) -> SessionView:
    """Compare two versions in a new session"""
    config = ConfigManager.get_instance().get_config()
    session = MergeSession(create_engine(mode, config))
    session.compare(request.original, request.modified)
    sessions.add(session)

    logger.info("Started %s session %s (%d segments)", mode.value, session.session_id, len(session.store))
    return session.view()


@router.get("/sessions/{session_id}", response_model=SessionView)
async def get_comparison(session_id: str) -> SessionView:
    """Get the current state of a session"""
    return get_session(session_id).view()


@router.put("/sessions/{session_id}", response_model=SessionView)
async def rerun_comparison(session_id: str, request: CompareRequest) -> SessionView:
    """Compare again; the previous segments and selections are discarded"""
    session = get_session(session_id)
    session.compare(request.original, request.modified)
    return session.view()


@router.post("/sessions/{session_id}/toggle/{segment_id}", response_model=SessionView)
async def toggle_segment(session_id: str, segment_id: int) -> SessionView:
    """Flip acceptance of one segment; unknown segment ids are ignored"""
    session = get_session(session_id)
    if session.toggle(segment_id) is None:
        logger.debug("Ignoring toggle of unknown segment %d in session %s", segment_id, session_id)
    return session.view()


@router.post("/sessions/{session_id}/bulk", response_model=SessionView)
async def bulk_select(session_id: str, request: BulkSelectRequest) -> SessionView:
    """Accept or reject every segment of one kind"""
    session = get_session(session_id)
    session.set_kind(request.kind, request.accepted)
    return session.view()


@router.get("/sessions/{session_id}/merged", response_model=MergedOutput)
async def get_merged(session_id: str) -> MergedOutput:
    """Get the merged output for copying or export"""
    return get_session(session_id).export()


@router.delete("/sessions/{session_id}")
async def delete_comparison(session_id: str) -> dict[str, str]:
    """Discard a session"""
    if not sessions.remove(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    logger.info("Deleted session %s", session_id)
    return {"status": "success", "message": "Session deleted"}
