import logging
from typing import List
from fastapi import APIRouter, HTTPException, Request

from dermacare.models import HistoryEntry, ProgressReport
from dermacare.services.progress_tracker import build_progress_report
from dermacare.dal.app_state_repo import app_state_repo
from dermacare.session import get_session_id

router = APIRouter(prefix="/api/history", tags=["history"])

logger = logging.getLogger(__name__)

@router.get("", response_model=List[HistoryEntry])
async def get_history(request: Request):
    session_id = get_session_id(request)

    try:
        history = app_state_repo.get_state(session_id).skin_history
        logger.info(f"History fetched: {len(history)} entries for session {session_id}")
        return history

    except Exception as e:
        logger.error(f"History fetch failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("")
async def clear_history(request: Request):
    session_id = get_session_id(request)

    try:
        app_state_repo.get_state(session_id).clear_history()
        return {"status": "cleared", "message": "Scan history deleted"}

    except Exception as e:
        logger.error(f"Clear history failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/progress", response_model=ProgressReport)
async def get_progress(request: Request):
    session_id = get_session_id(request)

    try:
        return build_progress_report(app_state_repo.get_state(session_id).skin_history)

    except Exception as e:
        logger.error(f"Progress report failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
