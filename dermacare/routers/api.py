import logging
from fastapi import APIRouter, HTTPException, Request
from dermacare.models import HealthCheckResponse
from dermacare.dermatology_data import SKIN_CONDITIONS
from dermacare.dal.database import db_manager
from dermacare.dal.app_state_repo import app_state_repo
from dermacare.session import get_session_id

router = APIRouter(prefix="/api")

logger = logging.getLogger(__name__)

@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Health check endpoint."""
    return HealthCheckResponse(
        status="OK",
        storage_available=db_manager.is_available(),
        conditions_loaded=len(SKIN_CONDITIONS)
    )

@router.delete("/session")
async def clear_session(request: Request):
    """Deletes all state associated with the current session ID."""
    session_id = get_session_id(request)

    try:
        app_state_repo.clear_session(session_id)
        return {"status": "cleared", "message": "All session data deleted"}

    except Exception as e:
        logger.error(f"Clear session failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
