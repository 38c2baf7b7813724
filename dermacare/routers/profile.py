import logging
from typing import List, Literal, Optional
from fastapi import APIRouter, HTTPException, Query, Request

from dermacare.models import AppStateResponse, FirstTimeRequest, RoutineResponse, UserProfile
from dermacare.services.routine_builder import build_routine, steps_for_time, completion_stats
from dermacare.dal.app_state_repo import AppState, app_state_repo
from dermacare.session import get_session_id

router = APIRouter(prefix="/api", tags=["profile"])

logger = logging.getLogger(__name__)

def _state_response(state: AppState) -> AppStateResponse:
    return AppStateResponse(
        user_profile=state.user_profile,
        is_detailed_mode=state.is_detailed_mode,
        is_first_time=state.is_first_time,
        history_count=len(state.skin_history),
    )

@router.get("/profile", response_model=AppStateResponse)
async def get_profile(request: Request):
    session_id = get_session_id(request)

    try:
        return _state_response(app_state_repo.get_state(session_id))

    except Exception as e:
        logger.error(f"Profile fetch failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.put("/profile", response_model=AppStateResponse)
async def set_profile(request: Request, payload: UserProfile):
    session_id = get_session_id(request)

    try:
        state = app_state_repo.get_state(session_id)
        state.set_user_profile(payload)
        logger.info(f"Profile updated for session {session_id}")
        return _state_response(state)

    except Exception as e:
        logger.error(f"Profile update failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/profile", response_model=AppStateResponse)
async def delete_profile(request: Request):
    session_id = get_session_id(request)

    try:
        state = app_state_repo.get_state(session_id)
        state.set_user_profile(None)
        return _state_response(state)

    except Exception as e:
        logger.error(f"Profile delete failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/profile/mode", response_model=AppStateResponse)
async def toggle_mode(request: Request):
    session_id = get_session_id(request)

    try:
        state = app_state_repo.get_state(session_id)
        state.toggle_detailed_mode()
        return _state_response(state)

    except Exception as e:
        logger.error(f"Mode toggle failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.put("/profile/first-time", response_model=AppStateResponse)
async def set_first_time(request: Request, payload: FirstTimeRequest):
    session_id = get_session_id(request)

    try:
        state = app_state_repo.get_state(session_id)
        state.set_first_time(payload.is_first_time)
        return _state_response(state)

    except Exception as e:
        logger.error(f"First-time flag update failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/routine", response_model=RoutineResponse)
async def get_routine(
    request: Request,
    time: Literal["morning", "evening"] = "morning",
    completed: Optional[List[str]] = Query(None),
):
    """Personalized routine for one time of day; `completed` lists finished step ids."""
    session_id = get_session_id(request)

    try:
        state = app_state_repo.get_state(session_id)
        steps = steps_for_time(
            build_routine(state.user_profile, state.is_detailed_mode, completed or []),
            time,
        )
        return RoutineResponse(time=time, steps=steps, **completion_stats(steps))

    except Exception as e:
        logger.error(f"Routine build failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
