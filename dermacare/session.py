import uuid
from fastapi import HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware
from dermacare.config import SESSION_COOKIE_NAME, SESSION_COOKIE_MAX_AGE


class SessionMiddleware(BaseHTTPMiddleware):
    """Issues a session cookie on first contact and exposes the id on request.state."""

    async def dispatch(self, request: Request, call_next):
        session_id = request.cookies.get(SESSION_COOKIE_NAME)
        created_new = False
        if not session_id:
            session_id = str(uuid.uuid4())
            created_new = True

        # The first request has no cookie yet; endpoints read the id from here
        request.state.session_id = session_id

        response = await call_next(request)

        if created_new:
            response.set_cookie(key=SESSION_COOKIE_NAME, value=session_id, max_age=SESSION_COOKIE_MAX_AGE)

        return response


def get_session_id(request: Request) -> str:
    session_id = request.cookies.get(SESSION_COOKIE_NAME) or getattr(request.state, "session_id", None)
    if not session_id:
        raise HTTPException(status_code=400, detail="No session found")
    return session_id
