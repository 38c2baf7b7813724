import io
import uuid
import hashlib
import logging
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, UploadFile, File, Form, HTTPException, Request
from PIL import Image, UnidentifiedImageError

from dermacare.models import ScanRequest, ScanResponse, HistoryEntry
from dermacare.services.condition_classifier import skin_condition_classifier
from dermacare.services.result_interpreter import result_interpreter
from dermacare.services.result_presenter import present_scan
from dermacare.dal.app_state_repo import app_state_repo
from dermacare.session import get_session_id

router = APIRouter(prefix="/api/scans", tags=["scans"])

logger = logging.getLogger(__name__)

def _record_scan(session_id: str, image_uri: str, notes: Optional[str]) -> ScanResponse:
    result = skin_condition_classifier.classify(image_uri)
    entry = HistoryEntry(
        id=str(uuid.uuid4()),
        image_uri=image_uri,
        result=result,
        timestamp=datetime.now(),
        notes=notes,
    )

    state = app_state_repo.get_state(session_id)
    state.add_history(entry)

    return ScanResponse(
        entry=entry,
        accuracy=result_interpreter.get_accuracy_level(result.confidence),
        presentation=present_scan(entry, state.is_detailed_mode),
    )

@router.post("", response_model=ScanResponse)
async def create_scan(request: Request, payload: ScanRequest):
    session_id = get_session_id(request)

    try:
        response = _record_scan(session_id, payload.image_uri, payload.notes)
        logger.info(f"Scan recorded for session {session_id}: {response.entry.result.condition_key}")
        return response

    except Exception as e:
        logger.error(f"Scan failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/upload", response_model=ScanResponse)
async def upload_scan(
    request: Request,
    file: UploadFile = File(...),
    notes: Optional[str] = Form(None),
):
    session_id = get_session_id(request)

    try:
        content = await file.read()

        try:
            Image.open(io.BytesIO(content)).verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            logger.warning(f"Rejected upload {file.filename}: {e}")
            raise HTTPException(status_code=400, detail="Uploaded file is not a valid image")

        # Identical bytes give identical results
        image_uri = f"upload://{hashlib.md5(content).hexdigest()}"
        response = _record_scan(session_id, image_uri, notes)
        logger.info(f"Upload {file.filename} classified as {response.entry.result.condition_key}")
        return response

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Upload scan failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
