from typing import List
from fastapi import APIRouter, HTTPException

from dermacare.models import ConditionRecord
from dermacare.dermatology_data import SKIN_CONDITIONS

router = APIRouter(prefix="/api/conditions", tags=["conditions"])

@router.get("", response_model=List[ConditionRecord])
async def list_conditions():
    """Full condition table in tie-break order."""
    return list(SKIN_CONDITIONS.values())

@router.get("/{key}", response_model=ConditionRecord)
async def get_condition(key: str):
    record = SKIN_CONDITIONS.get(key)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Unknown condition: {key}")
    return record
