import logging
from fastapi import APIRouter, HTTPException, Request

from dermacare.models import IngredientAnalysisRequest, IngredientAnalysisResponse
from dermacare.services.ingredient_analyzer import ingredient_analyzer
from dermacare.services.result_presenter import present_ingredients
from dermacare.dal.app_state_repo import app_state_repo
from dermacare.session import get_session_id

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])

logger = logging.getLogger(__name__)

@router.post("/analyze", response_model=IngredientAnalysisResponse)
async def analyze_ingredients(request: Request, payload: IngredientAnalysisRequest):
    if not payload.text.strip():
        raise HTTPException(status_code=400, detail="Please enter ingredients to analyze")

    session_id = get_session_id(request)

    try:
        results = ingredient_analyzer.analyze(payload.text)
        summary = ingredient_analyzer.summarize(results)
        detailed = app_state_repo.get_state(session_id).is_detailed_mode

        return IngredientAnalysisResponse(
            results=results,
            summary=summary,
            presentation=present_ingredients(results, summary, detailed),
        )

    except Exception as e:
        logger.error(f"Ingredient analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
