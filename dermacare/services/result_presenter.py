from typing import Any, Dict, List
from dermacare.models import HistoryEntry, IngredientResult, IngredientSummary
from dermacare.dermatology_data import SERIOUS_CONDITIONS
from dermacare.services.result_interpreter import result_interpreter, round_half_up

SEVERITY_STATUS = {
    "low": "Looking Good",
    "medium": "Needs Attention",
    "high": "See Doctor Soon",
}


def simple_recommendation(severity: str, condition: str) -> str:
    if severity == "low":
        return "Your skin looks healthy! Keep up your current routine."
    if severity == "medium":
        return f"Detected {condition}. Follow the care tips below to improve."
    return f"Urgent: {condition} detected. Please consult a dermatologist immediately."


def _percent(confidence: float) -> int:
    return int(round_half_up(confidence * 100))


def present_scan(entry: HistoryEntry, detailed: bool) -> Dict[str, Any]:
    """
    Renders a history entry for one of the two display modes.
    Simple mode keeps plain-language status; detailed mode adds clinical fields.
    """
    result = entry.result
    accuracy = result_interpreter.get_accuracy_level(result.confidence)
    urgent = result.condition_key in SERIOUS_CONDITIONS or result.severity == "high"

    if not detailed:
        return {
            "mode": "simple",
            "condition": result.condition,
            "severity": result.severity,
            "status": SEVERITY_STATUS[result.severity],
            "message": simple_recommendation(result.severity, result.condition),
            "accuracy": accuracy["label"],
            "urgent": urgent,
        }

    confidence_percent = _percent(result.confidence)
    return {
        "mode": "detailed",
        "condition": result.condition,
        "medical_name": result.medical_name,
        "severity": result.severity,
        "description": result.description,
        "recommendation": result.recommendation,
        "confidence_percent": confidence_percent,
        "affected_area": result.affected_area,
        "timestamp": entry.timestamp.isoformat(),
        "accuracy": accuracy["label"],
        "urgent": urgent,
        "message": (
            f"Analysis complete. Detected {result.condition} with {confidence_percent}% confidence. "
            f"{result.recommendation}"
        ),
    }


def present_ingredients(results: List[IngredientResult], summary: IngredientSummary, detailed: bool) -> Dict[str, Any]:
    counts = {
        "safe": summary.safe_count,
        "caution": summary.caution_count,
        "harmful": summary.harmful_count,
    }
    if not detailed:
        return {
            "mode": "simple",
            "overall_safety": summary.overall_safety,
            "message": summary.summary,
            "counts": counts,
        }

    return {
        "mode": "detailed",
        "overall_safety": summary.overall_safety,
        "counts": counts,
        "ingredients": [r.model_dump() for r in results],
        "message": (
            f"Ingredient analysis complete. Found {summary.safe_count} safe ingredients, "
            f"{summary.caution_count} ingredients needing caution, and "
            f"{summary.harmful_count} potentially harmful ingredients."
        ),
    }
