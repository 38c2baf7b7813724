from typing import Dict, Iterable, List, Optional
from dermacare.models import RoutineStep, UserProfile

# Each step carries both wordings; the mode picks one.
BASE_STEPS = [
    {
        "id": "1",
        "title": "Gentle Cleanser",
        "detailed": "Use a pH-balanced, non-comedogenic cleanser to remove impurities without disrupting skin barrier",
        "simple": "Wash your face with gentle soap",
        "time": "both",
        "icon": "cleaning-services",
        "importance": "essential",
    },
    {
        "id": "2",
        "title": "Moisturizer",
        "detailed": "Apply ceramide or hyaluronic acid-based moisturizer to maintain skin barrier hydration",
        "simple": "Put on face cream to keep skin soft",
        "time": "both",
        "icon": "opacity",
        "importance": "essential",
    },
    {
        "id": "3",
        "title": "Sunscreen SPF 30+",
        "detailed": "Apply broad-spectrum SPF 30+ sunscreen 15-30 minutes before sun exposure",
        "simple": "Use sunscreen to protect from sun damage",
        "time": "morning",
        "icon": "wb-sunny",
        "importance": "essential",
    },
]

SKIN_TYPE_STEPS = {
    "oily": {
        "id": "4",
        "title": "Salicylic Acid (BHA)",
        "detailed": "2% salicylic acid to reduce sebum production and prevent comedones",
        "simple": "Use BHA product to control oil and prevent breakouts",
        "time": "evening",
        "icon": "science",
        "importance": "recommended",
    },
    "dry": {
        "id": "4",
        "title": "Hydrating Serum",
        "detailed": "Hyaluronic acid or glycerin-based serum for enhanced hydration",
        "simple": "Apply hydrating serum for extra moisture",
        "time": "both",
        "icon": "water-drop",
        "importance": "recommended",
    },
    "sensitive": {
        "id": "4",
        "title": "Soothing Treatment",
        "detailed": "Niacinamide or centella asiatica for anti-inflammatory benefits",
        "simple": "Use gentle, soothing products for sensitive skin",
        "time": "evening",
        "icon": "healing",
        "importance": "recommended",
    },
}

# Detailed mode only
ADVANCED_STEP = {
    "id": "5",
    "title": "Antioxidant Serum",
    "detailed": "Vitamin C serum in morning or retinol in evening for anti-aging",
    "simple": "Vitamin C serum in morning or retinol in evening for anti-aging",
    "time": "morning",
    "icon": "auto-awesome",
    "importance": "optional",
}


def _to_step(template: Dict[str, str], detailed: bool, completed_ids: Iterable[str]) -> RoutineStep:
    return RoutineStep(
        id=template["id"],
        title=template["title"],
        description=template["detailed"] if detailed else template["simple"],
        time=template["time"],
        completed=template["id"] in completed_ids,
        icon=template["icon"],
        importance=template["importance"],
    )


def build_routine(profile: Optional[UserProfile], detailed: bool, completed_ids: Iterable[str] = ()) -> List[RoutineStep]:
    completed_ids = set(completed_ids)
    templates = list(BASE_STEPS)
    if profile is not None and profile.skin_type in SKIN_TYPE_STEPS:
        templates.append(SKIN_TYPE_STEPS[profile.skin_type])
    if detailed:
        templates.append(ADVANCED_STEP)
    return [_to_step(t, detailed, completed_ids) for t in templates]


def steps_for_time(steps: List[RoutineStep], time: str) -> List[RoutineStep]:
    return [step for step in steps if step.time == time or step.time == "both"]


def completion_stats(steps: List[RoutineStep]) -> Dict[str, float]:
    completed = sum(1 for step in steps if step.completed)
    total = len(steps)
    return {
        "completed": completed,
        "total": total,
        "completion_percentage": completed / total * 100 if total > 0 else 0.0,
    }
