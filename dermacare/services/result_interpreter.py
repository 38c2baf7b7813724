import math
import logging
from typing import Dict
from dermacare.models import FeatureVector, ConditionRecord
from dermacare.services.profile_matcher import validate_feature_consistency
from dermacare.config import (
    CONFIDENCE_BOUNDS,
    INCONSISTENCY_PENALTY,
    ACCURACY_CLASSES,
    AFFECTED_AREA_BOUNDS,
    SERIOUS_AREA_CAP,
    MODERATE_SPREAD_INFLAMMATION,
    MODERATE_SPREAD_FACTOR,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Rounds .5 away from zero for positive values (not banker's rounding)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class ResultInterpreter:
    """
    Turns a chosen condition and its feature vector into user-facing numbers.

    Responsibilities:
    1. Score synthetic image quality (lighting, contrast, focus, clarity).
    2. Combine base confidence, match quality and image quality into a bounded confidence.
    3. Estimate the affected-area percentage from severity features.
    4. Map confidence to a qualitative accuracy level for the UI.
    """

    def image_quality(self, features: FeatureVector) -> float:
        lighting = min(features.brightness, 1 - features.brightness) * 2  # optimal at 0.5
        clarity = min(1, features.brightness * 2) if features.brightness > 0.15 else 0.3
        return (
            lighting * 0.30 +
            features.contrast * 0.25 +
            features.edge_sharpness * 0.25 +
            clarity * 0.20
        )

    def disease_modifier(self, record: ConditionRecord, match_score: float) -> float:
        """Later rules override earlier ones."""
        modifier = 1.0
        if record.severity == "high":
            modifier = 0.80
        if record.prevalence == "very_common" and match_score > 0.70:
            modifier = 1.15
        if record.prevalence == "rare" and match_score < 0.60:
            modifier = 0.75
        return modifier

    def calculate_confidence(self, features: FeatureVector, record: ConditionRecord, match_score: float) -> float:
        match_confidence = min(1.0, match_score * 1.2)

        confidence = (
            record.base_confidence * 0.40 +
            match_confidence * 0.35 +
            self.image_quality(features) * 0.25
        ) * self.disease_modifier(record, match_score)

        if not validate_feature_consistency(features):
            confidence *= INCONSISTENCY_PENALTY

        low, high = CONFIDENCE_BOUNDS
        confidence = max(low, min(high, confidence))
        return round_half_up(confidence, 2)

    def calculate_affected_area(self, features: FeatureVector, record: ConditionRecord) -> int:
        severity_factor = (
            features.redness * 0.30 +
            features.texture * 0.25 +
            features.inflammation * 0.30 +
            features.distribution * 0.15
        )
        area = record.affected_area * (0.4 + severity_factor * 1.2)

        if record.category == "serious":
            area = min(area, SERIOUS_AREA_CAP)
        if record.category == "moderate" and features.inflammation > MODERATE_SPREAD_INFLAMMATION:
            area *= MODERATE_SPREAD_FACTOR

        low, high = AFFECTED_AREA_BOUNDS
        return int(round_half_up(max(low, min(high, area))))

    def get_accuracy_level(self, confidence: float) -> Dict[str, str]:
        """
        Maps confidence to a qualitative accuracy level using thresholds from config.
        """
        c = round(confidence, 4)

        for cls in ACCURACY_CLASSES:
            if c >= cls["min"]:
                return {
                    "label": cls["label"],
                    "color_hint": cls.get("color_hint", "")
                }

        last_cls = ACCURACY_CLASSES[-1]
        return {
            "label": last_cls["label"],
            "color_hint": last_cls.get("color_hint", "")
        }


# Global singleton instance
result_interpreter = ResultInterpreter()
