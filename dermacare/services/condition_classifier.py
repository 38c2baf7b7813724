import logging
from typing import Dict, List, Optional, Tuple
from dermacare.models import FeatureVector, AnalysisResult
from dermacare.dermatology_data import SKIN_CONDITIONS, HEALTHY_CONDITION, INFLAMMATORY_CONDITIONS
from dermacare.services.feature_synthesizer import synthesize_features
from dermacare.services.profile_matcher import calculate_profile_match
from dermacare.services.result_interpreter import result_interpreter

logger = logging.getLogger(__name__)


class SkinConditionClassifier:
    """
    Deterministic, rule-based skin condition classifier.

    Pipeline: image identifier -> feature vector -> condition key -> (confidence, area).
    The decision tree is a priority cascade; the first stage that matches wins:
    1. Serious-condition screen (melanoma, carcinoma, severe infection).
    2. Strong statistical match (clear winner among profile scores).
    3. Inflammatory / non-inflammatory rule sequences.
    4. Fallback to the best match or healthy skin.
    """

    def __init__(self, conditions=SKIN_CONDITIONS):
        self.conditions = conditions

    def score_conditions(self, features: FeatureVector) -> Dict[str, float]:
        return {
            key: calculate_profile_match(features, record.diagnostic_profile)
            for key, record in self.conditions.items()
        }

    def classify_features(self, features: FeatureVector) -> str:
        """Returns exactly one condition key from the table. Never fails."""
        scores = self.score_conditions(features)

        urgent = self._screen_serious(features, scores)
        if urgent:
            return urgent

        # Stable sort: ties keep table order
        ranked: List[Tuple[str, float]] = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
        first_key, first_score = ranked[0] if ranked else ("", 0.0)
        second_score = ranked[1][1] if len(ranked) > 1 else 0.0

        if first_score > 0.70 and (first_score - second_score) > 0.15:
            return first_key

        if features.inflammation > 0.55:
            branch_key = self._inflammatory_branch(features, scores)
        else:
            branch_key = self._non_inflammatory_branch(features, scores)
        if branch_key:
            return branch_key

        if first_score > 0.40:
            return first_key

        f = features
        if f.inflammation < 0.30 and f.texture < 0.35 and f.uniformity > 0.60 and f.redness < 0.40:
            return HEALTHY_CONDITION

        return first_key or HEALTHY_CONDITION

    def _screen_serious(self, f: FeatureVector, scores: Dict[str, float]) -> Optional[str]:
        # ABCDE-style melanoma suspicion
        melanoma_suspicion = (
            f.asymmetry * 0.30 +
            f.border * 0.25 +
            f.color_variation * 0.25 +
            (1 - f.uniformity) * 0.20
        )
        if melanoma_suspicion > 0.70 and f.asymmetry > 0.70:
            if scores.get("melanoma_suspected", 0.0) > 0.35:
                return "melanoma_suspected"

        carcinoma_suspicion = f.asymmetry * 0.40 + f.texture * 0.35 + f.border * 0.25
        if carcinoma_suspicion > 0.65:
            # Scaly/crusted lesions point to SCC before BCC
            if f.texture > 0.70 and scores.get("squamous_cell_carcinoma", 0.0) > 0.40:
                return "squamous_cell_carcinoma"
            if f.texture > 0.55 and f.asymmetry > 0.65 and scores.get("basal_cell_carcinoma", 0.0) > 0.40:
                return "basal_cell_carcinoma"

        if f.inflammation > 0.80 and f.redness > 0.75:
            if scores.get("severe_cellulitis", 0.0) > 0.45:
                return "severe_cellulitis"

        return None

    def _inflammatory_branch(self, f: FeatureVector, scores: Dict[str, float]) -> Optional[str]:
        rules = [
            ("rosacea", 0.45,
             f.redness > 0.70 and f.inflammation > 0.60 and f.texture < 0.65 and f.uniformity < 0.60),
            ("inflammatory_acne", 0.50,
             f.inflammation > 0.60 and f.texture > 0.45 and f.redness > 0.50),
            ("atopic_dermatitis", 0.50,
             f.inflammation > 0.65 and f.texture > 0.50 and f.uniformity < 0.45),
            ("contact_dermatitis", 0.45,
             f.inflammation > 0.60 and f.border > 0.50 and f.asymmetry > 0.45),
            ("psoriasis_vulgaris", 0.50,
             f.texture > 0.70 and f.inflammation > 0.50 and f.uniformity < 0.55),
            ("seborrheic_dermatitis", 0.45,
             f.inflammation > 0.45 and f.texture > 0.50 and f.redness > 0.45),
        ]
        matched = self._first_rule(rules, scores)
        if matched:
            return matched

        best_key, best_score = "", 0.0
        for key in INFLAMMATORY_CONDITIONS:
            if scores.get(key, 0.0) > best_score:
                best_key, best_score = key, scores[key]
        if best_key and best_score > 0.35:
            return best_key
        return None

    def _non_inflammatory_branch(self, f: FeatureVector, scores: Dict[str, float]) -> Optional[str]:
        rules = [
            ("keratosis_pilaris", 0.50,
             f.texture > 0.65 and f.inflammation < 0.45 and f.uniformity < 0.60),
            ("comedonal_acne", 0.50,
             0.40 < f.texture < 0.70 and f.inflammation < 0.40 and f.redness < 0.45),
            ("milia", 0.45,
             f.texture < 0.50 and f.inflammation < 0.20 and f.uniformity > 0.60),
            ("sebaceous_hyperplasia", 0.45,
             0.35 < f.texture < 0.55 and f.inflammation < 0.25 and f.redness < 0.35),
        ]
        return self._first_rule(rules, scores)

    def _first_rule(self, rules, scores: Dict[str, float]) -> Optional[str]:
        for key, min_score, features_match in rules:
            if features_match and scores.get(key, 0.0) > min_score:
                return key
        return None

    def classify(self, image_identifier: str) -> AnalysisResult:
        """Pure function of the identifier: same string, same result."""
        features = synthesize_features(image_identifier)
        key = self.classify_features(features)
        record = self.conditions[key]

        match_score = calculate_profile_match(features, record.diagnostic_profile)
        confidence = result_interpreter.calculate_confidence(features, record, match_score)
        affected_area = result_interpreter.calculate_affected_area(features, record)

        logger.info(f"Classified as {key} (match {match_score:.2f}, confidence {confidence:.2f})")

        return AnalysisResult(
            condition_key=key,
            condition=record.condition,
            medical_name=record.medical_name,
            severity=record.severity,
            confidence=confidence,
            description=record.description,
            recommendation=record.recommendation,
            affected_area=affected_area,
        )


# Global instance
skin_condition_classifier = SkinConditionClassifier()
