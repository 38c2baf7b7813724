from typing import Mapping
from dermacare.models import FeatureVector, DiagnosticRange
from dermacare.config import FEATURE_WEIGHTS, IN_RANGE_MAX_PENALTY, NEAR_MISS_SCORES, FAR_MISS_BASE


def _feature_score(value: float, rng: DiagnosticRange) -> float:
    if rng.min <= value <= rng.max:
        # Centered values score 1.0, values on the edge lose IN_RANGE_MAX_PENALTY
        center = (rng.min + rng.max) / 2
        half_range = (rng.max - rng.min) / 2
        normalized_distance = abs(value - center) / half_range if half_range > 0 else 0
        return 1.0 - normalized_distance * IN_RANGE_MAX_PENALTY

    distance = rng.min - value if value < rng.min else value - rng.max
    for limit, score in NEAR_MISS_SCORES:
        if distance < limit:
            return score
    return max(0.0, FAR_MISS_BASE - distance)


def calculate_profile_match(features: FeatureVector, profile: Mapping[str, DiagnosticRange]) -> float:
    """
    Weighted goodness-of-fit of a feature vector against a diagnostic profile, in [0, 1].
    Only the clinically weighted features are scored; features absent from the
    profile are skipped rather than penalized.
    """
    total_score = 0.0
    total_weight = 0.0

    for feature, weight in FEATURE_WEIGHTS.items():
        rng = profile.get(feature)
        if rng is None:
            continue
        total_score += _feature_score(getattr(features, feature), rng) * weight
        total_weight += weight

    return total_score / total_weight if total_weight > 0 else 0.0


def validate_feature_consistency(features: FeatureVector) -> bool:
    """Rejects clinically implausible combinations. Only used as a confidence penalty trigger."""
    # High inflammation comes with redness
    if features.inflammation > 0.75 and features.redness < 0.30:
        return False
    # Very uniform skin is not heavily textured
    if features.uniformity > 0.75 and features.texture > 0.70:
        return False
    # Strong asymmetry means lower uniformity
    if features.asymmetry > 0.75 and features.uniformity > 0.60:
        return False
    return True
