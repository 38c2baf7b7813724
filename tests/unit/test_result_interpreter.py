import pytest
from dermacare.dermatology_data import SKIN_CONDITIONS
from dermacare.services.result_interpreter import result_interpreter, round_half_up

def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(3.5) == 4.0
    assert round_half_up(0.7349, 2) == 0.73

def test_image_quality_optimal(features):
    vector = features(brightness=0.5, contrast=1.0, edge_sharpness=1.0)
    assert result_interpreter.image_quality(vector) == pytest.approx(1.0)

def test_image_quality_dark_image(features):
    vector = features(brightness=0.1, contrast=0.25, edge_sharpness=0.3)
    # lighting 0.2, clarity falls back to 0.3
    expected = 0.2 * 0.30 + 0.25 * 0.25 + 0.3 * 0.25 + 0.3 * 0.20
    assert result_interpreter.image_quality(vector) == pytest.approx(expected)

def test_disease_modifier_later_rules_override():
    melanoma = SKIN_CONDITIONS["melanoma_suspected"]
    comedonal = SKIN_CONDITIONS["comedonal_acne"]
    healthy = SKIN_CONDITIONS["healthy_skin"]
    # high severity and rare with a weak match: the rarity rule wins
    assert result_interpreter.disease_modifier(melanoma, 0.5) == 0.75
    assert result_interpreter.disease_modifier(melanoma, 0.9) == 0.80
    assert result_interpreter.disease_modifier(comedonal, 0.8) == 1.15
    assert result_interpreter.disease_modifier(comedonal, 0.6) == 1.0
    assert result_interpreter.disease_modifier(healthy, 0.8) == 1.0

def test_confidence_formula(features):
    vector = features(brightness=0.5, contrast=0.6, edge_sharpness=0.6)
    record = SKIN_CONDITIONS["inflammatory_acne"]
    # 0.81*0.40 + 0.6*0.35 + 0.8*0.25 = 0.734
    assert result_interpreter.calculate_confidence(vector, record, 0.5) == 0.73

def test_confidence_upper_clamp(features):
    vector = features(brightness=0.5, contrast=1.0, edge_sharpness=1.0)
    assert result_interpreter.calculate_confidence(vector, SKIN_CONDITIONS["healthy_skin"], 1.0) == 0.93
    assert result_interpreter.calculate_confidence(vector, SKIN_CONDITIONS["comedonal_acne"], 0.8) == 0.93

def test_confidence_lower_clamp(features):
    vector = features(brightness=0.1, contrast=0.25, edge_sharpness=0.3)
    assert result_interpreter.calculate_confidence(vector, SKIN_CONDITIONS["severe_cellulitis"], 0.1) == 0.70

def test_inconsistency_penalty_applies_before_clamp(features):
    vector = features(brightness=0.5, contrast=1.0, edge_sharpness=1.0, inflammation=0.8, redness=0.2)
    # 0.968 * 0.85 = 0.8228
    assert result_interpreter.calculate_confidence(vector, SKIN_CONDITIONS["healthy_skin"], 1.0) == 0.82

def test_affected_area_moderate_spread(features):
    vector = features(redness=0.5, texture=0.5, inflammation=0.7, distribution=0.5)
    assert result_interpreter.calculate_affected_area(vector, SKIN_CONDITIONS["inflammatory_acne"]) == 28

def test_affected_area_serious_cap(features):
    assert result_interpreter.calculate_affected_area(features(), SKIN_CONDITIONS["severe_cellulitis"]) == 18

def test_affected_area_healthy_is_zero(features):
    assert result_interpreter.calculate_affected_area(features(redness=1.0), SKIN_CONDITIONS["healthy_skin"]) == 0

def test_affected_area_is_int_in_bounds(features):
    vector = features(redness=1.0, texture=1.0, inflammation=1.0, distribution=1.0)
    for record in SKIN_CONDITIONS.values():
        area = result_interpreter.calculate_affected_area(vector, record)
        assert isinstance(area, int)
        assert 0 <= area <= 60

@pytest.mark.parametrize("confidence,label,color", [
    (0.93, "High", "green"),
    (0.85, "High", "green"),
    (0.84, "Good", "blue"),
    (0.75, "Good", "blue"),
    (0.70, "Fair", "yellow"),
    (0.50, "Low", "red"),
])
def test_accuracy_levels(confidence, label, color):
    level = result_interpreter.get_accuracy_level(confidence)
    assert level["label"] == label
    assert level["color_hint"] == color
