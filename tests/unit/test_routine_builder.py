from dermacare.models import UserProfile
from dermacare.services.routine_builder import build_routine, steps_for_time, completion_stats

def test_base_routine_without_profile():
    steps = build_routine(None, detailed=False)
    assert [s.title for s in steps] == ["Gentle Cleanser", "Moisturizer", "Sunscreen SPF 30+"]
    assert steps[0].description == "Wash your face with gentle soap"

def test_detailed_mode_adds_antioxidant_and_clinical_wording():
    steps = build_routine(None, detailed=True)
    assert steps[-1].title == "Antioxidant Serum"
    assert steps[-1].importance == "optional"
    assert steps[0].description.startswith("Use a pH-balanced")

def test_skin_type_steps():
    oily = build_routine(UserProfile(id="1", name="A", skin_type="oily"), detailed=False)
    dry = build_routine(UserProfile(id="1", name="A", skin_type="dry"), detailed=False)
    sensitive = build_routine(UserProfile(id="1", name="A", skin_type="sensitive"), detailed=False)
    normal = build_routine(UserProfile(id="1", name="A", skin_type="normal"), detailed=False)

    assert oily[-1].title == "Salicylic Acid (BHA)" and oily[-1].time == "evening"
    assert dry[-1].title == "Hydrating Serum" and dry[-1].time == "both"
    assert sensitive[-1].title == "Soothing Treatment"
    assert len(normal) == 3

def test_filter_by_time():
    steps = build_routine(UserProfile(id="1", name="A", skin_type="oily"), detailed=True)
    morning = [s.title for s in steps_for_time(steps, "morning")]
    evening = [s.title for s in steps_for_time(steps, "evening")]
    assert morning == ["Gentle Cleanser", "Moisturizer", "Sunscreen SPF 30+", "Antioxidant Serum"]
    assert evening == ["Gentle Cleanser", "Moisturizer", "Salicylic Acid (BHA)"]

def test_completion_stats():
    steps = steps_for_time(build_routine(None, detailed=False, completed_ids=["1", "3"]), "morning")
    stats = completion_stats(steps)
    assert stats["completed"] == 2
    assert stats["total"] == 3
    assert round(stats["completion_percentage"]) == 67

def test_completion_stats_empty():
    assert completion_stats([])["completion_percentage"] == 0.0
