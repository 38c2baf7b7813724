import io
from PIL import Image

def _png_bytes(color="blue"):
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), color=color).save(buf, format="PNG")
    return buf.getvalue()

def test_health_check(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["storage_available"] is True
    assert data["conditions_loaded"] == 15

def test_first_request_issues_session_cookie(client):
    response = client.get("/api/health")
    assert "session_id" in response.cookies

def test_list_conditions(client):
    response = client.get("/api/conditions")
    assert response.status_code == 200
    keys = [c["key"] for c in response.json()]
    assert keys[0] == "healthy_skin"
    assert "melanoma_suspected" in keys

def test_condition_detail_and_care_plan(client):
    response = client.get("/api/conditions/inflammatory_acne")
    assert response.status_code == 200
    data = response.json()
    assert data["severity"] == "medium"
    assert len(data["otc_treatments"]) > 0

def test_unknown_condition_is_404(client):
    assert client.get("/api/conditions/not_a_condition").status_code == 404

def test_scan_is_deterministic_and_recorded(client):
    client.cookies.set("session_id", "api-scan-session")
    client.delete("/api/session")

    first = client.post("/api/scans", json={"image_uri": "file:///tmp/IMG_0001.jpg", "notes": "left cheek"})
    second = client.post("/api/scans", json={"image_uri": "file:///tmp/IMG_0001.jpg"})
    assert first.status_code == 200
    assert first.json()["entry"]["result"] == second.json()["entry"]["result"]
    assert first.json()["presentation"]["mode"] == "simple"

    history = client.get("/api/history").json()
    assert len(history) == 2
    # Newest first
    assert history[0]["id"] == second.json()["entry"]["id"]
    assert history[1]["notes"] == "left cheek"

def test_scan_requires_image_uri(client):
    assert client.post("/api/scans", json={}).status_code == 422

def test_upload_scan(client):
    client.cookies.set("session_id", "api-upload-session")
    files = {"file": ("skin.png", _png_bytes(), "image/png")}
    first = client.post("/api/scans/upload", files=files)
    assert first.status_code == 200
    assert first.json()["entry"]["image_uri"].startswith("upload://")

    again = client.post("/api/scans/upload", files={"file": ("renamed.png", _png_bytes(), "image/png")})
    assert again.json()["entry"]["image_uri"] == first.json()["entry"]["image_uri"]
    assert again.json()["entry"]["result"] == first.json()["entry"]["result"]

def test_upload_rejects_non_image(client):
    client.cookies.set("session_id", "api-upload-session")
    files = {"file": ("notes.txt", b"definitely not an image", "text/plain")}
    assert client.post("/api/scans/upload", files=files).status_code == 400

def test_detailed_mode_changes_presentation(client):
    client.cookies.set("session_id", "api-mode-session")
    client.delete("/api/session")

    toggled = client.post("/api/profile/mode")
    assert toggled.json()["is_detailed_mode"] is True

    scan = client.post("/api/scans", json={"image_uri": "file:///tmp/IMG_0002.jpg"})
    assert scan.json()["presentation"]["mode"] == "detailed"
    assert "confidence_percent" in scan.json()["presentation"]

def test_ingredient_analysis(client):
    response = client.post("/api/ingredients/analyze", json={"text": "Aqua, Sodium Lauryl Sulfate, Parabens, Fragrance"})
    assert response.status_code == 200
    data = response.json()
    assert [r["severity"] for r in data["results"]] == ["safe", "harmful", "caution", "caution"]
    assert data["summary"]["overall_safety"] == "harmful"

def test_blank_ingredient_text_is_rejected(client):
    assert client.post("/api/ingredients/analyze", json={"text": "   "}).status_code == 400

def test_profile_lifecycle(client):
    client.cookies.set("session_id", "api-profile-session")
    client.delete("/api/session")

    state = client.get("/api/profile").json()
    assert state["user_profile"] is None
    assert state["is_first_time"] is True

    profile = {"id": "u1", "name": "Alex", "skin_type": "dry", "allergies": []}
    assert client.put("/api/profile", json=profile).json()["user_profile"]["skin_type"] == "dry"
    assert client.put("/api/profile/first-time", json={"is_first_time": False}).json()["is_first_time"] is False
    assert client.delete("/api/profile").json()["user_profile"] is None

def test_invalid_skin_type_is_rejected(client):
    profile = {"id": "u1", "name": "Alex", "skin_type": "scaly"}
    assert client.put("/api/profile", json=profile).status_code == 422

def test_routine_for_profile(client):
    client.cookies.set("session_id", "api-routine-session")
    client.delete("/api/session")
    client.put("/api/profile", json={"id": "u1", "name": "Alex", "skin_type": "oily"})

    evening = client.get("/api/routine", params={"time": "evening", "completed": ["1"]}).json()
    assert [s["title"] for s in evening["steps"]] == ["Gentle Cleanser", "Moisturizer", "Salicylic Acid (BHA)"]
    assert evening["completed"] == 1
    assert evening["total"] == 3

def test_progress_endpoint(client):
    client.cookies.set("session_id", "api-progress-session")
    client.delete("/api/session")
    client.post("/api/scans", json={"image_uri": "file:///tmp/IMG_0003.jpg"})

    report = client.get("/api/history/progress").json()
    assert len(report["months"]) == 1
    assert report["months"][0]["total"] == 1
