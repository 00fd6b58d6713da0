import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from conftest import BELIEF_ANSWERS, GOAL_ANSWERS
from manifest_mastery.main import app

client = TestClient(app)


@pytest.fixture
def session_id():
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def advance(session_id):
    return client.post(f"/api/sessions/{session_id}/advance").json()


def upload(session_id, goal, data, filename="board.png", content_type="image/png"):
    return client.post(
        f"/api/sessions/{session_id}/vision/{goal}",
        files={"file": (filename, data, content_type)},
    )


def test_root_and_status():
    assert client.get("/").json()["message"] == "Manifest Mastery"
    status = client.get("/status").json()
    assert status["status"] == "running"


def test_catalog():
    catalog = client.get("/api/catalog").json()
    assert "Get a promotion" in catalog["career_goals"]
    assert catalog["max_goals"] == 3
    assert catalog["goal_prompts"]["timeline"]["question"] == "When do you want to achieve this goal?"
    assert catalog["steps"][0]["id"] == "welcome"


def test_new_session_starts_at_welcome(session_id):
    state = client.get(f"/api/sessions/{session_id}").json()
    assert state["step"] == "welcome"
    assert state["error"] is None
    assert state["selected_goals"] == []


def test_unknown_session():
    assert client.get("/api/sessions/nope").status_code == 404
    assert client.post("/api/sessions/nope/advance").status_code == 404


def test_advance_blocked_on_goals(session_id):
    advance(session_id)
    advance(session_id)

    body = advance(session_id)

    assert body["ok"] is False
    assert body["reason"] == "Please select at least one goal."
    assert body["state"]["step"] == "goals"
    assert body["state"]["error"] == "Please select at least one goal."


def test_validation_endpoint_does_not_move(session_id):
    advance(session_id)
    advance(session_id)

    body = client.get(f"/api/sessions/{session_id}/validation").json()

    assert body == {"step": "goals", "ok": False, "reason": "Please select at least one goal."}
    assert client.get(f"/api/sessions/{session_id}").json()["error"] is None


def test_goal_toggle_and_errors(session_id):
    url = f"/api/sessions/{session_id}/goals"
    state = client.post(url, json={"goal": "Get a promotion"}).json()
    assert state["selected_goals"] == ["Get a promotion"]
    assert state["goal_details"][0]["goal"] == "Get a promotion"

    assert client.post(url, json={"goal": "Walk on the moon"}).status_code == 422
    assert client.put(f"{url}/3", json={"field": "timeline", "value": "x"}).status_code == 409
    assert client.put(f"{url}/0", json={"field": "mood", "value": "x"}).status_code == 422


def test_upload_errors(session_id):
    client.post(f"/api/sessions/{session_id}/goals", json={"goal": "Start a business"})

    assert upload(session_id, "Start a business", b"not an image").status_code == 400
    assert client.post(f"/api/sessions/{session_id}/vision/Start a business").status_code == 400

    buffer = io.BytesIO()
    Image.new("RGB", (8, 8)).save(buffer, "PNG")
    assert upload(session_id, "Switch careers", buffer.getvalue()).status_code == 409


def test_full_journey(session_id, png_bytes):
    advance(session_id)
    advance(session_id)

    for goal in ["Get a promotion", "Switch careers"]:
        client.post(f"/api/sessions/{session_id}/goals", json={"goal": goal})
    for index in range(2):
        for field, value in GOAL_ANSWERS.items():
            response = client.put(
                f"/api/sessions/{session_id}/goals/{index}",
                json={"field": field, "value": value},
            )
            assert response.status_code == 200

    assert advance(session_id)["state"]["step"] == "beliefs"

    for field, value in BELIEF_ANSWERS.items():
        client.put(f"/api/sessions/{session_id}/belief", json={"field": field, "value": value})

    state = advance(session_id)["state"]
    assert state["step"] == "affirmations"
    assert state["affirmations"][0] == "I am confident in my ability to get a promotion."

    assert advance(session_id)["state"]["step"] == "vision_board"
    for goal in ["Get a promotion", "Switch careers"]:
        response = upload(session_id, goal, png_bytes)
        assert response.status_code == 200
        assert response.json()["vision_board"][goal].startswith("data:image/png;base64,")

    state = advance(session_id)["state"]
    assert state["step"] == "script"
    assert "committed to Get a promotion, Switch careers" in state["manifestation_script"]
    assert state["progress"] == {"position": 5, "total": 6, "percent": 80}

    assert advance(session_id)["state"]["step"] == "overview"
    overview = client.get(f"/api/sessions/{session_id}/overview").json()
    assert [card["goal"] for card in overview["cards"]] == ["Get a promotion", "Switch careers"]

    assert advance(session_id)["state"]["step"] == "plan"
    plan = client.get(f"/api/sessions/{session_id}/plan").json()
    assert plan["total_minutes"] == 30
    assert len(plan["activities"][-1]["images"]) == 2

    response = client.get(f"/api/sessions/{session_id}/vision.png")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert Image.open(io.BytesIO(response.content)).format == "PNG"


def test_generate_endpoints(session_id):
    client.post(f"/api/sessions/{session_id}/goals", json={"goal": "Get a promotion"})

    state = client.post(f"/api/sessions/{session_id}/affirmations").json()
    assert state["gratitude"] == ["I am grateful for the opportunity to get a promotion."]

    state = client.post(f"/api/sessions/{session_id}/script").json()
    assert "committed to Get a promotion" in state["manifestation_script"]


def test_retreat(session_id):
    advance(session_id)
    body = client.post(f"/api/sessions/{session_id}/retreat").json()
    assert body["ok"] is True
    assert body["state"]["step"] == "welcome"


def test_delete_session(session_id):
    assert client.delete(f"/api/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/sessions/{session_id}").status_code == 404


def test_upload_over_size_limit(session_id, png_bytes):
    from manifest_mastery.main import sessions

    client.post(f"/api/sessions/{session_id}/goals", json={"goal": "Start a business"})
    sessions.get(session_id).max_upload_bytes = len(png_bytes) - 1

    response = upload(session_id, "Start a business", png_bytes)

    assert response.status_code == 400
    assert "limit" in response.json()["detail"]
    state = client.get(f"/api/sessions/{session_id}").json()
    assert state["vision_board"] == {}
