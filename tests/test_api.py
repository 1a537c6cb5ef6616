"""
API tests for the Inquiry Interview endpoints.

Uses FastAPI's TestClient with a renderer whose collaborator is always
offline, so every question is worded from templates and no request
reaches Gemini.
"""

import pytest
from fastapi.testclient import TestClient

from inquiry_interview.api.app import app
from inquiry_interview.api.routes import get_engine, get_renderer
from inquiry_interview.app.renderer import QuestionRenderer


class OfflineWriter:
    """Collaborator that is never available."""

    async def generate(self, prompt, style_hint=""):
        raise ConnectionError("offline")


class TemplateRenderer(QuestionRenderer):
    """Renderer whose collaborator always fails."""

    def __init__(self):
        super().__init__(writer=OfflineWriter(), timeout_seconds=1.0)


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_renderer] = TemplateRenderer
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoint:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestClassifyEndpoint:

    def test_classify_sports(self, client, sports_activity):
        response = client.post("/api/classify", json={"activity_text": sports_activity})

        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "competitive_sports"
        assert data["scores"]["competitive_sports"] == 10
        assert data["keyword"] == "soccer"

    def test_classify_requires_text(self, client):
        response = client.post("/api/classify", json={})

        assert response.status_code == 422


class TestAnalyzeEndpoint:

    def test_analyze(self, client):
        response = client.post("/api/analyze", json={"response": "I came by train."})

        assert response.status_code == 200
        data = response.json()
        assert data["depth"] == "surface"
        assert data["elements"] == ["transport"]


class TestTurnEndpoint:

    def test_first_turn(self, client, sports_activity):
        response = client.post("/api/turn", json={"activity_text": sports_activity})

        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "competitive_sports"
        assert data["phase"] == "opening"
        assert data["question"]["id"] == "opening_1"
        assert data["question"]["source"] == "fallback"
        assert data["question"]["text"].endswith("?")

    def test_turn_advances_to_exploration(self, client, sports_activity):
        payload = {
            "activity_text": sports_activity,
            "transcript": [
                {"question_id": "opening_1", "response": "My name is Taro Yamada, candidate number 12."},
                {"question_id": "opening_2", "response": "I came by train."},
                {"question_id": "opening_3", "response": "It took about thirty minutes."},
            ],
            "phase": "opening",
            "depth": 2,
            "category": "competitive_sports",
            "last_question_text": "About how long did it take you to get here?",
        }

        response = client.post("/api/turn", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["advanced_to"] == "exploration"
        assert data["phase"] == "exploration"
        assert data["depth"] == 1
        assert data["question"]["id"] == "sports_1"
        assert "soccer" in data["question"]["text"]

    def test_joking_answer_repeats_question(self, client, sports_activity):
        payload = {
            "activity_text": sports_activity,
            "transcript": [
                {"question_id": "opening_1", "response": "My name is Taro Yamada."},
                {"question_id": "opening_2", "response": "I came by time machine."},
            ],
            "phase": "opening",
            "depth": 1,
            "category": "competitive_sports",
            "last_question_text": "How did you get here today?",
        }

        response = client.post("/api/turn", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["not_serious"] is True
        assert data["question"]["id"] == "opening_2"
        assert data["question"]["source"] == "reminder"
        assert "How did you get here today?" in data["question"]["text"]
        assert data["phase"] == "opening"

    def test_invalid_phase_is_rejected(self, client, sports_activity):
        response = client.post("/api/turn", json={"activity_text": sports_activity, "phase": "closing"})

        assert response.status_code == 422
