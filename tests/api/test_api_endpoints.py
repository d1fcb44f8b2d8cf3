"""
API endpoint tests for the Email Writer service.

The Gemini client is mocked and the credential store lives in memory,
so no network or disk access happens.

Run with:
    pytest tests/api/test_api_endpoints.py -v
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_credentials, get_gemini_client, get_generation_session
from generation.core.exceptions import GenerationInProgressError
from generation.core.orchestrator import GenerationOrchestrator
from generation.core.session import GenerationSession
from generation.steps.ai_client.main import GeminiClient
from main import app


AI_EMAIL = "Subject: Thanks!\n\nHi John,\n\nThank you for the watch.\n\nBest,\nSiva"

FORM = {
    "purpose": "thank_you",
    "tone": "casual",
    "recipient": "John Doe",
    "sender": "Sivasankari M",
    "subject": "Thank you for the birthday gift",
    "context": "the beautiful silver watch you gave me",
    "max_length": 150,
    "ai_preference": "auto",
}


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def gemini():
    client = Mock(spec=GeminiClient)
    client.request_completion = AsyncMock(return_value=AI_EMAIL)
    client.probe_connection = AsyncMock(return_value=True)
    return client


@pytest.fixture
def session(gemini, memory_credentials):
    return GenerationSession(GenerationOrchestrator(gemini, memory_credentials))


@pytest.fixture
def client(gemini, memory_credentials, session):
    """TestClient with all service dependencies overridden."""
    app.dependency_overrides[get_credentials] = lambda: memory_credentials
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    app.dependency_overrides[get_generation_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# HEALTH / ROOT
# ============================================================================

class TestHealthEndpoint:
    """Tests for GET /health and GET /"""

    def test_health_template_only(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["ai_configured"] is False
        assert data["mode"] == "template-only"

    def test_health_with_key(self, client, memory_credentials):
        memory_credentials.save("test-key")

        data = client.get("/health").json()

        assert data["ai_configured"] is True
        assert data["mode"] == "ai"

    def test_root(self, client):
        data = client.get("/").json()

        assert data["name"] == "Email Writer API"
        assert data["docs"] == "/docs"


# ============================================================================
# EMAIL ENDPOINTS
# ============================================================================

class TestOptionsEndpoint:
    """Tests for GET /api/email/options"""

    def test_options(self, client):
        response = client.get("/api/email/options")

        assert response.status_code == 200
        data = response.json()
        assert {"value": "meeting_request", "label": "Meeting Request"} in data["purposes"]
        assert [t["value"] for t in data["tones"]] == ["casual", "formal", "business"]
        assert [p["value"] for p in data["ai_preferences"]] == ["auto", "gemini", "template"]
        assert (data["min_length"], data["max_length"], data["default_length"]) == (50, 300, 150)


class TestGenerateEndpoint:
    """Tests for POST /api/email/generate"""

    def test_generate_without_key_uses_template(self, client, gemini):
        response = client.post("/api/email/generate", json=FORM)

        assert response.status_code == 200
        data = response.json()
        assert data["provenance"] == "template"
        assert data["subject"] == "Thank you for the birthday gift"
        assert data["content"].startswith("Subject: Thank you for the birthday gift\n\nHi John Doe,")
        assert data["content"].endswith("Best regards,\nSivasankari M")
        assert data["notice"] is None
        gemini.request_completion.assert_not_awaited()

    def test_generate_with_key_uses_gemini(self, client, gemini, memory_credentials):
        memory_credentials.save("test-key")

        data = client.post("/api/email/generate", json=FORM).json()

        assert data["provenance"] == "ai"
        assert data["subject"] == "Thanks!"
        assert data["body"] == "Hi John,\n\nThank you for the watch.\n\nBest,\nSiva"
        gemini.request_completion.assert_awaited_once()

    def test_generate_gemini_preference_without_key_has_notice(self, client):
        data = client.post("/api/email/generate", json={**FORM, "ai_preference": "gemini"}).json()

        assert data["provenance"] == "template"
        assert "API key" in data["notice"]

    def test_generate_defaults(self, client):
        response = client.post("/api/email/generate", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["subject"] == "Thank You"
        assert data["body"].startswith("Hi there,")
        assert data["body"].endswith("Best regards,\nYour Name")

    @pytest.mark.parametrize("max_length", [49, 301])
    def test_generate_rejects_out_of_range_length(self, client, max_length):
        response = client.post("/api/email/generate", json={**FORM, "max_length": max_length})

        assert response.status_code == 422

    def test_generate_rejects_unknown_preference(self, client):
        response = client.post("/api/email/generate", json={**FORM, "ai_preference": "openai"})

        assert response.status_code == 422

    def test_generate_while_busy_returns_409(self, client):
        busy = Mock(spec=GenerationSession)
        busy.submit = AsyncMock(side_effect=GenerationInProgressError())
        app.dependency_overrides[get_generation_session] = lambda: busy

        response = client.post("/api/email/generate", json=FORM)

        assert response.status_code == 409


class TestCurrentEmailEndpoint:
    """Tests for GET/DELETE /api/email/current"""

    def test_current_before_generation(self, client):
        assert client.get("/api/email/current").status_code == 404

    def test_current_after_generation(self, client):
        generated = client.post("/api/email/generate", json=FORM).json()

        response = client.get("/api/email/current")

        assert response.status_code == 200
        assert response.json() == generated

    def test_clear_current(self, client):
        client.post("/api/email/generate", json=FORM)

        response = client.delete("/api/email/current")

        assert response.status_code == 204
        assert client.get("/api/email/current").status_code == 404


# ============================================================================
# CREDENTIAL ENDPOINTS
# ============================================================================

class TestCredentialEndpoints:
    """Tests for /api/credentials"""

    def test_status_without_key(self, client, gemini):
        response = client.get("/api/credentials/status")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "Google Gemini"
        assert data["configured"] is False
        assert data["source"] is None
        assert data["setup_url"] == "https://makersuite.google.com/app/apikey"
        gemini.probe_connection.assert_awaited_once_with(None)

    def test_status_without_probe(self, client, gemini, memory_credentials):
        memory_credentials.save("test-key")

        data = client.get("/api/credentials/status", params={"probe": "false"}).json()

        assert data["configured"] is True
        assert data["connected"] is None
        gemini.probe_connection.assert_not_awaited()

    def test_save_key(self, client, gemini, memory_credentials):
        response = client.put("/api/credentials", json={"api_key": "  new-key  "})

        assert response.status_code == 200
        data = response.json()
        assert data["configured"] is True
        assert data["source"] == "stored"
        assert data["connected"] is True
        assert memory_credentials.load() == "new-key"
        gemini.probe_connection.assert_awaited_once_with("new-key")

    def test_save_key_reports_failed_probe(self, client, gemini):
        gemini.probe_connection.return_value = False

        data = client.put("/api/credentials", json={"api_key": "bad-key"}).json()

        assert data["configured"] is True
        assert data["connected"] is False

    def test_save_blank_key(self, client, memory_credentials):
        assert client.put("/api/credentials", json={"api_key": ""}).status_code == 422
        assert client.put("/api/credentials", json={"api_key": "   "}).status_code == 400
        assert memory_credentials.load() is None

    def test_remove_key(self, client, memory_credentials):
        memory_credentials.save("test-key")

        response = client.delete("/api/credentials")

        assert response.status_code == 200
        assert response.json()["configured"] is False
        assert memory_credentials.load() is None
