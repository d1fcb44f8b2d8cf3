"""
Test suite for GenerationOrchestrator

The Gemini client is mocked; the template engine is real.

Run with:
    pytest generation/tests/test_orchestrator.py -v
"""

from unittest.mock import AsyncMock, Mock

import pytest
import logfire

from generation.core.exceptions import (
    MalformedResponseError,
    MissingCredentialError,
    ProviderError,
)
from generation.core.orchestrator import CREDENTIAL_REQUIRED_NOTICE, GenerationOrchestrator
from generation.models.core import AIPreference, Provenance
from generation.steps.ai_client.main import GeminiClient
from generation.steps.template_engine.main import render


AI_EMAIL = (
    "**Subject:** Thanks for the watch!\n\n"
    "Hi John,   \n\n\n\nI love the silver watch.\n\n"
    "Best,\nSiva"
)


# ===================================================================
# FIXTURES
# ===================================================================

@pytest.fixture
def ai_client():
    """Mocked GeminiClient that returns AI_EMAIL."""
    client = Mock(spec=GeminiClient)
    client.request_completion = AsyncMock(return_value=AI_EMAIL)
    return client


@pytest.fixture
def credentials_with_key(memory_credentials):
    memory_credentials.save("test-key")
    return memory_credentials


# ===================================================================
# TESTS - AI path
# ===================================================================

@pytest.mark.asyncio
@pytest.mark.unit
@pytest.mark.parametrize("preference", [AIPreference.AUTO, AIPreference.GEMINI])
async def test_ai_preference_with_credential_uses_gemini(
    make_request, ai_client, credentials_with_key, preference
):
    orchestrator = GenerationOrchestrator(ai_client, credentials_with_key)
    request = make_request(ai_preference=preference)

    email = await orchestrator.generate(request)
    logfire.info("AI email", subject=email.subject, status=email.status)

    ai_client.request_completion.assert_awaited_once_with(request, "test-key")
    assert email.provenance is Provenance.AI
    assert email.notice is None
    assert email.subject == "Thanks for the watch!"
    assert email.body == "Hi John,\n\nI love the silver watch.\n\nBest,\nSiva"
    assert email.status.startswith("Generated with Google Gemini at ")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_ai_output_without_subject_uses_request_subject(make_request, ai_client, credentials_with_key):
    ai_client.request_completion.return_value = "Hi John,\n\nThanks again.\n\nSiva"
    orchestrator = GenerationOrchestrator(ai_client, credentials_with_key)

    email = await orchestrator.generate(make_request(subject=""))

    assert email.provenance is Provenance.AI
    assert email.subject == "Thank You"
    assert email.body == "Hi John,\n\nThanks again.\n\nSiva"


# ===================================================================
# TESTS - Template path
# ===================================================================

@pytest.mark.asyncio
@pytest.mark.unit
async def test_gemini_preference_without_credential_uses_template(make_request, ai_client, memory_credentials):
    """No network call is made and the user is told a key is required."""
    orchestrator = GenerationOrchestrator(ai_client, memory_credentials)
    request = make_request(ai_preference=AIPreference.GEMINI)

    email = await orchestrator.generate(request)

    ai_client.request_completion.assert_not_awaited()
    assert email.provenance is Provenance.TEMPLATE
    assert email.notice == CREDENTIAL_REQUIRED_NOTICE
    assert email.content == render(request)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_auto_preference_without_credential_is_silent(make_request, ai_client, memory_credentials):
    orchestrator = GenerationOrchestrator(ai_client, memory_credentials)

    email = await orchestrator.generate(make_request(ai_preference=AIPreference.AUTO))

    ai_client.request_completion.assert_not_awaited()
    assert email.provenance is Provenance.TEMPLATE
    assert email.notice is None


@pytest.mark.asyncio
@pytest.mark.unit
async def test_template_preference_ignores_credential(make_request, ai_client, credentials_with_key):
    orchestrator = GenerationOrchestrator(ai_client, credentials_with_key)
    request = make_request(ai_preference=AIPreference.TEMPLATE)

    email = await orchestrator.generate(request)

    ai_client.request_completion.assert_not_awaited()
    assert email.provenance is Provenance.TEMPLATE
    assert email.notice is None
    assert email.subject == "Thank you for the birthday gift"
    assert email.body.startswith("Hi John Doe,\n\nI wanted to take a moment")
    assert email.body.endswith("Best regards,\nSivasankari M")
    assert email.status.startswith("Generated with Template Engine at ")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_environment_fallback_credential_is_used(make_request, ai_client):
    from services.credential_store import CredentialStore, InMemoryKeyValueStore

    credentials = CredentialStore(InMemoryKeyValueStore(), fallback="env-key")
    orchestrator = GenerationOrchestrator(ai_client, credentials)

    email = await orchestrator.generate(make_request())

    ai_client.request_completion.assert_awaited_once()
    assert ai_client.request_completion.await_args.args[1] == "env-key"
    assert email.provenance is Provenance.AI


# ===================================================================
# TESTS - Fallback on Gemini failure
# ===================================================================

@pytest.mark.asyncio
@pytest.mark.unit
@pytest.mark.parametrize("error", [
    ProviderError("API key not valid", status_code=400),
    ProviderError("request timed out after 30.0 seconds"),
    MalformedResponseError("Invalid response from Gemini API"),
    MissingCredentialError(),
    RuntimeError("unexpected bug"),
])
async def test_gemini_failure_falls_back_to_template(make_request, ai_client, credentials_with_key, error):
    ai_client.request_completion.side_effect = error
    orchestrator = GenerationOrchestrator(ai_client, credentials_with_key)
    request = make_request()

    email = await orchestrator.generate(request)

    assert email.provenance is Provenance.TEMPLATE
    assert email.content == render(request)
    assert email.body.strip()
    assert email.notice is not None
    assert str(error) in email.notice
    assert "template engine" in email.notice


@pytest.mark.asyncio
@pytest.mark.unit
async def test_each_generation_is_fresh(make_request, ai_client, credentials_with_key):
    """A failed AI attempt after a successful one yields a pure template email."""
    orchestrator = GenerationOrchestrator(ai_client, credentials_with_key)

    first = await orchestrator.generate(make_request())
    ai_client.request_completion.side_effect = ProviderError("quota exceeded", status_code=429)
    second = await orchestrator.generate(make_request())

    assert first.provenance is Provenance.AI
    assert second.provenance is Provenance.TEMPLATE
    assert second.content == render(make_request())
    assert second.generated_at >= first.generated_at
