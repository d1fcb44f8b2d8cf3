"""Shared FastAPI dependencies for the generation service."""

from generation import create_generation_session
from generation.core.session import GenerationSession
from generation.steps.ai_client.main import GeminiClient
from services.credential_store import CredentialStore, get_credential_store


# Global singleton instances
_gemini_client: GeminiClient | None = None
_generation_session: GenerationSession | None = None


def get_credentials() -> CredentialStore:
    """Credential store holding the Gemini API key."""
    return get_credential_store()


def get_gemini_client() -> GeminiClient:
    """Get or create the Gemini client singleton."""
    global _gemini_client

    if _gemini_client is None:
        _gemini_client = GeminiClient()

    return _gemini_client


def get_generation_session() -> GenerationSession:
    """
    Get or create the generation session singleton.

    The session owns the current-email slot, so there is exactly one per
    process.
    """
    global _generation_session

    if _generation_session is None:
        _generation_session = create_generation_session(
            credentials=get_credentials(),
            ai_client=get_gemini_client(),
        )

    return _generation_session
