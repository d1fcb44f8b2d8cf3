"""
Generation factory function.

This module provides create_generation_session() which wires the Gemini
client, the credential store and the orchestrator together.
"""

from generation.core.session import GenerationSession


def create_generation_session(credentials=None, ai_client=None) -> GenerationSession:
    """
    Factory function to create a fully configured generation session.

    Args:
        credentials: CredentialStore (defaults to the service singleton)
        ai_client: GeminiClient (defaults to one built from settings)

    Returns:
        GenerationSession ready to accept requests

    Example:
        ```python
        from generation import create_generation_session
        from generation.models.core import EmailRequest

        session = create_generation_session()
        email = await session.submit(EmailRequest(purpose="follow_up", tone="formal"))
        print(email.provenance, email.subject)
        ```
    """
    # Import lazily to avoid circular dependencies at package import time
    from generation.core.orchestrator import GenerationOrchestrator
    from generation.steps.ai_client.main import GeminiClient
    from services.credential_store import get_credential_store

    orchestrator = GenerationOrchestrator(
        ai_client=ai_client or GeminiClient(),
        credentials=credentials or get_credential_store(),
    )
    return GenerationSession(orchestrator)


__all__ = ["create_generation_session"]
