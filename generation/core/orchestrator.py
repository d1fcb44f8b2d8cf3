"""
Generation orchestrator - chooses between Gemini and the template engine.

Decision rule:
- AI preferred (auto/gemini) and a key is available: ask Gemini, fall back
  to the template engine if the call fails
- Otherwise: template engine
"""

import time
from datetime import datetime, timezone
from typing import Optional

import logfire

from generation.core.exceptions import AIClientError
from generation.core.formatting import clean_email_formatting, extract_subject_line
from generation.models.core import AIPreference, EmailRequest, GeneratedEmail, Provenance
from generation.steps.ai_client.main import GeminiClient
from generation.steps.template_engine.main import build_subject, render
from services.credential_store import CredentialStore


ENGINE_NAMES = {
    Provenance.AI: "Google Gemini",
    Provenance.TEMPLATE: "Template Engine",
}

CREDENTIAL_REQUIRED_NOTICE = (
    "Google Gemini API key required. Save an API key to use AI generation; "
    "this email was written by the template engine."
)


def fallback_notice(error: Exception) -> str:
    """User-visible notice after a failed Gemini call."""
    return f"Google Gemini was unavailable ({error}). This email was written by the template engine."


class GenerationOrchestrator:
    """
    Produces a GeneratedEmail for every request.

    generate() never raises: Gemini failures of any kind are downgraded to
    a template email with a notice.
    """

    def __init__(self, ai_client: GeminiClient, credentials: CredentialStore):
        """
        Args:
            ai_client: Gemini client used when AI generation is preferred
            credentials: Store consulted for the Gemini API key on every call
        """
        self.ai_client = ai_client
        self.credentials = credentials

    async def generate(self, request: EmailRequest) -> GeneratedEmail:
        """
        Generate an email for request.

        Args:
            request: Form fields for this generation

        Returns:
            A fresh GeneratedEmail (provenance 'ai' or 'template')
        """
        start_time = time.perf_counter()

        with logfire.span(
            "generation.generate",
            purpose=request.purpose,
            tone=request.tone,
            ai_preference=request.ai_preference.value,
            max_length=request.max_length,
        ):
            notice: Optional[str] = None
            credential = self.credentials.load() if request.ai_preference.wants_ai else None

            if request.ai_preference.wants_ai and credential:
                try:
                    text = await self.ai_client.request_completion(request, credential)
                    email = self._build(request, text, Provenance.AI)
                    logfire.info(
                        "Email generated with Gemini",
                        duration=time.perf_counter() - start_time,
                        word_count=len(email.body.split()),
                    )
                    return email
                except AIClientError as e:
                    logfire.warning(
                        "Gemini generation failed, falling back to template",
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    notice = fallback_notice(e)
                except Exception as e:
                    logfire.error(
                        "Unexpected error during Gemini generation, falling back to template",
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    notice = fallback_notice(e)

            elif request.ai_preference is AIPreference.GEMINI:
                logfire.info("Gemini requested without an API key, using template")
                notice = CREDENTIAL_REQUIRED_NOTICE

            email = self._build(request, render(request), Provenance.TEMPLATE, notice=notice)
            logfire.info(
                "Email generated with template engine",
                duration=time.perf_counter() - start_time,
                fallback=notice is not None,
            )
            return email

    @staticmethod
    def _build(
        request: EmailRequest,
        text: str,
        provenance: Provenance,
        notice: Optional[str] = None,
    ) -> GeneratedEmail:
        """Split engine output into a GeneratedEmail."""
        content = clean_email_formatting(text)
        subject, body = extract_subject_line(content)
        generated_at = datetime.now(timezone.utc)

        return GeneratedEmail(
            subject=subject or build_subject(request),
            body=body,
            content=content,
            provenance=provenance,
            status=f"Generated with {ENGINE_NAMES[provenance]} at {generated_at:%H:%M:%S} UTC",
            notice=notice,
            generated_at=generated_at,
        )
