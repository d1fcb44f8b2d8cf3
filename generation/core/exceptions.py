"""
Custom exceptions for email generation.

AI client errors are caught by the GenerationOrchestrator and turned into
a template fallback; they never reach the API caller.
"""

from typing import Optional


class EmailGenerationError(Exception):
    """
    Base exception for email generation failures.

    All generation-specific exceptions inherit from this.
    """
    pass


class AIClientError(EmailGenerationError):
    """Base exception for failures of the Gemini client."""
    pass


class MissingCredentialError(AIClientError):
    """Raised when no Gemini API key is available for the call."""

    def __init__(self, message: str = "Google Gemini API key not found. Save a key or set GOOGLE_API_KEY."):
        super().__init__(message)


class ProviderError(AIClientError):
    """
    Raised when the Gemini API answers with a non-success status or the
    request cannot be completed.

    Attributes:
        status_code: HTTP status returned upstream (None for transport failures)
        upstream_message: error.message from the Gemini error body
    """

    def __init__(self, upstream_message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        self.upstream_message = upstream_message
        super().__init__(f"Gemini API error: {upstream_message}")


class MalformedResponseError(AIClientError):
    """
    Raised when a successful Gemini response lacks the generated text.

    Handled exactly like ProviderError by the orchestrator.
    """
    pass


class GenerationInProgressError(EmailGenerationError):
    """Raised when a generation is submitted while another is still running."""

    def __init__(self):
        super().__init__("An email is already being generated. Wait for it to finish.")
