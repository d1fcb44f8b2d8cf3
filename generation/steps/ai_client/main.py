"""
Google Gemini client.

One generateContent call per email: no retries, no streaming. The request
is bounded by the configured transport timeout.
"""

from typing import Optional

import httpx
import logfire
from pydantic import ValidationError

from config.settings import settings
from generation.core.exceptions import (
    MalformedResponseError,
    MissingCredentialError,
    ProviderError,
)
from generation.models.core import EmailRequest

from .models import GenerateContentRequest, GenerateContentResponse, GenerationConfig
from .prompts import CONNECTION_TEST_PROMPT, create_generation_prompt


MAX_OUTPUT_TOKENS_CAP = 2048
TOKENS_PER_WORD = 4
PROBE_MAX_OUTPUT_TOKENS = 10


def output_token_budget(max_length: int) -> int:
    """Output tokens requested for an email of max_length words."""
    return min(max_length * TOKENS_PER_WORD, MAX_OUTPUT_TOKENS_CAP)


class GeminiClient:
    """Client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_url: generateContent endpoint (defaults to GEMINI_API_URL)
            timeout: Request timeout in seconds (defaults to GEMINI_TIMEOUT)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.api_url = api_url or settings.gemini_api_url
        self.timeout = timeout if timeout is not None else settings.gemini_timeout
        self.transport = transport

        # Fixed sampling parameters
        self.temperature = 0.7
        self.top_p = 0.8
        self.top_k = 40

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def build_payload(self, request: EmailRequest) -> dict:
        """JSON body for an email generation call."""
        config = GenerationConfig(
            max_output_tokens=output_token_budget(request.max_length),
            temperature=self.temperature,
            top_p=self.top_p,
            top_k=self.top_k,
        )
        return GenerateContentRequest.from_prompt(create_generation_prompt(request), config).to_payload()

    async def request_completion(self, request: EmailRequest, credential: Optional[str]) -> str:
        """
        Generate an email with Gemini.

        Args:
            request: Form fields for this generation
            credential: Gemini API key

        Returns:
            Generated email text, trimmed

        Raises:
            MissingCredentialError: If credential is empty
            ProviderError: If Gemini returns a non-success status or the request fails
            MalformedResponseError: If the success body has no generated text
        """
        if not credential or not credential.strip():
            raise MissingCredentialError()

        payload = self.build_payload(request)

        with logfire.span(
            "gemini.request_completion",
            purpose=request.purpose,
            tone=request.tone,
            max_output_tokens=payload["generationConfig"]["maxOutputTokens"],
        ):
            async with self._client() as client:
                try:
                    response = await client.post(
                        self.api_url,
                        params={"key": credential.strip()},
                        json=payload,
                    )
                except httpx.TimeoutException as e:
                    logfire.error("Gemini API timeout", timeout=self.timeout)
                    raise ProviderError(f"request timed out after {self.timeout} seconds") from e
                except httpx.HTTPError as e:
                    logfire.error("Gemini API request failed", error=str(e), error_type=type(e).__name__)
                    raise ProviderError(f"request failed: {e}") from e

            if not response.is_success:
                message = self._error_message(response)
                logfire.error(
                    "Gemini API HTTP error",
                    status_code=response.status_code,
                    error=message,
                )
                raise ProviderError(message, status_code=response.status_code)

            text = self._parse_text(response)
            logfire.info("Gemini response received", length=len(text))
            return text

    async def probe_connection(self, credential: Optional[str]) -> bool:
        """
        Check that the Gemini API accepts credential.

        Sends a minimal-token request. Never raises.

        Returns:
            True if the call succeeded, False if the credential is absent or the call failed
        """
        if not credential or not credential.strip():
            return False

        payload = GenerateContentRequest.from_prompt(
            CONNECTION_TEST_PROMPT,
            GenerationConfig(max_output_tokens=PROBE_MAX_OUTPUT_TOKENS),
        ).to_payload()

        try:
            async with self._client() as client:
                response = await client.post(
                    self.api_url,
                    params={"key": credential.strip()},
                    json=payload,
                )
        except Exception as e:
            logfire.warning(
                "Gemini connection probe failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        logfire.info("Gemini connection probe finished", status_code=response.status_code)
        return response.is_success

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract error.message from a Gemini error body."""
        try:
            body = response.json()
        except ValueError:
            return "Unknown error"

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return "Unknown error"

    @staticmethod
    def _parse_text(response: httpx.Response) -> str:
        """Validate the success body and return the first candidate's text."""
        try:
            parsed = GenerateContentResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logfire.error("Invalid response from Gemini API", error=str(e))
            raise MalformedResponseError("Invalid response from Gemini API") from e

        text = parsed.first_text.strip()
        if not text:
            raise MalformedResponseError("Gemini API returned an empty email")
        return text
