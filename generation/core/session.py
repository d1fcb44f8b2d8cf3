"""
Generation session - the single "current" email slot.

Only one generation may be in flight at a time; a second submission is
rejected rather than queued.
"""

import asyncio
from typing import Optional

import logfire

from generation.core.exceptions import GenerationInProgressError
from generation.core.orchestrator import GenerationOrchestrator
from generation.models.core import EmailRequest, GeneratedEmail


class GenerationSession:
    """Holds the latest GeneratedEmail and serializes generation attempts."""

    def __init__(self, orchestrator: GenerationOrchestrator):
        self.orchestrator = orchestrator
        self._current: Optional[GeneratedEmail] = None
        self._lock = asyncio.Lock()

    @property
    def current(self) -> Optional[GeneratedEmail]:
        """The most recently generated email, if any."""
        return self._current

    @property
    def is_generating(self) -> bool:
        return self._lock.locked()

    async def submit(self, request: EmailRequest) -> GeneratedEmail:
        """
        Generate an email and make it current.

        The previous email stays current until the new one is complete.

        Raises:
            GenerationInProgressError: If another generation is still running
        """
        if self._lock.locked():
            logfire.warning("Generation rejected, another generation is in progress")
            raise GenerationInProgressError()

        async with self._lock:
            email = await self.orchestrator.generate(request)
            self._current = email

        return email

    def clear(self) -> None:
        """Forget the current email."""
        self._current = None
