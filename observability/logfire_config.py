"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the generation
service: every orchestrator decision and Gemini call is emitted as a span.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; logs stay local without it)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. Without a token the
    service keeps running and logs are only written to the console.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None) -> None:
        """
        Initialize Logfire with project token.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="email-writer",
            environment=os.getenv("ENVIRONMENT", "development"),
            send_to_logfire="if-token-present",
        )

        cls._initialized = True

        if not token:
            logfire.warning("LOGFIRE_TOKEN not set, logging locally only")

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
