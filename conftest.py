"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration
- Shared fixtures across all tests
"""

import sys
from pathlib import Path

import logfire
import pytest


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    # Add project root to sys.path to ensure 'generation' package is importable
    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring external services"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests (local only)
    logfire.configure(
        service_name="email_writer_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )

    logfire.info(
        "Starting test suite",
        project_root=str(project_root),
    )


def pytest_sessionfinish(session, exitstatus):
    """Log test session completion with summary statistics."""
    logfire.info(
        "Test suite completed",
        exit_status=exitstatus,
        tests_collected=session.testscollected,
        tests_failed=session.testsfailed,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"GOOGLE_API_KEY": "test-key", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars


@pytest.fixture
def make_request():
    """Factory for EmailRequest objects with test-friendly defaults.

    Usage:
        def test_something(make_request):
            request = make_request(tone="formal", max_length=80)
    """
    from generation.models.core import EmailRequest

    def _make(**overrides):
        fields = {
            "purpose": "thank_you",
            "tone": "casual",
            "recipient": "John Doe",
            "sender": "Sivasankari M",
            "subject": "Thank you for the birthday gift",
            "context": "the beautiful silver watch you gave me",
            "max_length": 150,
        }
        fields.update(overrides)
        return EmailRequest(**fields)

    return _make


@pytest.fixture
def memory_credentials():
    """CredentialStore backed by memory, with no key and no fallback."""
    from services.credential_store import CredentialStore, InMemoryKeyValueStore

    return CredentialStore(InMemoryKeyValueStore())
