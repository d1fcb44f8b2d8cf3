"""
Credential storage for the Gemini API key.

The key lives under a fixed name in a small key-value store. The store
medium is pluggable: a JSON file for the running service, in-memory for
tests. When no key has been saved, the GOOGLE_API_KEY setting is used.
"""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import logfire

from config import settings


GEMINI_CREDENTIAL_KEY = "gemini_api_key"

SOURCE_STORED = "stored"
SOURCE_ENVIRONMENT = "environment"


class KeyValueStore(ABC):
    """Minimal string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value for key, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, used in tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.

    Writes go to a temporary file in the same directory which then replaces
    the target, so readers never see a half-written file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logfire.error("Credential store unreadable", path=str(self.path), error=str(e))
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".credentials-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)


class CredentialStore:
    """Load/save/clear for the single Gemini API key."""

    def __init__(
        self,
        store: KeyValueStore,
        fallback: Optional[str] = None,
        key: str = GEMINI_CREDENTIAL_KEY,
    ):
        """
        Args:
            store: Backing key-value store
            fallback: Key used when nothing is stored (usually GOOGLE_API_KEY)
            key: Storage key name
        """
        self.store = store
        self.fallback = (fallback or "").strip() or None
        self.key = key

    def _stored(self) -> Optional[str]:
        value = self.store.get(self.key)
        if value and value.strip():
            return value.strip()
        return None

    def load(self) -> Optional[str]:
        """Saved key, else the fallback key, else None."""
        return self._stored() or self.fallback

    def source(self) -> Optional[str]:
        """Where load() gets its value: 'stored', 'environment' or None."""
        if self._stored():
            return SOURCE_STORED
        if self.fallback:
            return SOURCE_ENVIRONMENT
        return None

    def save(self, value: str) -> None:
        """
        Save a new key, replacing any previous one.

        Raises:
            ValueError: If value is empty
        """
        value = (value or "").strip()
        if not value:
            raise ValueError("API key cannot be empty")

        self.store.set(self.key, value)
        logfire.info("Gemini API key saved", key_suffix=value[-4:])

    def clear(self) -> None:
        """Remove the saved key. The fallback key, if any, still applies."""
        self.store.delete(self.key)
        logfire.info("Gemini API key removed")


# Global singleton instance
_credential_store: CredentialStore | None = None


def get_credential_store() -> CredentialStore:
    """
    Get or create the credential store singleton.

    Backed by the JSON file at CREDENTIAL_STORE_PATH, falling back to
    GOOGLE_API_KEY.
    """
    global _credential_store

    if _credential_store is None:
        _credential_store = CredentialStore(
            store=JsonFileKeyValueStore(Path(settings.credential_store_path)),
            fallback=settings.google_api_key,
        )

    return _credential_store
