"""
Services module for external integrations and storage.
"""

from services.credential_store import CredentialStore, get_credential_store

__all__ = ["CredentialStore", "get_credential_store"]
