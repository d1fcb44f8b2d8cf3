"""
Pydantic schemas for request/response validation.
"""

from schemas.email import (
    GenerateEmailRequest,
    GeneratedEmailResponse,
    EmailOptionsResponse,
    OptionItem,
)
from schemas.credentials import (
    SaveCredentialRequest,
    CredentialStatusResponse,
)

__all__ = [
    # Email schemas
    "GenerateEmailRequest",
    "GeneratedEmailResponse",
    "EmailOptionsResponse",
    "OptionItem",

    # Credential schemas
    "SaveCredentialRequest",
    "CredentialStatusResponse",
]
