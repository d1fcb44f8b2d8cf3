"""
Models package for generation models

NOTE: these are domain objects; HTTP schemas live in schemas/
"""

from .core import (
    # Bounds
    MIN_EMAIL_LENGTH,
    MAX_EMAIL_LENGTH,
    DEFAULT_EMAIL_LENGTH,

    # Enums
    EmailPurpose,
    EmailTone,
    AIPreference,
    Provenance,

    # Core data models
    EmailRequest,
    GeneratedEmail,
)

__all__ = [
    "MIN_EMAIL_LENGTH",
    "MAX_EMAIL_LENGTH",
    "DEFAULT_EMAIL_LENGTH",

    # Enums
    "EmailPurpose",
    "EmailTone",
    "AIPreference",
    "Provenance",

    # Core data models
    "EmailRequest",
    "GeneratedEmail",
]
