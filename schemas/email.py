"""
Pydantic schemas for email generation API endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from generation.models.core import (
    DEFAULT_EMAIL_LENGTH,
    MAX_EMAIL_LENGTH,
    MIN_EMAIL_LENGTH,
    AIPreference,
    EmailPurpose,
    EmailRequest,
    EmailTone,
    Provenance,
)


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateEmailRequest(BaseModel):
    """
    Request body for POST /api/email/generate

    Unknown purpose and tone values are accepted; the template engine
    falls back to the thank-you body and the casual greeting.
    """

    purpose: str = Field(
        default=EmailPurpose.THANK_YOU.value,
        max_length=100,
        description="Email purpose, e.g. 'thank_you', 'meeting_request'"
    )

    tone: str = Field(
        default=EmailTone.CASUAL.value,
        max_length=100,
        description="Email tone: 'casual', 'formal' or 'business'"
    )

    recipient: str = Field(default="", max_length=255, description="Recipient name")
    sender: str = Field(default="", max_length=255, description="Sender name")
    company: Optional[str] = Field(default=None, max_length=255, description="Sender company (business tone)")
    subject: str = Field(default="", max_length=255, description="Subject line (derived from purpose if empty)")

    context: str = Field(
        default="",
        max_length=5000,
        description="Free-text details to include in the email"
    )

    max_length: int = Field(
        default=DEFAULT_EMAIL_LENGTH,
        ge=MIN_EMAIL_LENGTH,
        le=MAX_EMAIL_LENGTH,
        description="Approximate maximum word count"
    )

    ai_preference: AIPreference = Field(
        default=AIPreference.AUTO,
        description="'auto' (Gemini when configured), 'gemini' or 'template'"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "purpose": "thank_you",
                "tone": "casual",
                "recipient": "John Doe",
                "sender": "Sivasankari M",
                "subject": "Thank you for the birthday gift",
                "context": "the beautiful silver watch you gave me for my 25th birthday",
                "max_length": 150,
                "ai_preference": "auto"
            }
        }
    )

    def to_email_request(self) -> EmailRequest:
        """Convert to the immutable domain request."""
        return EmailRequest(**self.model_dump())


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class GeneratedEmailResponse(BaseModel):
    """Response schema for a generated email."""

    subject: str
    body: str
    content: str = Field(..., description="Full email text including the subject line")
    provenance: Provenance = Field(..., description="Engine that wrote the email: 'ai' or 'template'")
    status: str
    notice: Optional[str] = Field(None, description="Fallback or configuration notice")
    generated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "subject": "Thank you for the birthday gift",
                "body": "Hi John Doe,\n\nI wanted to take a moment to express my heartfelt gratitude...",
                "content": "Subject: Thank you for the birthday gift\n\nHi John Doe,\n\n...",
                "provenance": "template",
                "status": "Generated with Template Engine at 10:30:00 UTC",
                "notice": None,
                "generated_at": "2025-01-13T10:30:00Z"
            }
        }
    )


class OptionItem(BaseModel):
    """One labelled choice for a form field."""

    value: str
    label: str


class EmailOptionsResponse(BaseModel):
    """Response schema for GET /api/email/options."""

    purposes: List[OptionItem]
    tones: List[OptionItem]
    ai_preferences: List[OptionItem]
    min_length: int = MIN_EMAIL_LENGTH
    max_length: int = MAX_EMAIL_LENGTH
    default_length: int = DEFAULT_EMAIL_LENGTH
