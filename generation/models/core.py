"""Core data models for email generation."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


MIN_EMAIL_LENGTH = 50
MAX_EMAIL_LENGTH = 300
DEFAULT_EMAIL_LENGTH = 150


class EmailPurpose(str, Enum):
    """Purposes with a dedicated body in the template library."""
    THANK_YOU = "thank_you"
    JOB_APPLICATION = "job_application"
    MEETING_REQUEST = "meeting_request"
    FOLLOW_UP = "follow_up"
    COMPLAINT = "complaint"


class EmailTone(str, Enum):
    """Tones with a dedicated greeting/closing pair."""
    CASUAL = "casual"
    FORMAL = "formal"
    BUSINESS = "business"


class AIPreference(str, Enum):
    """Which engine the caller would like to write the email."""
    AUTO = "auto"
    GEMINI = "gemini"
    TEMPLATE = "template"

    @property
    def wants_ai(self) -> bool:
        return self is not AIPreference.TEMPLATE


class Provenance(str, Enum):
    """Engine that produced a GeneratedEmail."""
    AI = "ai"
    TEMPLATE = "template"


@dataclass(frozen=True)
class EmailRequest:
    """
    Form fields for one generation attempt. Immutable once submitted.

    purpose and tone are plain strings: values outside EmailPurpose and
    EmailTone are accepted and resolved to defaults by the template engine.
    """

    purpose: str = EmailPurpose.THANK_YOU.value
    """Purpose key, e.g. 'thank_you' or 'meeting_request'"""

    tone: str = EmailTone.CASUAL.value
    """Tone key, e.g. 'casual', 'formal' or 'business'"""

    recipient: str = ""
    sender: str = ""
    company: Optional[str] = None
    subject: str = ""

    context: str = ""
    """Free-text details woven into the body"""

    max_length: int = DEFAULT_EMAIL_LENGTH
    """Target word count, bounded to [MIN_EMAIL_LENGTH, MAX_EMAIL_LENGTH]"""

    ai_preference: AIPreference = AIPreference.AUTO

    def __post_init__(self):
        if not MIN_EMAIL_LENGTH <= self.max_length <= MAX_EMAIL_LENGTH:
            raise ValueError(
                f"max_length must be between {MIN_EMAIL_LENGTH} and {MAX_EMAIL_LENGTH}, "
                f"got {self.max_length}"
            )
        # Accept raw strings for ai_preference (e.g. from JSON)
        if not isinstance(self.ai_preference, AIPreference):
            object.__setattr__(self, "ai_preference", AIPreference(self.ai_preference))

    @property
    def default_subject(self) -> str:
        """Subject derived from the purpose key, e.g. 'follow_up' -> 'Follow Up'."""
        return self.purpose.replace("_", " ").title()


@dataclass(frozen=True)
class GeneratedEmail:
    """Result of one generation call. Replaces any previous result."""

    subject: str
    body: str

    content: str
    """Full email text as produced by the engine (subject line included)"""

    provenance: Provenance
    status: str

    notice: Optional[str] = None
    """User-visible fallback or configuration notice, if any"""

    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
