"""
Template Engine Content Library

Fixed greetings, closings and body paragraphs. Each body has exactly one
{context} substitution point and a default phrase used when the caller
leaves the context empty.
"""

from typing import Dict, NamedTuple

from generation.models.core import EmailPurpose, EmailTone


PLACEHOLDER_RECIPIENT_CASUAL = "there"
PLACEHOLDER_RECIPIENT_FORMAL = "Sir/Madam"
PLACEHOLDER_SENDER = "Your Name"


class Salutation(NamedTuple):
    """Greeting template and closing word for one tone."""
    greeting: str
    closing: str
    default_recipient: str
    include_company: bool = False


class BodyTemplate(NamedTuple):
    """Body paragraphs with one {context} slot and its fallback phrase."""
    text: str
    default_context: str


SALUTATIONS: Dict[str, Salutation] = {
    EmailTone.CASUAL.value: Salutation(
        greeting="Hi {recipient},",
        closing="Best regards,",
        default_recipient=PLACEHOLDER_RECIPIENT_CASUAL,
    ),
    EmailTone.FORMAL.value: Salutation(
        greeting="Dear {recipient},",
        closing="Sincerely,",
        default_recipient=PLACEHOLDER_RECIPIENT_FORMAL,
    ),
    EmailTone.BUSINESS.value: Salutation(
        greeting="Dear {recipient},",
        closing="Best regards,",
        default_recipient=PLACEHOLDER_RECIPIENT_FORMAL,
        include_company=True,
    ),
}

FALLBACK_TONE = EmailTone.CASUAL.value


BODIES: Dict[str, BodyTemplate] = {
    EmailPurpose.THANK_YOU.value: BodyTemplate(
        text=(
            "I wanted to take a moment to express my heartfelt gratitude for {context}. "
            "Your thoughtfulness truly means a great deal to me, and I feel fortunate to know "
            "someone as generous and caring as you.\n\n"
            "Your support has made a real difference, and I want you to know how much I "
            "appreciate everything you've done. It's people like you who make the world a "
            "brighter place.\n\n"
            "Thank you once again for your generosity and kindness. I hope I can return the "
            "favor someday."
        ),
        default_context="your kindness and support",
    ),
    EmailPurpose.JOB_APPLICATION.value: BodyTemplate(
        text=(
            "I am writing to express my strong interest in the position at your esteemed "
            "organization. {context}\n\n"
            "My background and skills align well with the requirements, and I am particularly "
            "excited about the opportunity to contribute to your company's continued success. "
            "I am confident that my experience and enthusiasm would make me an asset to your "
            "organization.\n\n"
            "I have attached my resume for your review and would welcome the opportunity to "
            "discuss how I can contribute to your team. Thank you for considering my "
            "application, and I look forward to hearing from you."
        ),
        default_context=(
            "Based on my research and experience, I believe I would be a valuable addition "
            "to your team."
        ),
    ),
    EmailPurpose.MEETING_REQUEST.value: BodyTemplate(
        text=(
            "I hope this email finds you well. I would like to schedule a meeting to discuss "
            "{context}.\n\n"
            "The discussion would be valuable for moving forward effectively, and I believe "
            "your insights would be instrumental in achieving our goals. I am flexible with "
            "timing and can accommodate your schedule.\n\n"
            "Please let me know your availability, and I will arrange the meeting accordingly. "
            "The discussion should take approximately 30-45 minutes and can be conducted in "
            "person or via video call, whichever is more convenient for you."
        ),
        default_context="some important matters that would benefit from your input and expertise",
    ),
    EmailPurpose.FOLLOW_UP.value: BodyTemplate(
        text=(
            "I wanted to follow up on our previous conversation regarding {context}. I have "
            "been working on the items we talked about and wanted to provide you with an "
            "update on the progress.\n\n"
            "I have made good headway on the action items and believe we are moving in the "
            "right direction. I wanted to ensure we remain aligned on the next steps and "
            "address any questions you might have.\n\n"
            "Please let me know if you need any additional information from me or if there's "
            "anything else I can do to support our objectives. I appreciate your continued "
            "collaboration on this matter."
        ),
        default_context="the matters we discussed",
    ),
    EmailPurpose.COMPLAINT.value: BodyTemplate(
        text=(
            "I am writing to bring to your attention a concern regarding {context}. While I "
            "value our relationship, I believe this matter needs to be addressed to ensure we "
            "can continue working together effectively.\n\n"
            "The situation has caused some inconvenience, and I would appreciate your "
            "assistance in resolving it promptly. I am confident that we can work together to "
            "find a satisfactory solution that addresses the issue comprehensively.\n\n"
            "I look forward to your response and to resolving this matter quickly. Thank you "
            "for your attention to this concern, and I appreciate your commitment to customer "
            "satisfaction."
        ),
        default_context="a service issue that requires prompt attention",
    ),
}

FALLBACK_PURPOSE = EmailPurpose.THANK_YOU.value
