"""
Template Engine

Deterministic email assembly from EmailRequest fields. No I/O, no
randomness, no failure path: every request renders to some text.
"""

from generation.models.core import EmailRequest

from .content import (
    BODIES,
    FALLBACK_PURPOSE,
    FALLBACK_TONE,
    PLACEHOLDER_SENDER,
    SALUTATIONS,
)
from .utils import limit_length


def build_greeting(request: EmailRequest) -> str:
    """Greeting line for the request's tone (casual for unknown tones)."""
    salutation = SALUTATIONS.get(request.tone, SALUTATIONS[FALLBACK_TONE])
    recipient = request.recipient.strip() or salutation.default_recipient
    return salutation.greeting.format(recipient=recipient)


def build_closing(request: EmailRequest) -> str:
    """Closing block: sign-off, sender name and (business tone only) company."""
    salutation = SALUTATIONS.get(request.tone, SALUTATIONS[FALLBACK_TONE])
    sender = request.sender.strip() or PLACEHOLDER_SENDER

    closing = f"{salutation.closing}\n{sender}"
    company = (request.company or "").strip()
    if salutation.include_company and company:
        closing += f"\n{company}"
    return closing


def build_body(request: EmailRequest) -> str:
    """Body paragraphs for the request's purpose (thank-you for unknown purposes)."""
    template = BODIES.get(request.purpose, BODIES[FALLBACK_PURPOSE])
    context = request.context.strip() or template.default_context
    return template.text.format(context=context)


def build_subject(request: EmailRequest) -> str:
    """Explicit subject, or one derived from the purpose key."""
    return request.subject.strip() or request.default_subject


def render(request: EmailRequest) -> str:
    """
    Render an email from fixed templates.

    Layout:
        Subject: <subject>

        <greeting>

        <body>

        <closing>

    Emails longer than request.max_length words are cut back to the last
    sentence boundary inside the limit and closed again.

    Args:
        request: Form fields for this generation

    Returns:
        Complete email text including the subject line
    """
    closing = build_closing(request)

    email = (
        f"Subject: {build_subject(request)}\n\n"
        f"{build_greeting(request)}\n\n"
        f"{build_body(request)}\n\n"
        f"{closing}"
    )

    return limit_length(email, request.max_length, closing)
