"""
AI Client Prompts

Prompt construction for Gemini email generation.
"""

from generation.models.core import EmailRequest, EmailTone


TONE_DESCRIPTIONS = {
    EmailTone.CASUAL.value: "friendly and approachable",
    EmailTone.FORMAL.value: "respectful and professional",
}
DEFAULT_TONE_DESCRIPTION = "business professional"

CONNECTION_TEST_PROMPT = "Test connection"


def describe_tone(tone: str) -> str:
    """Plain-language description of a tone key."""
    return TONE_DESCRIPTIONS.get(tone, DEFAULT_TONE_DESCRIPTION)


def create_generation_prompt(request: EmailRequest) -> str:
    """
    Build the single user prompt sent to Gemini.

    Embeds every form field plus formatting instructions (tone, target
    word count, subject line).

    Args:
        request: Form fields for this generation

    Returns:
        Prompt text
    """
    tone = request.tone

    return f"""Generate a {tone} email for the purpose of "{request.purpose}".

Email Details:
- To: {request.recipient or 'the recipient'}
- From: {request.sender or 'the sender'}
- Subject: {request.subject or 'Professional Email'}
- Company: {request.company or 'N/A'}
- Context: {request.context or 'General communication'}
- Tone: {tone} ({describe_tone(tone)})
- Maximum length: approximately {request.max_length} words

Please write a complete, well-structured email that:
1. Uses appropriate greeting and closing for the {tone} tone
2. Incorporates the provided context naturally
3. Matches the specified purpose
4. Maintains professionalism while fitting the requested tone
5. Includes a proper subject line
6. Is approximately {request.max_length} words or less

Format the response as a complete email with subject line."""
