"""
Email text formatting helpers shared by both engines.
"""

import re
from typing import Tuple


def clean_email_formatting(email_content: str) -> str:
    """
    Clean and format email content.

    - Strip leading/trailing whitespace
    - Collapse runs of blank lines into a single blank line
    - Remove trailing spaces from lines

    Args:
        email_content: Raw email text

    Returns:
        Cleaned email text
    """
    cleaned = email_content.strip()
    cleaned = re.sub(r'\n\s*\n\s*\n+', '\n\n', cleaned)

    lines = [line.rstrip() for line in cleaned.split('\n')]
    return '\n'.join(lines)


def extract_subject_line(email_content: str) -> Tuple[str, str]:
    """
    Split an email into subject line and body.

    Recognises a leading "Subject:" line, optionally wrapped in markdown
    bold (**Subject:** ...), as produced by the model.

    Args:
        email_content: Email text

    Returns:
        Tuple of (subject_line, email_body)
        If no subject found, returns ("", email_content)
    """
    lines = email_content.split('\n')
    first_line = lines[0].strip()

    match = re.match(r'^\**\s*subject\s*:\s*\**\s*(.*?)\s*\**$', first_line, re.IGNORECASE)
    if not match:
        return ("", email_content)

    subject = match.group(1).strip()
    body = '\n'.join(lines[1:]).strip()
    return (subject, body)
