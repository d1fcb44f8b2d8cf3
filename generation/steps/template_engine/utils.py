"""
Template Engine Utilities

Word counting and length control for rendered emails.
"""

import re

_WORD_PATTERN = re.compile(r"\S+")


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def clip_to_word_limit(text: str, limit: int) -> str:
    """
    Keep only the first `limit` words of text.

    Whitespace between the kept words (including paragraph breaks) is
    preserved as-is.

    Args:
        text: Text to clip
        limit: Maximum number of words to keep

    Returns:
        Clipped text, or the original text if it is already within the limit
    """
    if limit <= 0:
        return ""

    for index, match in enumerate(_WORD_PATTERN.finditer(text), start=1):
        if index == limit:
            return text[:match.end()]

    return text


def cut_at_sentence_boundary(text: str) -> str:
    """
    Cut text after its last period.

    Returns the text unchanged if it contains no period past position 0.
    """
    boundary = text.rfind(".")
    if boundary > 0:
        return text[:boundary + 1]
    return text


def limit_length(text: str, max_words: int, closing: str) -> str:
    """
    Shorten an assembled email to roughly max_words.

    If the email is within the limit it is returned unchanged. Otherwise it
    is clipped to max_words, cut back to the last sentence boundary when one
    exists, and the closing block is appended again.

    Args:
        text: Fully assembled email (subject line through closing)
        max_words: Requested maximum word count
        closing: Closing block to re-append after truncation

    Returns:
        Email text
    """
    if count_words(text) <= max_words:
        return text

    shortened = cut_at_sentence_boundary(clip_to_word_limit(text, max_words))
    return f"{shortened.rstrip()}\n\n{closing}"
