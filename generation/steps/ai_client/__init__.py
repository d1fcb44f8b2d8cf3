"""AI Client step - Google Gemini generateContent calls."""

from .main import GeminiClient

__all__ = ["GeminiClient"]
