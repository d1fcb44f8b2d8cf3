"""Template Engine step - deterministic fallback email writer."""

from .main import render

__all__ = ["render"]
