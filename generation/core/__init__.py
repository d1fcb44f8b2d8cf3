"""
Core generation infrastructure.

- GenerationOrchestrator: chooses Gemini or the template engine per request
- GenerationSession: current-email slot with one generation in flight

Data models are in generation.models.core
Custom exceptions are in generation.core.exceptions
"""

from generation.core.orchestrator import GenerationOrchestrator
from generation.core.session import GenerationSession

__all__ = [
    "GenerationOrchestrator",
    "GenerationSession",
]
