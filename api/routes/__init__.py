"""
API route handlers.
"""

from api.routes.email import router as email_router
from api.routes.credentials import router as credentials_router

__all__ = ["email_router", "credentials_router"]
