"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Dict, Union

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
import logfire

from config import settings
from api.dependencies import get_credentials
from services.credential_store import CredentialStore
from observability.logfire_config import LogfireConfig
from api.routes import email_router, credentials_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token)

    logfire.info(
        "Starting Email Writer API Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    source = get_credentials().source()
    if source:
        logfire.info("Gemini API key available", source=source)
    else:
        logfire.warning(
            "No Gemini API key configured, emails will use the template engine",
            hint="Save a key via PUT /api/credentials or set GOOGLE_API_KEY in .env",
        )

    logfire.info("Email Writer API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Email Writer API Server")


# Initialize FastAPI app
app = FastAPI(
    title="Email Writer API",
    description="Backend API for Email Writer - AI and template email generation",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check(
    credentials: CredentialStore = Depends(get_credentials),
) -> Dict[str, Union[str, bool]]:
    """
    Health check endpoint for load balancers and monitoring.

    The service is always usable: without a Gemini key it runs in
    template-only mode.

    Returns:
        dict: Health status of the application
    """
    ai_configured = credentials.load() is not None

    return {
        "status": "healthy",
        "service": "email-writer-api",
        "version": "1.0.0",
        "ai_configured": ai_configured,
        "mode": "ai" if ai_configured else "template-only",
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Email Writer API",
        "version": "1.0.0",
        "description": "Backend API for AI and template email generation",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Email generation endpoints (synchronous, one generation at a time)
app.include_router(email_router)

# Gemini API key management and status
app.include_router(credentials_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
