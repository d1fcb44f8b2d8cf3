"""Credential-related Pydantic schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SaveCredentialRequest(BaseModel):
    """Request schema for PUT /api/credentials"""

    api_key: str = Field(
        ...,
        min_length=1,
        max_length=512,
        description="Google Gemini API key"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "api_key": "AIzaSy..."
            }
        }
    )


class CredentialStatusResponse(BaseModel):
    """Response schema for GET /api/credentials/status."""

    service: str = Field(default="Google Gemini")

    configured: bool = Field(..., description="True if an API key is available")

    source: Optional[Literal["stored", "environment"]] = Field(
        None,
        description="Where the key comes from: saved through the API or GOOGLE_API_KEY"
    )

    connected: Optional[bool] = Field(
        None,
        description="Result of the live connection probe (null when the probe was skipped)"
    )

    setup_url: str = Field(default="https://makersuite.google.com/app/apikey")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "service": "Google Gemini",
                "configured": True,
                "source": "stored",
                "connected": True,
                "setup_url": "https://makersuite.google.com/app/apikey"
            }
        }
    )
