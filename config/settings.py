"""Application configuration using Pydantic Settings."""

from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in the
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a default so the service can start with an empty
    environment and fall back to template-only generation.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:5173, http://localhost:3000",
        description="Comma-separated list of allowed CORS origins"
    )

    # Gemini (generative-language API)
    google_api_key: str = Field(
        default="",
        description="Fallback Gemini API key, used when no key has been saved through the API"
    )
    gemini_api_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent",
        description="Gemini generateContent endpoint"
    )
    gemini_timeout: float = Field(default=30.0, gt=0, description="Gemini request timeout in seconds")

    # Credential storage
    credential_store_path: str = Field(
        default=".email_writer/credentials.json",
        description="JSON file holding the saved Gemini API key"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("gemini_api_url")
    @classmethod
    def validate_gemini_api_url(cls, v: str) -> str:
        """Validate that the Gemini endpoint is an http(s) URL."""
        if not v.strip().startswith(("http://", "https://")):
            raise ValueError("GEMINI_API_URL must be an http(s) URL")
        return v.strip()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


# Create a singleton instance
settings = Settings()


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
