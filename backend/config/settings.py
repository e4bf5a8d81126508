from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List

class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Settings
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "BananaEdit API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server Settings
    PORT: int = 8000

    # External APIs
    # Checked when an edit is requested, not at startup
    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT_SECONDS: float = 120.0

    # Sample image for the demo flow
    SAMPLE_IMAGE_URL: str = (
        "https://images.unsplash.com/photo-1540573133985-87b6da6dce60"
        "?q=80&w=1000&auto=format&fit=crop"
    )
    SAMPLE_TIMEOUT_SECONDS: float = 30.0

    # Upload Limits
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    # Editor sessions (in memory only)
    SESSION_TTL_SECONDS: int = 60 * 60
    SESSION_MAX_COUNT: int = 500

    # CORS Settings
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173"
    ]

    def missing_settings(self) -> List[str]:
        """Names of settings that are needed for image generation but not set."""
        missing_fields = []
        if not self.GEMINI_API_KEY:
            missing_fields.append("GEMINI_API_KEY")
        return missing_fields

# Global settings instance
settings = Settings()
