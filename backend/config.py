import json
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    openrouter_api_key: str = ""
    openrouter_model: str = "google/gemini-2.0-flash-lite-preview-02-05:free"
    max_output_tokens: int = 2048
    request_timeout_seconds: float = 60.0

    max_upload_size_mb: int = 5
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "https://vercel-frontend-woad.vercel.app",
        "https://roast-my-stuff-hackathon.vercel.app",
    ]

    # slowapi limit string, shared by both roast routes
    rate_limit: str = "20 per 15 minutes"
    rate_limit_enabled: bool = True
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Parse CORS_ORIGINS as comma-separated string or JSON list."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]

    @property
    def provider_configured(self) -> bool:
        return bool(self.openrouter_api_key.strip())


settings = Settings()
