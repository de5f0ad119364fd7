"""Environment-driven settings for the advertorial backend."""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Provider credentials
    openai_api_key: str = Field(default="", description="OpenAI API key")
    gnews_api_key: str = Field(default="", description="GNews API key")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=3000, description="Listen port")
    app_env: str = Field(
        default="development",
        description="Deployment environment; 'production' selects the production CORS list",
    )
    production_origins: List[str] = Field(
        default_factory=lambda: ["https://leahboulos96.github.io"],
        description="Frontend origins allowed in production",
    )
    development_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Frontend origins allowed during local development",
    )

    # OpenAI
    openai_model: str = Field(default="gpt-4", description="Chat completion model")
    openai_timeout: float = Field(
        default=60.0, description="Timeout in seconds for each generation call"
    )

    # News search
    news_timeout: float = Field(
        default=15.0, description="Timeout in seconds for each news search call"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format: text or json")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v.lower() not in {"text", "json"}:
            raise ValueError("log_format must be 'text' or 'json'")
        return v.lower()

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    @property
    def allowed_origins(self) -> List[str]:
        """CORS allow-list for the current environment."""
        if self.is_production:
            return list(self.production_origins)
        return list(self.development_origins)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, read once."""
    return Settings()
