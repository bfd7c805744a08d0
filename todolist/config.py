"""
Application configuration using Pydantic settings.
Loads from environment variables or .env file.
"""
from functools import lru_cache
from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "ToDoList Backend"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # GCP Settings
    gcp_project_id: str = ""
    google_application_credentials: str = ""

    # Auth settings
    secret_key: str = "change-this-in-production-use-a-long-random-string"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10

    # CORS settings - stored as a plain string, parsed by get_cors_origins()
    cors_origins: str = "*"

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was created with."""
    return request.app.state.settings
