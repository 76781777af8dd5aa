# -*- coding: utf-8 -*-
"""
Service configuration using Pydantic BaseSettings.

Only the HTTP service is configurable; the sanitizer itself has no options.
"""
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central service configuration loaded from environment variables.
    Values are validated and cast by Pydantic, and may also come from a
    .env file.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8002

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # API Documentation (disable in production)
    DOCS_ENABLED: bool = True

    # API Key for the /sanitize endpoints (empty = open access)
    API_KEY: str = ""

    # Limits
    MAX_DOCUMENT_CHARS: int = 2_000_000
    MAX_BATCH_SIZE: int = 100

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    # Request tracking
    REQUEST_ID_HEADER: str = "X-Request-ID"

    # Compression
    GZIP_MIN_SIZE: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global configuration instance
settings = Settings()
