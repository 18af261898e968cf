"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    OPENAI_API_KEY: str = ""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: list[str] = ["*"]

    # Enrichment (LLM review that may replace the heuristic result)
    ENRICHMENT_ENABLED: bool = True
    ENRICHMENT_MODEL: str = "gpt-4o-mini"
    ENRICHMENT_TEMPERATURE: float = 0.0
    ENRICHMENT_MAX_OUTPUT_TOKENS: int = 2048
    ENRICHMENT_TIMEOUT_SECONDS: float = 15.0
    ENRICHMENT_MIN_CODE_LENGTH: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
