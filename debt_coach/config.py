"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Generative AI provider
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    temperature: float = 0.7
    top_p: float = 0.95
    top_k: int = 64
    max_output_tokens: int = 8192
    coach_timeout_seconds: float = 30.0

    # Presentation
    currency_prefix: str = "Rs."

    # Service
    service_name: str = "debt-coach"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]


settings = Settings()
