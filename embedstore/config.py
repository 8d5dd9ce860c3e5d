"""Configuration loading utilities."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from embedstore.models.enums import ProviderName


DEFAULT_MODEL = "text-embedding-3-large"


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    model_config = SettingsConfigDict(
        env_prefix="EMBEDSTORE_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
    
    # Embedding settings
    provider: ProviderName = ProviderName.OPENAI
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("EMBEDSTORE_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )
    openai_base_url: str | None = None
    embedding_model: str = DEFAULT_MODEL
    allowed_models: list[str] = Field(
        default_factory=lambda: [
            "text-embedding-3-large",
            "text-embedding-3-small",
            "text-embedding-3-base",
        ]
    )
    
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "nomic-embed-text"
    
    # Provider call behavior
    request_timeout: float = 30.0
    max_retries: int = 2
    
    # Ranking
    default_top_k: int = 5
    
    # Server
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("EMBEDSTORE_PORT", "PORT"),
    )
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
