"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./receptradar.db")

    # Azure OpenAI (recipe generation)
    azure_openai_endpoint: str = Field(default="")
    azure_openai_api_key: str = Field(default="")
    azure_openai_chat_deployment: str = Field(default="")
    azure_openai_image_deployment: str | None = Field(default=None)
    llm_timeout_seconds: float = Field(default=120.0)

    # Generation
    recipe_count: int = Field(default=10)
    max_prompt_ingredients: int = Field(default=15)
    image_dir: str = Field(default="./images")

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has a persistent store."""
        if self.environment == "production":
            if ":memory:" in self.database_url:
                raise ValueError("DATABASE_URL must point to a file database in production")
        return self

    @property
    def is_llm_configured(self) -> bool:
        """Check if the recipe provider has everything it needs."""
        return bool(
            self.azure_openai_endpoint.strip()
            and self.azure_openai_api_key.strip()
            and self.azure_openai_chat_deployment.strip()
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
