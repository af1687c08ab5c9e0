"""
Application configuration using Pydantic Settings.
All environment variables are loaded here with sensible defaults.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Environment
    environment: str = "dev"
    log_level: str = "INFO"
    
    # Database
    # SQLite for local use, e.g. postgresql+asyncpg://... for production
    database_url: str = "sqlite+aiosqlite:///./imagegen.db"
    
    # Authentication
    secret_key: str = "change-me-in-production"  # JWT signing key
    access_token_expire_minutes: int = 60 * 24 * 7
    min_password_length: int = 8
    
    # Credits granted on registration
    signup_credits: int = 3
    
    # Image provider: "openai" or "placeholder"
    image_provider: str = "placeholder"
    openai_api_key: Optional[str] = None
    openai_image_model: str = "dall-e-3"
    openai_image_size: str = "1024x1024"
    generation_timeout_seconds: float = 120.0
    placeholder_image_base_url: str = "https://picsum.photos/seed"
    
    # CORS
    cors_origins: List[str] = ["*"]
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
