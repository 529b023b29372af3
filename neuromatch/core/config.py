"""Application configuration settings"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    APP_NAME: str = "Neuromatch Course Matching API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Catalog Settings
    CATALOG_PATH: Optional[str] = None  # bundled seed catalog when unset

    # Logging Settings
    LOG_CONFIG_PATH: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    # CORS Settings
    CORS_ORIGINS: list = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra environment variables


# Global settings instance
settings = Settings()
