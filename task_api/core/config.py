"""
Configuration settings for the Task API.
"""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings"""

    # Service information
    service_name: str = os.getenv("SERVICE_NAME", "task_api")
    service_version: str = os.getenv("SERVICE_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Database configuration, in-memory SQLite unless overridden
    database_url: str = os.getenv("DATABASE_URL", "sqlite://")
    database_username: Optional[str] = os.getenv("DATABASE_USERNAME")
    database_password: Optional[str] = os.getenv("DATABASE_PASSWORD")

    # API configuration
    api_prefix: str = os.getenv("API_PREFIX", "/api")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
