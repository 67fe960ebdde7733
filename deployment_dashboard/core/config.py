"""
Application configuration settings
"""
import os
from typing import List


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = "Deployment Dashboard API"
    APP_VERSION: str = "1.0.0"
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "deployment-dashboard")

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: List[str] = ["*"]
    CORS_HEADERS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Data select
    # Used when a page number is requested without a page size
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))


settings = Settings()
