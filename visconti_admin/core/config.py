"""Application configuration loaded via pydantic settings."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Strongly-typed application settings with environment overrides."""

    # Application
    APP_NAME: str = "Visconti Admin"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOCALE: str = "en"

    # Backend REST API
    BACKEND_URI: str = "http://localhost:5000/"
    REQUEST_TIMEOUT: Optional[float] = None

    # Session
    TOKEN_COOKIE_NAME: str = "adminToken"
    TOKEN_COOKIE_SECURE: bool = False

    # Views
    MENU_PAGE_SIZE: int = 6
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024
    STATUS_MESSAGE_SECONDS: float = 3.0
    VIEW_STORE_MAX_SESSIONS: int = 500
    SESSION_IDLE_SECONDS: float = 3600.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_LEVELS: str = "TRACE,ERROR,WARNING,INFO"
    LOG_FILE_PATH: str = "./logs/admin.log"

    class Config:
        """Configure environment file loading behavior."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
