"""
Centralized configuration for the Seller Panel backend
"""
import json
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "Amzify Seller API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Backend API for the Amzify seller dashboard"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Base URL used by SellerApiClient
    API_URL: str = "http://localhost:8000/api"

    # Database
    DATABASE_URL: str = ""

    # Auth
    AUTH_SECRET: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_MINUTES: int = 60
    REFRESH_TOKEN_DAYS: int = 7

    # CORS - comma-separated string or JSON array
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000,http://localhost:5173"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Claude assistant
    CLAUDE_API_KEY: str = ""
    CLAUDE_MODEL: str = "claude-haiku-4-5-20251001"
    CLAUDE_MAX_TOKENS: int = 500
    MAX_HISTORY_MESSAGES: int = 10

    # Supabase Storage (product and profile images)
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    SUPABASE_BUCKET: str = "seller-uploads"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # Dashboard refresh
    ORDERS_POLL_SECONDS: float = 30.0
    DASHBOARD_POLL_SECONDS: float = 60.0
    DASHBOARD_RETRY_DELAY_SECONDS: float = 2.0

    # Finance
    COMMISSION_RATE: float = 0.15

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
