"""
Centralized application configuration
"""
import json
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, read from environment variables and .env"""

    # API Settings
    API_TITLE: str = "Namma City API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Namma City B2B Seller Platform on ONDC"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    API_DEBUG: bool = False

    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "*"

    # Marketplace
    DEFAULT_SUBSCRIPTION_PLAN: str = "monthly"
    FLAT_DELIVERY_FEE_INR: float = 50

    # Front-end pages, mounted at "/" when the directory exists
    STATIC_DIR: str = "public"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["*"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
