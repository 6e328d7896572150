"""
Centralized application configuration
"""
import json
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "Toolshop API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Storefront and admin console for the online tool shop"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000,http://localhost:5173"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    # Storefront acceptance checks (no real authentication backend)
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"
    MOBILE_PATTERN: str = r"^09\d{9}$"

    # Session
    RECENTLY_VIEWED_LIMIT: int = 8

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
