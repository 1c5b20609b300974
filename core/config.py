"""Application settings.

All configuration is read from environment variables once at import time.
Tests override values by setting the environment before importing the app.
"""

import os
from typing import List, Optional


class Settings:
    """Centralized configuration for the nutrition log service."""

    def __init__(self) -> None:
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

        # Read/Write partitioning: point READ_DATABASE_URL at a replica in production.
        self.write_database_url: str = os.getenv("WRITE_DATABASE_URL", "sqlite:///nutrition.db")
        self.read_database_url: str = os.getenv("READ_DATABASE_URL", self.write_database_url)

        # In production you MUST set JWT_SECRET.
        self.jwt_secret: str = os.getenv("JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.getenv("TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.getenv("COOKIE_SECURE") or "").strip() in {"1", "true", "True"}

        self.log_dir: str = os.getenv("LOG_DIR") or os.path.join(base_dir, "logs")
        self.log_level: str = (os.getenv("LOG_LEVEL") or "INFO").upper()

        self.food_catalog_csv: Optional[str] = os.getenv("FOOD_CATALOG_CSV") or None

        cors = os.getenv("CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [origin.strip() for origin in cors.split(",") if origin.strip()]


settings = Settings()
