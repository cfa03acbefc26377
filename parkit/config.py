# parkit/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./parkit.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Fares ─────────────────────────────────────────────────────────────
    CAR_RATE_PER_HOUR: float = 1.5
    BIKE_RATE_PER_HOUR: float = 1.0
    FREE_PARKING_MINUTES: int = 30          # Stays up to this length are free
    RECURRING_USER_DISCOUNT: float = 0.95   # Multiplier for returning vehicles

    # ── Facility ──────────────────────────────────────────────────────────
    CAR_SPOTS: int = 3
    BIKE_SPOTS: int = 2

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None          # Defaults to <repo>/logs
    LOG_FILE: str = "parkit.log"
    SQL_LOG_LEVEL: str = "WARNING"         # sqlalchemy.engine verbosity

    @property
    def IS_SQLITE(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
