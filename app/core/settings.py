"""
Core settings and environment variables for Tourist Safety Hub.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "Tourist Safety Hub"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - comma separated list of frontend origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Storage backend: "memory" (process-local, demo/tests) or "firestore"
    STORAGE_BACKEND: str = "memory"
    SEED_DEMO_DATA: bool = True

    # Firebase/Firestore (only read when STORAGE_BACKEND=firestore)
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None  # Path to service account JSON

    # Authentication
    JWT_SECRET: str = "your-super-secret-jwt-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRY_DAYS: int = 30
    BCRYPT_ROUNDS: int = 12

    # Alerts
    DISPATCH_DELAY_SECONDS: float = 1.0  # Delay before the simulated dispatch confirmation

    # Mock chain (identity issuance)
    CHAIN_NETWORK_ID: int = 137  # Polygon mainnet
    CHAIN_CONTRACT_ADDRESS: str = "0x1234567890123456789012345678901234567890"
    CHAIN_EXPLORER_URL: str = "https://polygonscan.com"

    # Dashboard filler metrics: "random" or "static"
    METRICS_PROVIDER: str = "random"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def cors_origins_list(self) -> list:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
