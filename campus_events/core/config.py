import logging
from dotenv import load_dotenv
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings
from typing import List

# Load environment variables from .env file
load_dotenv(".env")
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Class to store all the settings of the Campus Events application."""

    # ------------------------------
    # Environment
    # ------------------------------
    ENVIRONMENT: str = Field(default="development")

    # ------------------------------
    # Sessions
    # ------------------------------
    SESSION_SECRET_KEY: str = Field(default="dev-session-secret")
    SESSION_MAX_AGE: int = Field(default=60 * 60 * 24)

    # ------------------------------
    # Storage behaviour
    # ------------------------------
    # Reject events pointing at unknown venues, categories or coordinators.
    STRICT_REFERENCES: bool = Field(default=True)

    # ------------------------------
    # Data & Seeding
    # ------------------------------
    SEED_ON_STARTUP: bool = Field(default=True)
    SEED_COORDINATOR_EMAIL: str = Field(default="coordinator@campus.edu")
    SEED_COORDINATOR_PASSWORD: str = Field(default="change-me-please")

    # ------------------------------
    # Rate limiting
    # ------------------------------
    RATE_LIMIT_ENABLED: bool = Field(default=True)
    AUTH_RATE_LIMIT: str = Field(default="10/minute")

    # ------------------------------
    # CORS
    # ------------------------------
    ALLOWED_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
        ]
    )

    # ------------------------------
    # Computed Fields
    # ------------------------------
    @computed_field
    @property
    def IS_PRODUCTION(self) -> bool:
        """Computed flag used for cookie hardening."""
        return self.ENVIRONMENT == "production"

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
