"""
Shared configuration for the movies API service
"""
from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH = Path(__file__).parent / "data" / "movies.json"

DEFAULT_ACCEPTED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8080",
    "https://my-app.com",
]


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = "movies-api"
    version: str = "1.0.0"
    log_level: str = "INFO"
    debug: bool = False
    host: str = "0.0.0.0"
    # PORT is honoured without prefix so the service runs on common PaaS setups
    port: int = Field(1234, validation_alias=AliasChoices("PORT", "APP_PORT"))

    # CORS
    accepted_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_ACCEPTED_ORIGINS))

    # Seed data loaded once at startup
    seed_path: Path = DEFAULT_SEED_PATH

    model_config = SettingsConfigDict(env_prefix="APP_")


class Config:
    """Main configuration class"""

    def __init__(self):
        self.app = AppConfig()


# Global config instance
config = Config()
