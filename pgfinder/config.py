from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os


class Settings(BaseSettings):
    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./pg_finder.db")

    # Security
    secret_key: str = os.getenv("JWT_SECRET", "your-secret-key-change-in-production")
    algorithm: str = "HS256"
    access_token_expire_days: int = 7
    password_hash_iterations: int = 240_000

    # App
    app_name: str = "PG Finder API"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
