"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database (MySQL)
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "school_management"
    db_port: int = 3306
    database_url: Optional[str] = None  # full SQLAlchemy URL, overrides DB_*

    # Connection pool
    db_pool_size: int = 10
    db_max_overflow: int = 5

    # HTTP server
    port: int = 5000
    max_body_bytes: int = 1_048_576  # 1 MB JSON body limit
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
