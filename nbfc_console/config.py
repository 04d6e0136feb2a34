"""Configuration management using Pydantic Settings"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./nbfc_console.db"
    seed_sample_data: bool = True

    # Service
    service_name: str = "nbfc-console"
    log_level: str = "INFO"

    # Access control
    role_permissions_path: Optional[str] = None  # JSON {role: [permission, ...]}; default table when unset
    role_header: str = "X-User-Role"

    # Disbursement simulator
    disbursement_success_rate: float = 0.7
    disbursement_max_retries: int = 3


settings = Settings()
