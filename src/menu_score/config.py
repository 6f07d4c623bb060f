"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from menu_score.domain.scoring import ReferenceSet

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    default_reference_set: ReferenceSet = ReferenceSet.MEAL
    reject_duplicate_customizations: bool = False
    swap_suggestion_limit: int = 5
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
