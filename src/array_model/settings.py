from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="ARRAY_MODEL_",      # ARRAY_MODEL_LOG_LEVEL
        extra = "ignore"
    )


def get_settings() -> Settings:
    """Build settings from the environment (and .env if present)."""
    return Settings()
