from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OFFSET_PAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # DEBUG level for configure_logging when true, INFO otherwise
    debug: bool = Field(default=False, description="DEBUG")
    # Renderer for configure_logging; unset means console in debug mode, JSON otherwise
    log_format: Literal["console", "json"] | None = Field(default=None, description="LOG_FORMAT")


@lru_cache
def get_settings() -> Settings:
    return Settings()
