from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Publishing Workflow"
    debug: bool = False

    # Configuration file, used when --config is not given
    config_path: Optional[str] = None

    # Logging
    log_level: Optional[str] = None

    @property
    def effective_log_level(self) -> Optional[str]:
        if self.debug:
            return "DEBUG"
        return self.log_level

    model_config = SettingsConfigDict(
        env_prefix="PUBLISHING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
