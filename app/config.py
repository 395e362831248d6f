import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    api_base_url: str = Field(default="https://rickandmortyapi.com/api/", alias="API_BASE_URL")
    character_resource: str = Field(default="character", alias="CHARACTER_RESOURCE")
    load_on_startup: bool = Field(default=True, alias="LOAD_ON_STARTUP")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if not self.api_base_url.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must be an http(s) URL")
        if not self.api_base_url.endswith("/"):
            raise ValueError("API_BASE_URL must end with '/'")
        if not self.character_resource.strip():
            raise ValueError("CHARACTER_RESOURCE is required")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL is not a known level: {self.log_level}")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
