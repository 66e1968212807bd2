import logging
from typing import Literal

from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "croptrack"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Observability Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    LOG_CORRELATION_ID: bool = True

    @model_validator(mode="after")
    def _normalize_log_level(self) -> Self:
        level = self.LOG_LEVEL.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.LOG_LEVEL}")
        self.LOG_LEVEL = level
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


settings = Settings()  # type: ignore
