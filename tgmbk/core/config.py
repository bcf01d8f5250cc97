import logging
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Tuple


logger = logging.getLogger(__name__)

WEEK_LENGTH = 7


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore", frozen=True)

    # Обязательные параметры окружения
    port: int
    tgmbk_token: str = Field(min_length=1)
    tgmbk_locations: str = Field(min_length=1)

    # Остальные настройки
    timezone: str = "Asia/Hong_Kong"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    telegram_api_url: str = Field(default="https://api.telegram.org")
    request_timeout: float = Field(default=30.0)

    @property
    def locations(self) -> Tuple[str, ...]:
        """Список мест завтрака по дням недели (Пн..Вс), без обрезки пробелов"""
        return tuple(self.tgmbk_locations.split(","))

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def warn_on_week_length(self) -> "Settings":
        count = len(self.tgmbk_locations.split(","))
        if count != WEEK_LENGTH:
            logger.warning(f"TGMBK_LOCATIONS содержит {count} мест вместо {WEEK_LENGTH}")
        return self


def load_settings() -> Settings:
    """Прочитать настройки из окружения (и .env) один раз при запуске"""
    return Settings()
