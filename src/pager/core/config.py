from pathlib import Path

from dotenv import load_dotenv
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pager.domain.entities.constants import (
    DEFAULT_BOUNDARY_COUNT,
    DEFAULT_SIBLING_COUNT,
    MAX_ROW_WIDTH,
    PAGE_SIZE,
)

# Загружаем .env из корня проекта
env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(env_path)


class BotConfig(BaseSettings):
    TOKEN: SecretStr

    model_config = SettingsConfigDict(env_file=str(env_path), env_file_encoding="utf-8", extra="allow")


class PaginationConfig(BaseSettings):
    """Настройки отображения пагинации."""
    SIBLING_COUNT: int = Field(default=DEFAULT_SIBLING_COUNT, ge=0)
    BOUNDARY_COUNT: int = Field(default=DEFAULT_BOUNDARY_COUNT, ge=0)
    ROW_WIDTH: int = Field(default=MAX_ROW_WIDTH, ge=1, le=MAX_ROW_WIDTH)

    # Демонстрационный список для /pages
    PAGE_SIZE: int = Field(default=PAGE_SIZE, ge=1)
    DEMO_ITEMS_TOTAL: int = Field(default=95, ge=0)

    model_config = SettingsConfigDict(env_file=str(env_path), env_file_encoding="utf-8", extra="allow")
