"""
Настройки приложения.

Значения читаются из переменных окружения с префиксом ``TRAVEL_BOOKING_``
и из файла ``.env``, если он есть.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Конфигурация сервера и клиентских форм."""

    # Клиент (формы бронирования и отзывов)
    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the booking API consumed by the client forms",
    )
    booking_create_path: str = "/api/booking/create"
    review_add_path: str = "/api/reviews/add"
    request_timeout: float = Field(default=10.0, gt=0)

    # Сервер
    storage_backend: Literal["memory", "json"] = "memory"
    data_dir: Path = Path("data")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TRAVEL_BOOKING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Возвращает закэшированный экземпляр настроек."""
    return Settings()
