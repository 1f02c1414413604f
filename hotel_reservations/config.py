"""Настройки приложения.

Используется pydantic-settings: значения по умолчанию можно переопределить
переменными окружения с префиксом ``HOTEL_``, например ``HOTEL_MAX_ROOMS=80``
или ``HOTEL_LOG_LEVEL=INFO``.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotel_reservations.domain import HotelPolicy


class HotelSettings(BaseSettings):
    """Настройки системы бронирования."""

    model_config = SettingsConfigDict(env_prefix="HOTEL_", env_file=".env", extra="ignore")

    min_rooms: int = Field(default=1, gt=0, description="Минимум номеров в новом отеле")
    max_rooms: int = Field(default=50, gt=0, description="Максимум номеров в новом отеле")
    default_base_price: float = Field(
        default=1299.00,
        ge=0,
        allow_inf_nan=False,
        description="Базовая цена, если она не указана или равна 0",
    )
    min_room_price: float = Field(
        default=100.00,
        ge=0,
        allow_inf_nan=False,
        description="Минимальная цена при изменении цены номера",
    )
    log_level: str = Field(default="WARNING", description="Уровень логирования")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return v

    @model_validator(mode="after")
    def check_room_bounds(self) -> "HotelSettings":
        if self.min_rooms > self.max_rooms:
            raise ValueError("min_rooms не может быть больше max_rooms")
        return self

    def to_policy(self) -> HotelPolicy:
        """Создает доменную политику из настроек."""
        return HotelPolicy(
            min_rooms=self.min_rooms,
            max_rooms=self.max_rooms,
            default_base_price=self.default_base_price,
            min_room_price=self.min_room_price,
        )
