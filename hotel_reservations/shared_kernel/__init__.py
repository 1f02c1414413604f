"""
Общее ядро (Shared Kernel) системы бронирования отелей.

Содержит общие типы данных, исключения и утилиты, используемые во всех слоях.
"""

from .domain import (
    DAYS_IN_MONTH,
    BusinessRuleValidationException,
    DomainEvent,
    # Исключения
    DomainException,
    DuplicateNameException,
    # Базовые типы
    EntityId,
    EntityNotFoundException,
    HasActiveReservationsException,
    HotelNotFoundException,
    InvalidRangeException,
    ReservationNotFoundException,
    RoomNotFoundException,
    RoomUnavailableException,
    # Основные классы
    StayPeriod,
    check_day,
    generate_id,
    # Утилиты
    now,
    today,
)

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "DAYS_IN_MONTH",
    # Основные классы
    "StayPeriod",
    "DomainEvent",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "DuplicateNameException",
    "InvalidRangeException",
    "HasActiveReservationsException",
    "RoomUnavailableException",
    "EntityNotFoundException",
    "HotelNotFoundException",
    "RoomNotFoundException",
    "ReservationNotFoundException",
    # Утилиты
    "check_day",
    "now",
    "today",
]
