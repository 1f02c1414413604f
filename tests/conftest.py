"""
Общие фикстуры для тестов.
"""

from datetime import date
from typing import Callable
from unittest.mock import MagicMock

import pytest

from hotel_reservations.application import HotelApplicationService
from hotel_reservations.domain import BookingService, Hotel, HotelPolicy
from hotel_reservations.infrastructure import InMemoryHotelRepository


@pytest.fixture
def policy() -> HotelPolicy:
    return HotelPolicy()


@pytest.fixture
def hotel(policy: HotelPolicy) -> Hotel:
    """Отель "Aurora" с пятью номерами по 1299.00."""
    hotel = Hotel.create("Aurora", room_count=5, base_price=1299.00, policy=policy)
    hotel.pull_domain_events()
    return hotel


@pytest.fixture
def booking_service() -> BookingService:
    return BookingService()


@pytest.fixture
def june() -> Callable[[int], date]:
    """Возвращает дату июня 2024 по номеру дня."""
    return lambda day: date(2024, 6, day)


@pytest.fixture
def repository() -> InMemoryHotelRepository:
    return InMemoryHotelRepository()


@pytest.fixture
def mock_event_bus() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(
    repository: InMemoryHotelRepository,
    mock_event_bus: MagicMock,
    mock_logger: MagicMock,
) -> HotelApplicationService:
    """Сервис приложения с реальным репозиторием и мокированными портами."""
    return HotelApplicationService(
        repository=repository, event_bus=mock_event_bus, logger=mock_logger
    )

