from functools import partial
from typing import Optional

from hotel_reservations.application import HotelApplicationService
from hotel_reservations.application.event_handlers import (
    on_reservation_cancelled,
    on_reservation_made,
)
from hotel_reservations.config import HotelSettings
from hotel_reservations.domain import ReservationCancelled, ReservationMade
from hotel_reservations.infrastructure import (
    ConsoleLogger,
    InMemoryEventBus,
    InMemoryHotelRepository,
)


def bootstrap_app(settings: Optional[HotelSettings] = None) -> HotelApplicationService:
    """Создает и связывает все компоненты приложения."""
    settings = settings or HotelSettings()

    # 1. Инфраструктура
    logger = ConsoleLogger()
    event_bus = InMemoryEventBus(logger=logger)
    repository = InMemoryHotelRepository()

    # 2. Подписываем обработчики на события
    # partial передает логгер в обработчик
    event_bus.subscribe(ReservationMade, partial(on_reservation_made, logger=logger))
    event_bus.subscribe(
        ReservationCancelled, partial(on_reservation_cancelled, logger=logger)
    )

    # 3. Сервис приложения с политиками из конфигурации
    return HotelApplicationService(
        repository=repository,
        event_bus=event_bus,
        logger=logger,
        policy=settings.to_policy(),
    )
