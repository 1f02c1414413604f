"""
Интерфейсы (порты) прикладного слоя.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Protocol, Type, TypeVar

from hotel_reservations.domain import Hotel
from hotel_reservations.shared_kernel import DomainEvent, EntityId

T_Event = TypeVar("T_Event", bound=DomainEvent)


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IEventBus(Protocol):
    """Интерфейс для шины событий."""

    def publish(self, event: DomainEvent) -> None: ...
    def subscribe(
        self, event_type: Type[T_Event], handler: Callable[[T_Event], None]
    ) -> None: ...


class HotelRepository(ABC):
    """Абстрактный репозиторий для агрегата Hotel.

    Хранит отели в порядке добавления. Поиск по названию без учета регистра.
    """

    @abstractmethod
    def add(self, hotel: Hotel) -> None:
        """Добавляет новый отель."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, hotel_id: EntityId) -> Optional[Hotel]:
        raise NotImplementedError

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Hotel]:
        """Находит отель по названию без учета регистра."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Hotel]:
        raise NotImplementedError

    def name_taken(self, name: str, exclude: Optional[EntityId] = None) -> bool:
        """Проверяет, занято ли название другим отелем."""
        hotel = self.find_by_name(name)
        return hotel is not None and hotel.id != exclude
