"""
Реализация репозитория отелей в памяти.
"""

from typing import Dict, List, Optional

from hotel_reservations.application.interfaces import HotelRepository
from hotel_reservations.domain import Hotel
from hotel_reservations.shared_kernel import DuplicateNameException, EntityId


class InMemoryHotelRepository(HotelRepository):
    """Хранит отели в памяти процесса в порядке добавления."""

    def __init__(self) -> None:
        self._hotels: Dict[EntityId, Hotel] = {}

    def add(self, hotel: Hotel) -> None:
        if hotel.id in self._hotels:
            raise ValueError(f"Hotel with id {hotel.id} already exists")
        if self.find_by_name(hotel.name) is not None:
            raise DuplicateNameException(hotel.name)
        self._hotels[hotel.id] = hotel

    def get_by_id(self, hotel_id: EntityId) -> Optional[Hotel]:
        return self._hotels.get(hotel_id)

    def find_by_name(self, name: str) -> Optional[Hotel]:
        key = name.strip().casefold()
        for hotel in self._hotels.values():
            if hotel.name.casefold() == key:
                return hotel
        return None

    def list_all(self) -> List[Hotel]:
        return list(self._hotels.values())
