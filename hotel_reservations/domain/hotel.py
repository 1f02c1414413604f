"""
Агрегат "Отель".

Отель владеет своими номерами и бронированиями и следит за инвариантами:
- названия номеров уникальны внутри отеля;
- номер, на который есть бронирования, нельзя удалить или переоценить;
- базовую цену нельзя менять, пока у отеля есть бронирования.

Уникальность названия отеля среди всех отелей проверяет сервис приложения,
так как для этого нужна вся коллекция.
"""

import math
from datetime import date
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from hotel_reservations.shared_kernel import (
    DomainEvent,
    DuplicateNameException,
    EntityId,
    HasActiveReservationsException,
    InvalidRangeException,
    RoomNotFoundException,
    generate_id,
)

from .events import (
    BasePriceChanged,
    HotelCreated,
    HotelRenamed,
    ReservationCancelled,
    ReservationMade,
    RoomAdded,
    RoomPriceChanged,
    RoomRemoved,
)
from .reservation import Reservation
from .room import Room, RoomType


def check_price(price: float, label: str = "Цена номера") -> float:
    """Цена должна быть конечным неотрицательным числом."""
    if not math.isfinite(price):
        raise InvalidRangeException(f"{label} должна быть конечным числом.")
    if price < 0:
        raise InvalidRangeException(f"{label} не может быть отрицательной.")
    return price


class HotelPolicy(BaseModel):
    """Политики и ограничения для отелей и номеров."""

    model_config = ConfigDict(frozen=True)

    min_rooms: int = Field(1, gt=0)
    max_rooms: int = Field(50, gt=0)
    default_base_price: float = Field(1299.00, ge=0, allow_inf_nan=False)
    min_room_price: float = Field(100.00, ge=0, allow_inf_nan=False)

    def validate_room_count(self, room_count: int) -> None:
        if not self.min_rooms <= room_count <= self.max_rooms:
            raise InvalidRangeException(
                f"Количество номеров должно быть от {self.min_rooms} "
                f"до {self.max_rooms}."
            )

    def resolve_base_price(self, base_price: Optional[float]) -> float:
        """Возвращает базовую цену; 0 или None означают цену по умолчанию."""
        if base_price is None or base_price == 0:
            return self.default_base_price
        return check_price(base_price, "Базовая цена")

    def validate_room_price(self, price: float) -> None:
        check_price(price)
        if price < self.min_room_price:
            raise InvalidRangeException(
                f"Цена номера не может быть ниже {self.min_room_price:.2f}."
            )


class Hotel(BaseModel):
    """Отель. Корень агрегата."""

    model_config = ConfigDict(validate_assignment=True)

    id: EntityId = Field(default_factory=generate_id)
    name: str = Field(..., min_length=1)
    base_price: float = Field(..., ge=0, allow_inf_nan=False)
    _rooms: List[Room] = PrivateAttr(default_factory=list)
    _reservations: List[Reservation] = PrivateAttr(default_factory=list)
    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        room_count: int,
        base_price: Optional[float] = None,
        policy: Optional[HotelPolicy] = None,
    ) -> "Hotel":
        """Создает отель с номерами "Room 1".."Room N" по базовой цене."""
        policy = policy or HotelPolicy()
        policy.validate_room_count(room_count)
        price = policy.resolve_base_price(base_price)

        hotel = cls(name=name, base_price=price)
        for number in range(1, room_count + 1):
            hotel._rooms.append(Room(name=f"Room {number}", price_per_night=price))

        hotel._record(
            HotelCreated(
                hotel_id=hotel.id,
                name=hotel.name,
                room_count=room_count,
                base_price=price,
            )
        )
        return hotel

    @property
    def rooms(self) -> List[Room]:
        return list(self._rooms)

    @property
    def reservations(self) -> List[Reservation]:
        return list(self._reservations)

    # --- Номера ---

    def add_room(self, room: Room) -> None:
        if self.get_room(room.name) is not None:
            raise DuplicateNameException(room.name, scope="Номер")
        self._rooms.append(room)
        self._record(
            RoomAdded(
                hotel_id=self.id,
                room_name=room.name,
                room_type=room.room_type.value,
                price_per_night=room.price_per_night,
            )
        )

    def new_room(
        self,
        name: str,
        room_type: RoomType = RoomType.STANDARD,
        price: Optional[float] = None,
    ) -> Room:
        """Создает номер (по умолчанию по базовой цене отеля) и добавляет его."""
        if price is None:
            price = self.base_price
        check_price(price)
        room = Room(name=name, price_per_night=price, room_type=room_type)
        self.add_room(room)
        return room

    def remove_room(self, room_name: str) -> bool:
        """Удаляет номер, если на него нет бронирований.

        Сравнение названий точное, с учетом регистра. Если номер не найден
        или на него есть бронирования, ничего не происходит.
        """
        room = self.get_room(room_name)
        if room is None or self.has_reservations_for(room_name):
            return False
        self._rooms.remove(room)
        self._record(RoomRemoved(hotel_id=self.id, room_name=room_name))
        return True

    def rename_room(self, room_name: str, new_name: str) -> Room:
        room = self._require_room(room_name)
        if new_name != room_name and self.get_room(new_name) is not None:
            raise DuplicateNameException(new_name, scope="Номер")
        room.rename(new_name)
        return room

    def get_room(self, room_name: str) -> Optional[Room]:
        for room in self._rooms:
            if room.name == room_name:
                return room
        return None

    def _require_room(self, room_name: str) -> Room:
        room = self.get_room(room_name)
        if room is None:
            raise RoomNotFoundException(room_name)
        return room

    # --- Отель ---

    def rename(self, new_name: str) -> None:
        old_name = self.name
        self.name = new_name
        self._record(HotelRenamed(hotel_id=self.id, old_name=old_name, new_name=new_name))

    def update_base_price(self, price: float) -> None:
        """Меняет базовую цену. Цены существующих номеров не меняются."""
        if not self.has_no_reservations():
            raise HasActiveReservationsException(
                "Нельзя изменить базовую цену, пока у отеля есть бронирования."
            )
        check_price(price, "Базовая цена")
        old_price = self.base_price
        self.base_price = price
        self._record(
            BasePriceChanged(hotel_id=self.id, old_price=old_price, new_price=price)
        )

    def update_room_price(
        self, room_name: str, price: float, policy: Optional[HotelPolicy] = None
    ) -> Room:
        policy = policy or HotelPolicy()
        room = self._require_room(room_name)
        policy.validate_room_price(price)
        if self.has_reservations_for(room_name):
            raise HasActiveReservationsException(
                f"Нельзя изменить цену номера '{room_name}', пока на него есть бронирования."
            )
        old_price = room.price_per_night
        room.price_per_night = price
        self._record(
            RoomPriceChanged(
                hotel_id=self.id,
                room_name=room_name,
                old_price=old_price,
                new_price=price,
            )
        )
        return room

    # --- Бронирования ---

    def add_reservation(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)
        self._record(
            ReservationMade(
                hotel_id=self.id,
                guest_name=reservation.guest_name,
                room_name=reservation.room.name,
                check_in=reservation.check_in,
                check_out=reservation.check_out,
            )
        )

    def remove_reservation(self, guest_name: str) -> List[Reservation]:
        """Удаляет все бронирования гостя (ноль или больше).

        Состояние номеров не меняется, календарь освобождает BookingService.
        """
        removed = [r for r in self._reservations if r.guest_name == guest_name]
        for reservation in removed:
            self.discard_reservation(reservation)
        return removed

    def discard_reservation(self, reservation: Reservation) -> bool:
        # Ищем по идентичности: одинаковые по полям записи допустимы
        for index, existing in enumerate(self._reservations):
            if existing is reservation:
                del self._reservations[index]
                self._record(
                    ReservationCancelled(
                        hotel_id=self.id,
                        guest_name=reservation.guest_name,
                        room_name=reservation.room.name,
                        check_in=reservation.check_in,
                        check_out=reservation.check_out,
                    )
                )
                return True
        return False

    def get_reservation(self, guest_name: str) -> Optional[Reservation]:
        for reservation in self._reservations:
            if reservation.guest_name == guest_name:
                return reservation
        return None

    def reservations_for(self, room_name: str) -> List[Reservation]:
        return [r for r in self._reservations if r.references(room_name)]

    def has_reservations_for(self, room_name: str) -> bool:
        return any(r.references(room_name) for r in self._reservations)

    def has_no_reservations(self) -> bool:
        return not self._reservations

    # --- Запросы ---

    def availability_on(self, day: date) -> Tuple[int, int]:
        """Возвращает (свободно, занято) номеров на указанную дату."""
        available = sum(1 for room in self._rooms if room.is_available(day.day))
        return available, len(self._rooms) - available

    def estimated_earnings(self) -> float:
        """Ожидаемая выручка за месяц по всем бронированиям."""
        return sum((r.total_price for r in self._reservations), 0.0)

    # --- События ---

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def __str__(self) -> str:
        return (
            f"Hotel(name='{self.name}', rooms={len(self._rooms)}, "
            f"reservations={len(self._reservations)}, base_price={self.base_price})"
        )
