"""
Прикладной слой системы бронирования отелей.

Содержит DTO и сервис приложения, который координирует
взаимодействие между внешними интерфейсами и доменной моделью.
"""

import threading
from contextlib import contextmanager
from datetime import date
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field, field_validator

from hotel_reservations.domain import (
    BookingService,
    Hotel,
    HotelPolicy,
    Reservation,
    Room,
    RoomType,
)
from hotel_reservations.shared_kernel import (
    DomainException,
    DuplicateNameException,
    EntityId,
    HasActiveReservationsException,
    HotelNotFoundException,
    ReservationNotFoundException,
    RoomNotFoundException,
    today,
)

from . import interfaces as ports

# DTO (Data Transfer Objects) для входящих данных


class CreateHotelRequest(BaseModel):
    """Запрос на создание отеля."""

    name: str = Field(..., min_length=1)
    room_count: int
    base_price: Optional[float] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Название отеля не может быть пустым")
        return v


class AddRoomRequest(BaseModel):
    """Запрос на добавление номера в отель."""

    hotel_name: str
    room_name: str = Field(..., min_length=1)
    room_type: RoomType = RoomType.STANDARD
    price: Optional[float] = None

    @field_validator("room_type", mode="before")
    @classmethod
    def parse_room_type(cls, v):
        if isinstance(v, str):
            return RoomType.parse(v)
        return v


class ReserveRoomRequest(BaseModel):
    """Запрос на бронирование номера. Даты в формате YYYY-MM-DD."""

    hotel_name: str
    guest_name: str = Field(..., min_length=1)
    room_name: str
    check_in: date
    check_out: date


# DTO для исходящих данных


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    name: str
    room_type: RoomType
    price_per_night: float
    is_available: bool
    available_days: List[int]
    booked_days: List[int]

    @classmethod
    def from_domain(cls, room: Room, on: Optional[date] = None) -> "RoomDTO":
        """Создает DTO из доменной модели; статус считается на дату `on`."""
        on = on or today()
        return cls(
            name=room.name,
            room_type=room.room_type,
            price_per_night=room.price_per_night,
            is_available=room.is_available(on.day),
            available_days=room.available_days(),
            booked_days=room.booked_days(),
        )


class ReservationDTO(BaseModel):
    """DTO для представления бронирования."""

    guest_name: str
    room_name: str
    check_in: date
    check_out: date
    nights: int
    total_price: float

    @classmethod
    def from_domain(cls, reservation: Reservation) -> "ReservationDTO":
        return cls(
            guest_name=reservation.guest_name,
            room_name=reservation.room.name,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            nights=reservation.nights,
            total_price=reservation.total_price,
        )


class HotelSummaryDTO(BaseModel):
    """Общая информация об отеле."""

    id: EntityId
    name: str
    base_price: float
    room_count: int
    reservation_count: int
    estimated_earnings: float

    @classmethod
    def from_domain(cls, hotel: Hotel) -> "HotelSummaryDTO":
        return cls(
            id=hotel.id,
            name=hotel.name,
            base_price=hotel.base_price,
            room_count=len(hotel.rooms),
            reservation_count=len(hotel.reservations),
            estimated_earnings=hotel.estimated_earnings(),
        )


class AvailabilityDTO(BaseModel):
    """Количество свободных и занятых номеров на дату."""

    on: date
    available_rooms: int
    booked_rooms: int


# Сервисы приложения


class HotelApplicationService:
    """Сервис приложения для управления отелями, номерами и бронированиями.

    Изменения одного отеля выполняются под его блокировкой, поэтому пара
    "занять дни номера + записать бронирование" остается атомарной и при
    одновременных вызовах. После успешной операции доменные события
    агрегата публикуются в шину событий.
    """

    def __init__(
        self,
        repository: ports.HotelRepository,
        event_bus: ports.IEventBus,
        logger: ports.ILogger,
        policy: Optional[HotelPolicy] = None,
    ):
        self._repository = repository
        self._event_bus = event_bus
        self._logger = logger
        self._policy = policy or HotelPolicy()
        self._booking_service = BookingService()
        self._registry_lock = threading.RLock()
        self._hotel_locks: Dict[EntityId, threading.RLock] = {}

    @property
    def policy(self) -> HotelPolicy:
        return self._policy

    # --- Отели ---

    def create_hotel(self, request: CreateHotelRequest) -> HotelSummaryDTO:
        """Создает отель с уникальным (без учета регистра) названием."""
        with self._registry_lock:
            try:
                if self._repository.name_taken(request.name):
                    raise DuplicateNameException(request.name)
                hotel = Hotel.create(
                    name=request.name,
                    room_count=request.room_count,
                    base_price=request.base_price,
                    policy=self._policy,
                )
                self._repository.add(hotel)
            except DomainException as e:
                self._logger.warning("Не удалось создать отель", error=str(e))
                raise

        self._publish_events(hotel)
        self._logger.info(
            f"Отель '{hotel.name}' создан", rooms=len(hotel.rooms), base_price=hotel.base_price
        )
        return HotelSummaryDTO.from_domain(hotel)

    def rename_hotel(self, hotel_name: str, new_name: str) -> HotelSummaryDTO:
        """Переименовывает отель. Новое название должно быть уникальным."""
        new_name = new_name.strip()
        with self._registry_lock:
            hotel = self._get_hotel(hotel_name)
            with self._unit_of_work(hotel, "rename_hotel"):
                if self._repository.name_taken(new_name, exclude=hotel.id):
                    raise DuplicateNameException(new_name)
                hotel.rename(new_name)
        return HotelSummaryDTO.from_domain(hotel)

    def update_base_price(self, hotel_name: str, price: float) -> HotelSummaryDTO:
        hotel = self._get_hotel(hotel_name)
        with self._unit_of_work(hotel, "update_base_price"):
            hotel.update_base_price(price)
        return HotelSummaryDTO.from_domain(hotel)

    def list_hotels(self) -> List[HotelSummaryDTO]:
        return [HotelSummaryDTO.from_domain(h) for h in self._repository.list_all()]

    def get_hotel_summary(self, hotel_name: str) -> HotelSummaryDTO:
        return HotelSummaryDTO.from_domain(self._get_hotel(hotel_name))

    # --- Номера ---

    def add_room(self, request: AddRoomRequest) -> RoomDTO:
        """Добавляет номер; без цены используется базовая цена отеля."""
        hotel = self._get_hotel(request.hotel_name)
        with self._unit_of_work(hotel, "add_room"):
            room = hotel.new_room(
                name=request.room_name,
                room_type=request.room_type,
                price=request.price,
            )
        return RoomDTO.from_domain(room)

    def remove_room(self, hotel_name: str, room_name: str) -> None:
        """Удаляет номер, если на него нет бронирований."""
        hotel = self._get_hotel(hotel_name)
        with self._unit_of_work(hotel, "remove_room"):
            if hotel.get_room(room_name) is None:
                raise RoomNotFoundException(room_name)
            if hotel.has_reservations_for(room_name):
                raise HasActiveReservationsException(
                    f"Нельзя удалить номер '{room_name}', пока на него есть бронирования."
                )
            hotel.remove_room(room_name)

    def rename_room(self, hotel_name: str, room_name: str, new_name: str) -> RoomDTO:
        hotel = self._get_hotel(hotel_name)
        with self._unit_of_work(hotel, "rename_room"):
            room = hotel.rename_room(room_name, new_name)
        return RoomDTO.from_domain(room)

    def update_room_price(self, hotel_name: str, room_name: str, price: float) -> RoomDTO:
        """Меняет цену номера (не ниже минимальной, без бронирований на номер)."""
        hotel = self._get_hotel(hotel_name)
        with self._unit_of_work(hotel, "update_room_price"):
            room = hotel.update_room_price(room_name, price, policy=self._policy)
        return RoomDTO.from_domain(room)

    def list_rooms(self, hotel_name: str, on: Optional[date] = None) -> List[RoomDTO]:
        hotel = self._get_hotel(hotel_name)
        return [RoomDTO.from_domain(room, on) for room in hotel.rooms]

    def room_availability(self, hotel_name: str, on: date) -> AvailabilityDTO:
        """Количество свободных и занятых номеров на дату."""
        hotel = self._get_hotel(hotel_name)
        available, booked = hotel.availability_on(on)
        return AvailabilityDTO(on=on, available_rooms=available, booked_rooms=booked)

    # --- Бронирования ---

    def reserve(self, request: ReserveRoomRequest) -> ReservationDTO:
        """Бронирует номер для гостя."""
        hotel = self._get_hotel(request.hotel_name)
        with self._unit_of_work(hotel, "reserve"):
            reservation = self._booking_service.reserve(
                hotel,
                guest_name=request.guest_name,
                room_name=request.room_name,
                check_in=request.check_in,
                check_out=request.check_out,
            )
        return ReservationDTO.from_domain(reservation)

    def cancel_reservation(self, hotel_name: str, guest_name: str) -> ReservationDTO:
        """Отменяет первое найденное бронирование гостя."""
        hotel = self._get_hotel(hotel_name)
        with self._unit_of_work(hotel, "cancel_reservation"):
            reservation = self._booking_service.cancel(hotel, guest_name)
        return ReservationDTO.from_domain(reservation)

    def room_reservations(self, hotel_name: str, room_name: str) -> List[ReservationDTO]:
        hotel = self._get_hotel(hotel_name)
        if hotel.get_room(room_name) is None:
            raise RoomNotFoundException(room_name)
        return [ReservationDTO.from_domain(r) for r in hotel.reservations_for(room_name)]

    def reservation_details(self, hotel_name: str, guest_name: str) -> ReservationDTO:
        hotel = self._get_hotel(hotel_name)
        reservation = hotel.get_reservation(guest_name)
        if reservation is None:
            raise ReservationNotFoundException(guest_name)
        return ReservationDTO.from_domain(reservation)

    def estimated_earnings(self, hotel_name: str) -> float:
        return self._get_hotel(hotel_name).estimated_earnings()

    # --- Вспомогательные методы ---

    def _get_hotel(self, hotel_name: str) -> Hotel:
        hotel = self._repository.find_by_name(hotel_name)
        if hotel is None:
            raise HotelNotFoundException(hotel_name)
        return hotel

    def _lock_for(self, hotel: Hotel) -> threading.RLock:
        with self._registry_lock:
            return self._hotel_locks.setdefault(hotel.id, threading.RLock())

    @contextmanager
    def _unit_of_work(self, hotel: Hotel, operation: str) -> Iterator[Hotel]:
        """Выполняет операцию над отелем под его блокировкой.

        При успехе публикует накопленные события, при доменной ошибке
        пишет предупреждение и пробрасывает исключение дальше.
        """
        with self._lock_for(hotel):
            try:
                yield hotel
            except DomainException as e:
                self._logger.warning(
                    f"Операция {operation} отклонена", hotel=hotel.name, error=str(e)
                )
                raise
            self._publish_events(hotel)
            self._logger.debug(f"Операция {operation} выполнена", hotel=hotel.name)

    def _publish_events(self, hotel: Hotel) -> None:
        for event in hotel.pull_domain_events():
            self._event_bus.publish(event)
