"""
Доменный сервис бронирования.

Единственное место, где связываются состояние номера и список бронирований
отеля. Бронирование и отмена выполняются как одна операция: если запись
в отель не удалась, календарь номера возвращается в исходное состояние.
"""

from datetime import date

from hotel_reservations.shared_kernel import (
    ReservationNotFoundException,
    RoomNotFoundException,
    RoomUnavailableException,
    StayPeriod,
)

from .hotel import Hotel
from .reservation import Reservation


class BookingService:
    """Доменный сервис для работы с бронированиями."""

    def reserve(
        self,
        hotel: Hotel,
        guest_name: str,
        room_name: str,
        check_in: date,
        check_out: date,
    ) -> Reservation:
        """Бронирует номер для гостя на период (даты включительно)."""
        room = hotel.get_room(room_name)
        if room is None:
            raise RoomNotFoundException(room_name)

        period = StayPeriod(check_in=check_in, check_out=check_out)
        if not room.is_available_between(period.first_day, period.last_day):
            raise RoomUnavailableException(room_name, check_in, check_out)

        reservation = Reservation(guest_name=guest_name, room=room, period=period)
        previous = list(room.availability)
        room.book(period.first_day, period.last_day)
        try:
            hotel.add_reservation(reservation)
        except Exception:
            room.availability[:] = previous
            raise
        return reservation

    def cancel(self, hotel: Hotel, guest_name: str) -> Reservation:
        """Отменяет первое найденное бронирование гостя."""
        reservation = hotel.get_reservation(guest_name)
        if reservation is None:
            raise ReservationNotFoundException(guest_name)

        room = reservation.room
        previous = list(room.availability)
        room.cancel(reservation.period.first_day, reservation.period.last_day)
        try:
            hotel.discard_reservation(reservation)
        except Exception:
            room.availability[:] = previous
            raise
        return reservation

    def is_room_available(self, hotel: Hotel, room_name: str, period: StayPeriod) -> bool:
        """Проверяет, свободен ли номер на все дни периода."""
        room = hotel.get_room(room_name)
        if room is None:
            raise RoomNotFoundException(room_name)
        return room.is_available_between(period.first_day, period.last_day)
