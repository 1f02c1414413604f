"""
Доменный слой: номера, бронирования, агрегат "Отель" и сервис бронирования.
"""

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
from .hotel import Hotel, HotelPolicy
from .reservation import Reservation
from .room import Room, RoomType
from .services import BookingService

__all__ = [
    "Room",
    "RoomType",
    "Reservation",
    "Hotel",
    "HotelPolicy",
    "BookingService",
    "HotelCreated",
    "HotelRenamed",
    "RoomAdded",
    "RoomRemoved",
    "BasePriceChanged",
    "RoomPriceChanged",
    "ReservationMade",
    "ReservationCancelled",
]
