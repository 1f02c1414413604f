"""
Прикладной слой: сценарии использования, DTO и порты.
"""

from .interfaces import HotelRepository, IEventBus, ILogger
from .services import (
    AddRoomRequest,
    AvailabilityDTO,
    CreateHotelRequest,
    HotelApplicationService,
    HotelSummaryDTO,
    ReservationDTO,
    ReserveRoomRequest,
    RoomDTO,
)

__all__ = [
    "HotelRepository",
    "IEventBus",
    "ILogger",
    "HotelApplicationService",
    "CreateHotelRequest",
    "AddRoomRequest",
    "ReserveRoomRequest",
    "HotelSummaryDTO",
    "RoomDTO",
    "ReservationDTO",
    "AvailabilityDTO",
]
