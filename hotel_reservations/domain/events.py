from datetime import date

from hotel_reservations.shared_kernel import DomainEvent, EntityId


class HotelCreated(DomainEvent):
    hotel_id: EntityId
    name: str
    room_count: int
    base_price: float


class HotelRenamed(DomainEvent):
    hotel_id: EntityId
    old_name: str
    new_name: str


class RoomAdded(DomainEvent):
    hotel_id: EntityId
    room_name: str
    room_type: str
    price_per_night: float


class RoomRemoved(DomainEvent):
    hotel_id: EntityId
    room_name: str


class BasePriceChanged(DomainEvent):
    hotel_id: EntityId
    old_price: float
    new_price: float


class RoomPriceChanged(DomainEvent):
    hotel_id: EntityId
    room_name: str
    old_price: float
    new_price: float


class ReservationMade(DomainEvent):
    hotel_id: EntityId
    guest_name: str
    room_name: str
    check_in: date
    check_out: date


class ReservationCancelled(DomainEvent):
    hotel_id: EntityId
    guest_name: str
    room_name: str
    check_in: date
    check_out: date
