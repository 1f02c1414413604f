"""
Бронирование номера гостем на период внутри месяца.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from hotel_reservations.shared_kernel import StayPeriod

from .room import Room


class Reservation(BaseModel):
    """Неизменяемая запись о бронировании.

    Ссылается на номер отеля, но не владеет им: номер принадлежит Hotel.
    Отмена выполняется BookingService, сама запись не меняется.
    """

    model_config = ConfigDict(frozen=True)

    guest_name: str = Field(..., min_length=1)
    room: Room
    period: StayPeriod

    @property
    def check_in(self) -> date:
        return self.period.check_in

    @property
    def check_out(self) -> date:
        return self.period.check_out

    @property
    def nights(self) -> int:
        return self.period.nights

    @property
    def total_price(self) -> float:
        """Стоимость по текущей цене номера."""
        return self.room.price_per_night * self.nights

    def references(self, room_name: str) -> bool:
        return self.room.name == room_name
