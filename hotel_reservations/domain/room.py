"""
Номер отеля и его календарь доступности.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from hotel_reservations.shared_kernel import DAYS_IN_MONTH, check_day


class RoomType(str, Enum):
    """Тип номера. Только описательная метка, на поведение не влияет."""

    STANDARD = "standard"
    DELUXE = "deluxe"

    @classmethod
    def parse(cls, value: str) -> "RoomType":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Неизвестный тип номера '{value}'. Допустимо: Standard или Deluxe."
            )


class Room(BaseModel):
    """Номер в отеле.

    Доступность хранится флагом на каждый день условного месяца (1-31).
    Номер сам не проверяет, свободны ли дни перед бронированием:
    это делает BookingService.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., min_length=1)
    price_per_night: float = Field(..., ge=0, allow_inf_nan=False)
    room_type: RoomType = RoomType.STANDARD
    availability: List[bool] = Field(
        default_factory=lambda: [True] * DAYS_IN_MONTH,
        min_length=DAYS_IN_MONTH,
        max_length=DAYS_IN_MONTH,
    )

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def is_available(self, day: int) -> bool:
        """Проверяет, свободен ли номер в указанный день месяца."""
        return self.availability[check_day(day) - 1]

    def is_available_between(self, start_day: int, end_day: int) -> bool:
        """Проверяет, свободен ли номер во все дни диапазона включительно.

        Перевернутый диапазон пуст и считается свободным.
        """
        if start_day > end_day:
            return True
        check_day(start_day)
        check_day(end_day)
        return all(self.availability[start_day - 1 : end_day])

    def book(self, start_day: int, end_day: int) -> None:
        """Помечает дни диапазона занятыми без повторной проверки."""
        self._fill(start_day, end_day, False)

    def cancel(self, start_day: int, end_day: int) -> None:
        """Освобождает дни диапазона."""
        self._fill(start_day, end_day, True)

    def available_days(self) -> List[int]:
        return [day for day, free in enumerate(self.availability, start=1) if free]

    def booked_days(self) -> List[int]:
        return [day for day, free in enumerate(self.availability, start=1) if not free]

    def _fill(self, start_day: int, end_day: int, value: bool) -> None:
        if start_day > end_day:
            return
        check_day(start_day)
        check_day(end_day)
        for index in range(start_day - 1, end_day):
            # Изменяем список на месте, минуя validate_assignment
            self.availability[index] = value

    def __str__(self) -> str:
        return f"Room(name='{self.name}', price_per_night={self.price_per_night})"
