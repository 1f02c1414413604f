"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime
from typing import Iterator
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Общие типы идентификаторов
EntityId = UUID

# Календарь доступности номера покрывает один условный месяц.
# Месяцы короче 31 дня все равно имеют слоты 29-31.
DAYS_IN_MONTH = 31


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class DuplicateNameException(BusinessRuleValidationException):
    """Имя отеля или номера уже занято."""

    def __init__(self, name: str, scope: str = "Отель"):
        super().__init__(f"{scope} с названием '{name}' уже существует.")
        self.name = name


class InvalidRangeException(BusinessRuleValidationException):
    """Значение вне допустимого диапазона."""

    pass


class HasActiveReservationsException(BusinessRuleValidationException):
    """Операция запрещена, пока есть бронирования."""

    pass


class RoomUnavailableException(BusinessRuleValidationException):
    """Номер занят хотя бы в один из дней периода."""

    def __init__(self, room_name: str, check_in: date, check_out: date):
        super().__init__(
            f"Номер '{room_name}' недоступен с {check_in.isoformat()} "
            f"по {check_out.isoformat()}."
        )
        self.room_name = room_name
        self.check_in = check_in
        self.check_out = check_out


class EntityNotFoundException(DomainException):
    """Базовое исключение для не найденных сущностей."""

    pass


class HotelNotFoundException(EntityNotFoundException):
    def __init__(self, hotel_name: str):
        super().__init__(f"Отель '{hotel_name}' не найден.")
        self.hotel_name = hotel_name


class RoomNotFoundException(EntityNotFoundException):
    def __init__(self, room_name: str):
        super().__init__(f"Номер '{room_name}' не найден.")
        self.room_name = room_name


class ReservationNotFoundException(EntityNotFoundException):
    def __init__(self, guest_name: str):
        super().__init__(f"Бронирование гостя '{guest_name}' не найдено.")
        self.guest_name = guest_name


def check_day(day: int) -> int:
    """Проверяет, что день попадает в календарь месяца."""
    if not 1 <= day <= DAYS_IN_MONTH:
        raise InvalidRangeException(
            f"День должен быть в диапазоне от 1 до {DAYS_IN_MONTH}, получено {day}."
        )
    return day


class StayPeriod(BaseModel):
    """Период проживания внутри одного месяца (даты включительно)."""

    model_config = ConfigDict(frozen=True)

    check_in: date
    check_out: date

    @model_validator(mode="after")
    def check_range(self) -> "StayPeriod":
        if self.check_out < self.check_in:
            raise InvalidRangeException(
                "Дата выезда не может быть раньше даты заезда."
            )
        if (self.check_in.year, self.check_in.month) != (
            self.check_out.year,
            self.check_out.month,
        ):
            raise InvalidRangeException(
                "Бронирование должно начинаться и заканчиваться в одном месяце."
            )
        return self

    @property
    def first_day(self) -> int:
        return self.check_in.day

    @property
    def last_day(self) -> int:
        return self.check_out.day

    @property
    def nights(self) -> int:
        """Количество ночей (разница в днях между выездом и заездом)."""
        return self.check_out.toordinal() - self.check_in.toordinal()

    def days(self) -> Iterator[int]:
        return iter(range(self.first_day, self.last_day + 1))


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=lambda: now())

    @property
    def event_type(self) -> str:
        return type(self).__name__


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now()


def today() -> date:
    """Возвращает текущую дату."""
    return date.today()
