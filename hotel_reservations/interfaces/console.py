"""
Консольный интерфейс (слой представления).

Меню верхнего уровня, просмотр информации об отелях, управление отелем
и симуляция бронирований. Вся бизнес-логика делегируется
HotelApplicationService; здесь только ввод, разбор и вывод.
"""

import math
from datetime import date
from typing import Callable, Optional

from pydantic import ValidationError

from hotel_reservations.application import (
    AddRoomRequest,
    CreateHotelRequest,
    HotelApplicationService,
    ReserveRoomRequest,
)
from hotel_reservations.domain import RoomType
from hotel_reservations.shared_kernel import DomainException

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class ExitRequested(Exception):
    """Пользователь завершил ввод (выход из меню или конец потока)."""


def describe_error(error: Exception) -> str:
    if isinstance(error, ValidationError):
        first = error.errors()[0]
        return str(first.get("msg", error))
    return str(error)


class ConsoleApp:
    """Интерактивное меню системы бронирования."""

    def __init__(
        self,
        service: HotelApplicationService,
        input_func: InputFunc = input,
        output_func: OutputFunc = print,
    ):
        self._service = service
        self._input = input_func
        self._output = output_func

    def run(self) -> int:
        """Запускает главное меню. Возвращает код завершения процесса."""
        try:
            while True:
                self._print_main_menu()
                choice = self._ask_int("Выберите пункт: ")
                if choice == 1:
                    self.create_hotel()
                elif choice == 2:
                    self.view_hotel()
                elif choice == 3:
                    self.manage_hotel()
                elif choice == 4:
                    self.simulate_bookings()
                elif choice == 5:
                    break
                else:
                    self._say("Неверный пункт меню. Попробуйте еще раз.")
        except ExitRequested:
            pass
        self._say("Завершение работы...")
        return 0

    def _print_main_menu(self) -> None:
        self._say("\nСистема бронирования отелей")
        self._say("1. Создать отель")
        self._say("2. Информация об отеле")
        self._say("3. Управление отелем")
        self._say("4. Симуляция бронирований")
        self._say("5. Выход")

    # --- Создание отеля ---

    def create_hotel(self) -> None:
        policy = self._service.policy
        while True:
            name = self._ask("Название отеля: ").strip()
            if not name:
                self._say("Название не может быть пустым.")
            elif self._hotel_exists(name):
                self._say("Отель с таким названием уже существует. Введите другое.")
            else:
                break

        while True:
            room_count = self._ask_int(
                f"Количество номеров ({policy.min_rooms}-{policy.max_rooms}): "
            )
            if policy.min_rooms <= room_count <= policy.max_rooms:
                break

        base_price = self._ask_float(
            "Базовая цена номера (0 - цена по умолчанию): ", minimum=0.0
        )
        self._handle(
            lambda: self._service.create_hotel(
                CreateHotelRequest(name=name, room_count=room_count, base_price=base_price)
            ),
            success=f"Отель создан, номеров: {room_count}.",
        )

    # --- Просмотр ---

    def view_hotel(self) -> None:
        hotel_name = self._select_hotel()
        if hotel_name is None:
            return
        while True:
            self._say(f"\nОтель: {hotel_name}")
            self._say("1. Общая информация")
            self._say("2. Подробная информация")
            self._say("3. Назад")
            choice = self._ask_int("Выберите пункт: ")
            if choice == 1:
                self._show_summary(hotel_name)
            elif choice == 2:
                self._view_details(hotel_name)
            elif choice == 3:
                return
            else:
                self._say("Неверный пункт меню. Попробуйте еще раз.")

    def _show_summary(self, hotel_name: str) -> None:
        summary = self._service.get_hotel_summary(hotel_name)
        self._say(f"Название: {summary.name}")
        self._say(f"Всего номеров: {summary.room_count}")
        self._say(f"Ожидаемая выручка за месяц: {summary.estimated_earnings:.2f}")

    def _view_details(self, hotel_name: str) -> None:
        while True:
            self._say("\nПодробная информация")
            self._say("1. Свободные и занятые номера на дату")
            self._say("2. Информация о номере")
            self._say("3. Информация о бронировании")
            self._say("4. Назад")
            choice = self._ask_int("Выберите пункт: ")
            if choice == 1:
                self._show_availability(hotel_name)
            elif choice == 2:
                self._show_rooms(hotel_name)
            elif choice == 3:
                self._show_reservation(hotel_name)
            elif choice == 4:
                return
            else:
                self._say("Неверный пункт меню. Попробуйте еще раз.")

    def _show_availability(self, hotel_name: str) -> None:
        on = self._ask_date("Дата (YYYY-MM-DD): ")
        availability = self._service.room_availability(hotel_name, on)
        self._say(f"Дата: {availability.on.isoformat()}")
        self._say(f"Свободно номеров: {availability.available_rooms}")
        self._say(f"Занято номеров: {availability.booked_rooms}")

    def _show_rooms(self, hotel_name: str) -> None:
        rooms = self._service.list_rooms(hotel_name)
        for index, room in enumerate(rooms, start=1):
            status = "свободен" if room.is_available else "занят"
            self._say(
                f"[{index}] {room.name} {{статус: {status}, "
                f"цена: {room.price_per_night:.2f}, "
                f"свободных дней: {len(room.available_days)}}}"
            )
        choice = self._ask_int("Выберите номер (0 - назад): ")
        if choice == 0:
            return
        if not 1 <= choice <= len(rooms):
            self._say("Неверный выбор.")
            return
        reservations = self._service.room_reservations(hotel_name, rooms[choice - 1].name)
        if not reservations:
            self._say("На этот номер нет бронирований.")
        for reservation in reservations:
            self._say(
                f"Бронирование: {reservation.guest_name}, "
                f"с {reservation.check_in.isoformat()} по {reservation.check_out.isoformat()}, "
                f"стоимость: {reservation.total_price:.2f}"
            )

    def _show_reservation(self, hotel_name: str) -> None:
        guest_name = self._ask("Имя гостя: ")
        try:
            reservation = self._service.reservation_details(hotel_name, guest_name)
        except DomainException as e:
            self._say(describe_error(e))
            return
        self._say("Бронирование:")
        self._say(f"Гость: {reservation.guest_name}")
        self._say(f"Номер: {reservation.room_name}")
        self._say(f"Заезд: {reservation.check_in.isoformat()}")
        self._say(f"Выезд: {reservation.check_out.isoformat()}")
        self._say(f"Стоимость: {reservation.total_price:.2f}")

    # --- Управление ---

    def manage_hotel(self) -> None:
        hotel_name = self._select_hotel()
        if hotel_name is None:
            return
        while True:
            self._say(f"\nУправление отелем: {hotel_name}")
            self._say("1. Добавить номер")
            self._say("2. Удалить номер")
            self._say("3. Переименовать отель")
            self._say("4. Изменить базовую цену")
            self._say("5. Изменить цену номера")
            self._say("6. Симуляция бронирований")
            self._say("7. Назад")
            choice = self._ask_int("Выберите пункт: ")
            if choice == 1:
                self._add_room(hotel_name)
            elif choice == 2:
                room_name = self._ask("Название удаляемого номера: ")
                self._handle(
                    lambda: self._service.remove_room(hotel_name, room_name),
                    success="Номер удален.",
                )
            elif choice == 3:
                new_name = self._ask("Новое название отеля: ")
                if self._handle(
                    lambda: self._service.rename_hotel(hotel_name, new_name),
                    success="Отель переименован.",
                ):
                    hotel_name = new_name.strip()
            elif choice == 4:
                price = self._ask_float("Новая базовая цена: ", minimum=0.0)
                self._handle(
                    lambda: self._service.update_base_price(hotel_name, price),
                    success="Базовая цена обновлена.",
                )
            elif choice == 5:
                room_name = self._ask("Название номера: ")
                price = self._ask_float("Новая цена номера: ")
                self._handle(
                    lambda: self._service.update_room_price(hotel_name, room_name, price),
                    success="Цена номера обновлена.",
                )
            elif choice == 6:
                self._simulate(hotel_name)
            elif choice == 7:
                return
            else:
                self._say("Неверный пункт меню. Попробуйте еще раз.")

    def _add_room(self, hotel_name: str) -> None:
        raw_type = self._ask("Тип номера (Standard/Deluxe): ")
        try:
            room_type = RoomType.parse(raw_type)
        except ValueError as e:
            self._say(str(e))
            return
        room_name = self._ask("Название номера: ")
        price = self._ask_float("Цена номера: ", minimum=0.0)
        self._handle(
            lambda: self._service.add_room(
                AddRoomRequest(
                    hotel_name=hotel_name,
                    room_name=room_name,
                    room_type=room_type,
                    price=price,
                )
            ),
            success="Номер добавлен.",
        )

    # --- Симуляция бронирований ---

    def simulate_bookings(self) -> None:
        hotel_name = self._select_hotel()
        if hotel_name is not None:
            self._simulate(hotel_name)

    def _simulate(self, hotel_name: str) -> None:
        while True:
            self._say(f"\nСимуляция для отеля: {hotel_name}")
            self._say("1. Добавить бронирование")
            self._say("2. Отменить бронирование")
            self._say("3. Назад")
            choice = self._ask_int("Выберите пункт: ")
            if choice == 1:
                guest_name = self._ask("Имя гостя: ")
                room_name = self._ask("Название номера: ")
                check_in = self._ask_date("Дата заезда (YYYY-MM-DD): ")
                check_out = self._ask_date("Дата выезда (YYYY-MM-DD): ")
                self._handle(
                    lambda: self._service.reserve(
                        ReserveRoomRequest(
                            hotel_name=hotel_name,
                            guest_name=guest_name,
                            room_name=room_name,
                            check_in=check_in,
                            check_out=check_out,
                        )
                    ),
                    success="Бронирование добавлено.",
                )
            elif choice == 2:
                guest_name = self._ask("Имя гостя для отмены: ")
                self._handle(
                    lambda: self._service.cancel_reservation(hotel_name, guest_name),
                    success="Бронирование отменено.",
                )
            elif choice == 3:
                return
            else:
                self._say("Неверный пункт меню. Попробуйте еще раз.")

    # --- Ввод и вывод ---

    def _select_hotel(self) -> Optional[str]:
        hotels = self._service.list_hotels()
        if not hotels:
            self._say("Нет ни одного отеля.")
            return None
        for index, hotel in enumerate(hotels, start=1):
            self._say(f"{index}. {hotel.name}")
        choice = self._ask_int("Выберите отель: ")
        if not 1 <= choice <= len(hotels):
            self._say("Неверный выбор.")
            return None
        return hotels[choice - 1].name

    def _hotel_exists(self, name: str) -> bool:
        key = name.casefold()
        return any(h.name.casefold() == key for h in self._service.list_hotels())

    def _handle(self, action: Callable[[], object], success: str) -> bool:
        """Выполняет действие и сообщает результат; ошибки не прерывают работу."""
        try:
            action()
        except (DomainException, ValidationError) as e:
            self._say(f"Ошибка: {describe_error(e)}")
            return False
        self._say(success)
        return True

    def _say(self, message: str) -> None:
        self._output(message)

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise ExitRequested()

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._ask(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._say("Неверный ввод, ожидается целое число.")

    def _ask_float(self, prompt: str, minimum: Optional[float] = None) -> float:
        while True:
            raw = self._ask(prompt).strip().replace(",", ".")
            try:
                value = float(raw)
            except ValueError:
                value = math.nan
            if not math.isfinite(value):
                self._say("Неверный ввод, ожидается число.")
                continue
            if minimum is not None and value < minimum:
                self._say(f"Значение не может быть меньше {minimum:.2f}.")
                continue
            return value

    def _ask_date(self, prompt: str) -> date:
        while True:
            raw = self._ask(prompt).strip()
            try:
                return date.fromisoformat(raw)
            except ValueError:
                self._say("Неверный формат даты, ожидается YYYY-MM-DD.")
