"""
Тесты для консольного интерфейса.
"""

from typing import Iterable, List

import pytest

from hotel_reservations.application import (
    CreateHotelRequest,
    HotelApplicationService,
    ReserveRoomRequest,
)
from hotel_reservations.interfaces import ConsoleApp


class ScriptedConsole:
    """Подставляет заранее заданный ввод и собирает вывод."""

    def __init__(self, inputs: Iterable[str]):
        self._inputs = iter(inputs)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._inputs)
        except StopIteration:
            raise EOFError

    def print(self, message: str) -> None:
        self.lines.append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


def run_app(service: HotelApplicationService, inputs: Iterable[str]) -> ScriptedConsole:
    console = ScriptedConsole(inputs)
    app = ConsoleApp(service, input_func=console.input, output_func=console.print)
    assert app.run() == 0
    return console


@pytest.fixture
def aurora(service: HotelApplicationService) -> None:
    service.create_hotel(CreateHotelRequest(name="Aurora", room_count=5))


class TestConsoleApp:
    def test_create_reserve_and_view_summary(self, service: HotelApplicationService):
        console = run_app(
            service,
            [
                "1", "Aurora", "5", "0",
                "4", "1", "1", "Alice", "Room 1", "2024-06-01", "2024-06-04", "3",
                "2", "1", "1", "3",
                "5",
            ],
        )

        assert "Отель создан, номеров: 5." in console.lines
        assert "Бронирование добавлено." in console.lines
        assert "Ожидаемая выручка за месяц: 3897.00" in console.lines
        assert console.lines[-1] == "Завершение работы..."
        assert service.get_hotel_summary("Aurora").reservation_count == 1

    def test_immediate_end_of_input(self, service: HotelApplicationService):
        console = run_app(service, [])

        assert console.lines[-1] == "Завершение работы..."

    def test_duplicate_hotel_name_is_prompted_again(
        self, service: HotelApplicationService, aurora
    ):
        console = run_app(service, ["1", "AURORA", "", "Borealis", "3", "1500", "5"])

        assert "Отель с таким названием уже существует. Введите другое." in console.lines
        assert "Название не может быть пустым." in console.lines
        assert [h.name for h in service.list_hotels()] == ["Aurora", "Borealis"]
        assert service.get_hotel_summary("Borealis").base_price == 1500.0

    def test_room_count_is_asked_until_in_range(self, service: HotelApplicationService):
        console = run_app(service, ["1", "Aurora", "many", "0", "51", "2", "0", "5"])

        assert "Неверный ввод, ожидается целое число." in console.lines
        assert console.prompts.count("Количество номеров (1-50): ") == 4
        assert service.get_hotel_summary("Aurora").room_count == 2

    def test_non_finite_price_is_asked_again(self, service: HotelApplicationService):
        console = run_app(service, ["1", "Aurora", "2", "inf", "nan", "abc", "1500,5", "5"])

        assert console.lines.count("Неверный ввод, ожидается число.") == 3
        assert service.get_hotel_summary("Aurora").base_price == 1500.5

    def test_invalid_menu_choice(self, service: HotelApplicationService):
        console = run_app(service, ["x", "9", "5"])

        assert "Неверный ввод, ожидается целое число." in console.lines
        assert "Неверный пункт меню. Попробуйте еще раз." in console.lines

    def test_overlapping_reservation_shows_error(
        self, service: HotelApplicationService, aurora
    ):
        console = run_app(
            service,
            [
                "4", "1",
                "1", "Alice", "Room 1", "2024-06-01", "2024-06-03",
                "1", "Bob", "Room 1", "2024-06-02", "2024-06-04",
                "3", "5",
            ],
        )

        assert "Бронирование добавлено." in console.lines
        assert "Ошибка: Номер 'Room 1' недоступен с 2024-06-02 по 2024-06-04." in console.lines
        assert service.get_hotel_summary("Aurora").reservation_count == 1

    def test_invalid_date_is_asked_again(self, service: HotelApplicationService, aurora):
        console = run_app(
            service,
            ["4", "1", "1", "Alice", "Room 1", "01.06.2024", "2024-06-01", "2024-06-02", "3", "5"],
        )

        assert "Неверный формат даты, ожидается YYYY-MM-DD." in console.lines
        assert "Бронирование добавлено." in console.lines

    def test_cancel_reservation(self, service: HotelApplicationService, aurora):
        service.reserve(
            ReserveRoomRequest(
                hotel_name="Aurora",
                guest_name="Alice",
                room_name="Room 1",
                check_in="2024-06-01",
                check_out="2024-06-03",
            )
        )

        console = run_app(service, ["4", "1", "2", "Alice", "2", "Alice", "3", "5"])

        assert "Бронирование отменено." in console.lines
        assert "Ошибка: Бронирование гостя 'Alice' не найдено." in console.lines

    def test_no_hotels(self, service: HotelApplicationService):
        console = run_app(service, ["2", "3", "4", "5"])

        assert console.lines.count("Нет ни одного отеля.") == 3

    def test_manage_hotel(self, service: HotelApplicationService, aurora):
        console = run_app(
            service,
            [
                "3", "1",
                "1", "Deluxe", "Suite", "5000",
                "1", "Penthouse",
                "2", "Room 5",
                "3", "Borealis",
                "5", "Room 1", "50",
                "7", "5",
            ],
        )

        assert "Номер добавлен." in console.lines
        assert "Неизвестный тип номера 'Penthouse'. Допустимо: Standard или Deluxe." in console.lines
        assert "Номер удален." in console.lines
        assert "Отель переименован." in console.lines
        assert "Управление отелем: Borealis" in console.output
        assert "Ошибка: Цена номера не может быть ниже 100.00." in console.lines

        rooms = [room.name for room in service.list_rooms("Borealis")]
        assert rooms == ["Room 1", "Room 2", "Room 3", "Room 4", "Suite"]

    def test_view_room_details(self, service: HotelApplicationService, aurora):
        service.reserve(
            ReserveRoomRequest(
                hotel_name="Aurora",
                guest_name="Alice",
                room_name="Room 2",
                check_in="2024-06-01",
                check_out="2024-06-03",
            )
        )

        console = run_app(
            service,
            [
                "2", "1", "2",
                "1", "2024-06-02",
                "2", "2",
                "3", "Alice",
                "4", "3", "5",
            ],
        )

        assert "Свободно номеров: 4" in console.lines
        assert "Занято номеров: 1" in console.lines
        assert (
            "Бронирование: Alice, с 2024-06-01 по 2024-06-03, стоимость: 2598.00"
            in console.lines
        )
        assert "Номер: Room 2" in console.lines
