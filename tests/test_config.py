import logging

import pytest
from pydantic import ValidationError

from hotel_reservations.application import CreateHotelRequest, ReserveRoomRequest
from hotel_reservations.bootstrap import bootstrap_app
from hotel_reservations.config import HotelSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in [
        "HOTEL_MIN_ROOMS",
        "HOTEL_MAX_ROOMS",
        "HOTEL_DEFAULT_BASE_PRICE",
        "HOTEL_MIN_ROOM_PRICE",
        "HOTEL_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    # .env из рабочего каталога не должен влиять на тесты
    monkeypatch.chdir(tmp_path)


class TestHotelSettings:
    def test_defaults(self):
        settings = HotelSettings()

        assert (settings.min_rooms, settings.max_rooms) == (1, 50)
        assert settings.default_base_price == 1299.00
        assert settings.min_room_price == 100.00
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("HOTEL_MAX_ROOMS", "80")
        monkeypatch.setenv("HOTEL_LOG_LEVEL", "debug")

        settings = HotelSettings()

        assert settings.max_rooms == 80
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("HOTEL_DEFAULT_BASE_PRICE=999.5\n")

        assert HotelSettings().default_base_price == 999.5

    def test_to_policy(self):
        policy = HotelSettings(max_rooms=10, min_room_price=150.0).to_policy()

        assert policy.max_rooms == 10
        assert policy.min_room_price == 150.0
        assert policy.default_base_price == 1299.00

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Неизвестный уровень логирования"):
            HotelSettings(log_level="LOUD")

    def test_infinite_price_is_rejected(self, monkeypatch):
        monkeypatch.setenv("HOTEL_DEFAULT_BASE_PRICE", "inf")

        with pytest.raises(ValidationError):
            HotelSettings()

    def test_min_rooms_above_max(self):
        with pytest.raises(ValidationError, match="min_rooms не может быть больше max_rooms"):
            HotelSettings(min_rooms=10, max_rooms=5)


class TestBootstrap:
    def test_service_uses_configured_policy(self):
        service = bootstrap_app(HotelSettings(max_rooms=3))

        assert service.policy.max_rooms == 3
        assert service.list_hotels() == []

    def test_bootstrap_journals_reservations(self, caplog):
        service = bootstrap_app(HotelSettings())
        service.create_hotel(CreateHotelRequest(name="Aurora", room_count=2))

        with caplog.at_level(logging.INFO, logger="hotel_reservations"):
            service.reserve(
                ReserveRoomRequest(
                    hotel_name="Aurora",
                    guest_name="Alice",
                    room_name="Room 1",
                    check_in="2024-06-01",
                    check_out="2024-06-03",
                )
            )
            service.cancel_reservation("Aurora", "Alice")

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Гость 'Alice' забронировал номер 'Room 1'") for m in messages)
        assert any(
            m.startswith("Гость 'Alice' отменил бронирование номера 'Room 1'")
            for m in messages
        )
