from unittest.mock import MagicMock

from hotel_reservations.application.event_handlers import (
    on_reservation_cancelled,
    on_reservation_made,
)
from hotel_reservations.domain import ReservationCancelled, ReservationMade
from hotel_reservations.shared_kernel import generate_id


class TestReservationHandlers:
    def test_reservation_made_is_journaled(self, mock_logger: MagicMock, june):
        event = ReservationMade(
            hotel_id=generate_id(),
            guest_name="Alice",
            room_name="Room 1",
            check_in=june(1),
            check_out=june(3),
        )

        on_reservation_made(event, logger=mock_logger)

        message = mock_logger.info.call_args.args[0]
        assert message == "Гость 'Alice' забронировал номер 'Room 1'"
        assert mock_logger.info.call_args.kwargs["check_out"] == june(3)

    def test_reservation_cancelled_is_journaled(self, mock_logger: MagicMock, june):
        event = ReservationCancelled(
            hotel_id=generate_id(),
            guest_name="Alice",
            room_name="Room 1",
            check_in=june(1),
            check_out=june(3),
        )

        on_reservation_cancelled(event, logger=mock_logger)

        message = mock_logger.info.call_args.args[0]
        assert message == "Гость 'Alice' отменил бронирование номера 'Room 1'"
