"""
Обработчики доменных событий бронирования.

Подписываются на шину событий в bootstrap_app и ведут журнал
бронирований через порт ILogger.
"""

from hotel_reservations.domain import ReservationCancelled, ReservationMade

from .interfaces import ILogger


def on_reservation_made(event: ReservationMade, logger: ILogger) -> None:
    """Записывает в журнал новое бронирование."""
    logger.info(
        f"Гость '{event.guest_name}' забронировал номер '{event.room_name}'",
        hotel_id=event.hotel_id,
        check_in=event.check_in,
        check_out=event.check_out,
    )


def on_reservation_cancelled(event: ReservationCancelled, logger: ILogger) -> None:
    """Записывает в журнал отмену бронирования."""
    logger.info(
        f"Гость '{event.guest_name}' отменил бронирование номера '{event.room_name}'",
        hotel_id=event.hotel_id,
        check_in=event.check_in,
        check_out=event.check_out,
    )
