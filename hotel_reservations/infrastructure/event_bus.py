from typing import Callable, Dict, List, Optional, Type

from hotel_reservations.application.interfaces import ILogger
from hotel_reservations.shared_kernel import DomainEvent

from .logging import ConsoleLogger


class InMemoryEventBus:
    """Реализация шины событий в памяти."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._subscribers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._logger = logger or ConsoleLogger()

    def publish(self, event: DomainEvent) -> None:
        """Публикует событие всем подписчикам его типа."""
        event_type = type(event)
        self._logger.info(
            f"Publishing event: {event_type.__name__}",
            event=event.model_dump(exclude={"event_id", "occurred_on"}),
        )

        handlers = self._subscribers.get(event_type)
        if not handlers:
            self._logger.debug(f"No subscribers for event type {event_type.__name__}")
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    f"Error in event handler for {event_type.__name__}",
                    error=str(e),
                )

    def subscribe(self, event_type: Type[DomainEvent], handler: Callable) -> None:
        """Подписывает обработчик на события указанного типа."""
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed handler to {event_type.__name__} events")
