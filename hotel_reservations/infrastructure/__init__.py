"""
Инфраструктурный слой: хранение в памяти, шина событий, логирование.
"""

from .event_bus import InMemoryEventBus
from .logging import ConsoleLogger, configure_logging
from .repositories import InMemoryHotelRepository

__all__ = [
    "InMemoryHotelRepository",
    "InMemoryEventBus",
    "ConsoleLogger",
    "configure_logging",
]
