"""
Система бронирования отелей.

Хранит в памяти список отелей с номерами и бронированиями и позволяет
создавать отели, управлять номерами и ценами, бронировать и отменять
бронирования в пределах условного месяца из 31 дня.
"""

from . import application, domain, infrastructure, shared_kernel

__all__ = [
    "application",
    "domain",
    "infrastructure",
    "shared_kernel",
]
