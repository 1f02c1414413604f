"""
Слой представления: консольное меню.
"""

from .console import ConsoleApp

__all__ = ["ConsoleApp"]
