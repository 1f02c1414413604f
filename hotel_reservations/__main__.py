"""Точка входа: ``python -m hotel_reservations``."""

import argparse
import sys
from typing import List, Optional

from hotel_reservations.bootstrap import bootstrap_app
from hotel_reservations.config import HotelSettings
from hotel_reservations.infrastructure import configure_logging
from hotel_reservations.interfaces import ConsoleApp


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Система бронирования отелей")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Уровень логирования (по умолчанию HOTEL_LOG_LEVEL или WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    overrides = {"log_level": args.log_level} if args.log_level else {}
    settings = HotelSettings(**overrides)
    configure_logging(settings.log_level)

    service = bootstrap_app(settings)
    return ConsoleApp(service).run()


if __name__ == "__main__":
    sys.exit(main())
