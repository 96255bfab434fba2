import logging

from utils import settings


_logger = logging.getLogger("berlin_clock")


def configure(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or settings.log_level,
        format="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def print(message: str, debug: bool | None = None) -> None:
    if debug is None:
        debug = settings.debug
    _logger.log(logging.INFO if debug else logging.DEBUG, message)


def error(message: str) -> None:
    _logger.error(message)
