import re
from datetime import datetime


_PATTERN = re.compile(r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})")


class FormatError(ValueError):
    """Input does not have the fixed HH:MM:SS shape."""


class RangeError(ValueError):
    """A time field lies outside its valid bound."""


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check(hour: int, minute: int, second: int) -> None:
    if not _is_int(hour):
        raise FormatError(f"`hour`: {hour!r}")
    if not _is_int(minute):
        raise FormatError(f"`minute`: {minute!r}")
    if not _is_int(second):
        raise FormatError(f"`second`: {second!r}")
    if hour < 0 or hour >= 24:
        raise RangeError(f"`hour`: {hour}")
    if minute < 0 or minute >= 60:
        raise RangeError(f"`minute`: {minute}")
    if second < 0 or second >= 60:
        raise RangeError(f"`second`: {second}")


def parse(text: str) -> tuple[int, int, int]:
    """Parse a zero-padded 24-hour ``HH:MM:SS`` string.

    Raises FormatError when the string has any other shape and RangeError
    when a field is out of bounds (e.g. ``24:00:00``).
    """
    if not isinstance(text, str):
        raise FormatError(f"`text`: {type(text)}")
    if (match := _PATTERN.fullmatch(text)) is None:
        raise FormatError(f"`text`: {text!r}")

    hour, minute, second = (int(v) for v in match.group("hour", "minute", "second"))
    check(hour, minute, second)
    return hour, minute, second


def format(hour: int, minute: int, second: int) -> str:
    return f"{str(hour).zfill(2)}:{str(minute).zfill(2)}:{str(second).zfill(2)}"


def now() -> tuple[int, int, int]:
    current = datetime.now()
    return current.hour, current.minute, current.second
