from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from utils import logger, settings
from utils import time as timeutils
from utils.functions import cleaned, lamp_text
from utils.time import FormatError, RangeError


__all__ = ["ClockState", "FormatError", "RangeError", "convert", "from_time", "lamp_row"]


HOURS_TOP_LAMPS = 4
HOURS_BOTTOM_LAMPS = 4
MINUTES_TOP_LAMPS = 11
MINUTES_BOTTOM_LAMPS = 4

# 15, 30 and 45 minutes past
QUARTER_LAMPS = (2, 5, 8)


def lamp_row(lamps: int, on: int) -> tuple[bool, ...]:
    if on < 0 or on > lamps:
        raise RangeError(f"`on`: {on} (lamps={lamps})")
    return (True,) * on + (False,) * (lamps - on)


def _lit(row: tuple[bool, ...]) -> int:
    return sum(row)


class ClockState(BaseModel):
    """Lamp states of a Berlin clock (Mengenlehreuhr) for one instant.

    The seconds lamp is on for even seconds. The two hour rows count five
    hours and one hour per lamp; the two minute rows count five minutes and
    one minute per lamp. Every row is lit from its first lamp onwards.
    """
    model_config = ConfigDict(frozen=True)

    seconds_lamp_on: bool
    hours_top_row: tuple[bool, ...]
    hours_bottom_row: tuple[bool, ...]
    minutes_top_row: tuple[bool, ...]
    minutes_bottom_row: tuple[bool, ...]

    @model_validator(mode="after")
    def check_rows(self) -> ClockState:
        for name, lamps in (
            ("hours_top_row", HOURS_TOP_LAMPS),
            ("hours_bottom_row", HOURS_BOTTOM_LAMPS),
            ("minutes_top_row", MINUTES_TOP_LAMPS),
            ("minutes_bottom_row", MINUTES_BOTTOM_LAMPS),
        ):
            row = getattr(self, name)
            if len(row) != lamps:
                raise ValueError(f"`{name}`: expected {lamps} lamps, got {len(row)}")
            if row != lamp_row(lamps, _lit(row)):
                raise ValueError(f"`{name}`: lit lamps must form a prefix")
        if _lit(self.hours_top_row) * 5 + _lit(self.hours_bottom_row) >= 24:
            raise ValueError("hour rows encode more than 23 hours")
        return self

    @property
    def hour(self) -> int:
        return _lit(self.hours_top_row) * 5 + _lit(self.hours_bottom_row)

    @property
    def minute(self) -> int:
        return _lit(self.minutes_top_row) * 5 + _lit(self.minutes_bottom_row)

    @property
    def rows(self) -> tuple[tuple[bool, ...], ...]:
        return (
            (self.seconds_lamp_on,),
            self.hours_top_row,
            self.hours_bottom_row,
            self.minutes_top_row,
            self.minutes_bottom_row,
        )

    @property
    def text(self) -> str:
        return self.render()

    def render(
            self,
            *,
            lit: str | None = None,
            unlit: str | None = None,
            red: str | None = None,
            mark_red_lamps: bool | None = None
    ) -> str:
        lit = settings.lit_glyph if lit is None else lit
        unlit = settings.unlit_glyph if unlit is None else unlit
        red = settings.red_glyph if red is None else red
        if mark_red_lamps is None:
            mark_red_lamps = settings.mark_red_lamps
        hour_glyph = red if mark_red_lamps else lit

        minutes_top = "".join(
            (red if mark_red_lamps and i in QUARTER_LAMPS else lit) if on else unlit
            for i, on in enumerate(self.minutes_top_row)
        )
        return cleaned(
            """
            {seconds}
            {hours_top}
            {hours_bottom}
            {minutes_top}
            {minutes_bottom}
            """,
            seconds=lit if self.seconds_lamp_on else unlit,
            hours_top=lamp_text(self.hours_top_row, hour_glyph, unlit),
            hours_bottom=lamp_text(self.hours_bottom_row, hour_glyph, unlit),
            minutes_top=minutes_top,
            minutes_bottom=lamp_text(self.minutes_bottom_row, lit, unlit),
        )


def convert(hour: int, minute: int, second: int) -> ClockState:
    timeutils.check(hour, minute, second)
    logger.print(f"convert {timeutils.format(hour, minute, second)}")

    return ClockState(
        seconds_lamp_on=second % 2 == 0,
        hours_top_row=lamp_row(HOURS_TOP_LAMPS, hour // 5),
        hours_bottom_row=lamp_row(HOURS_BOTTOM_LAMPS, hour % 5),
        minutes_top_row=lamp_row(MINUTES_TOP_LAMPS, minute // 5),
        minutes_bottom_row=lamp_row(MINUTES_BOTTOM_LAMPS, minute % 5),
    )


def from_time(text: str) -> ClockState:
    return convert(*timeutils.parse(text))
