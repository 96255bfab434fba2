import argparse
import sys

from models.clock import FormatError, RangeError, convert, from_time
from utils import logger
from utils import time as timeutils


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show a time as the lamps of a Berlin clock (Mengenlehreuhr)"
    )
    parser.add_argument(
        "time",
        nargs="?",
        default=None,
        help="Time as HH:MM:SS (default: current local time)",
    )
    parser.add_argument(
        "--red",
        action="store_true",
        help="Mark hour lamps and quarter-hour lamps with the red glyph",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print conversion traces",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger.configure("DEBUG" if args.debug else None)

    try:
        if args.time is None:
            state = convert(*timeutils.now())
        else:
            state = from_time(args.time)
    except (FormatError, RangeError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2

    print(state.render(mark_red_lamps=True if args.red else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
