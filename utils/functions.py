import textwrap
from collections.abc import Iterable


def cleaned(text: str, *args: str, **kwargs: str) -> str:
    return textwrap.dedent(text).strip().format(*args, **kwargs)


def lamp_text(row: Iterable[bool], lit: str, unlit: str) -> str:
    return "".join(lit if on else unlit for on in row)
