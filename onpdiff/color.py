from __future__ import annotations

from typing import Sequence

SGR_CODES: dict[str, int] = {
    "normal": 0,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "ul": 4,
    "reverse": 7,
    "strike": 9,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}

FOREGROUND = range(30, 38)
BACKGROUND_SHIFT = 10
RESET = "\x1b[0m"


def sgr_sequence(names: Sequence[str]) -> str:
    """
    Builds the SGR escape for a list of style names. The first colour name
    is the foreground, any later one the background.
    """
    try:
        codes = [SGR_CODES[name] for name in names]
    except KeyError as e:
        raise ValueError(f"Unknown style name: {e}") from e

    seen_fg = False
    for i, code in enumerate(codes):
        if code in FOREGROUND:
            if seen_fg:
                codes[i] = code + BACKGROUND_SHIFT
            seen_fg = True

    return "\x1b[" + ";".join(map(str, codes)) + "m"


class Color:
    @staticmethod
    def parse(style_str: str) -> list[str]:
        return style_str.lower().split()

    @staticmethod
    def format(style: str | Sequence[str], text: str) -> str:
        names = [style] if isinstance(style, str) else style
        return f"{sgr_sequence(names)}{text}{RESET}"
