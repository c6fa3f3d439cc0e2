"""RGB colours used for cell text and backgrounds."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

_HEX_PAIR = re.compile(r"[0-9A-F]{2}")


@dataclass(frozen=True)
class ColorRGB:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in zip("rgb", self):
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component out of range: {value}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def hex(self) -> str:
        """Return the colour as ``#RRGGBB``."""
        return "#" + self.to_excel()

    def to_excel(self) -> str:
        """Return the colour as ``RRGGBB``, the form spreadsheet files use."""
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    def is_default_white(self) -> bool:
        return (self.r, self.g, self.b) == (255, 255, 255)

    def is_default_black(self) -> bool:
        return (self.r, self.g, self.b) == (0, 0, 0)


WHITE = ColorRGB(255, 255, 255)

COLOR_OPTION_NAMES = (
    "White",
    "Black",
    "Red",
    "Green",
    "Blue",
    "Yellow",
    "Orange",
    "Purple",
    "Pink",
    "Gray",
    "Custom...",
)

COLOR_OPTIONS = {
    "White": ColorRGB(255, 255, 255),
    "Black": ColorRGB(0, 0, 0),
    "Red": ColorRGB(255, 0, 0),
    "Green": ColorRGB(0, 255, 0),
    "Blue": ColorRGB(0, 0, 255),
    "Yellow": ColorRGB(255, 255, 0),
    "Orange": ColorRGB(255, 165, 0),
    "Purple": ColorRGB(128, 0, 128),
    "Pink": ColorRGB(255, 192, 203),
    "Gray": ColorRGB(128, 128, 128),
}


def parse_hex_color(text: str) -> ColorRGB:
    """Parse ``#RRGGBB`` or ``RRGGBB`` (any case) into a colour.

    Raises ValueError when the text is not six hex digits.
    """
    digits = text.removeprefix("#").upper()
    size = len(digits.encode("utf-8"))
    if size != 6:
        raise ValueError(
            f"invalid hex color format: expected 6 characters, got {size}"
        )

    components = []
    for name, start in (("red", 0), ("green", 2), ("blue", 4)):
        pair = digits[start:start + 2]
        if not _HEX_PAIR.fullmatch(pair):
            raise ValueError(f"invalid {name} component: {pair!r}")
        components.append(int(pair, 16))
    return ColorRGB(*components)