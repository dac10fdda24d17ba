"""Legacy 16-color palette and nearest-color approximation.

Clients that cannot display arbitrary RGB colors only understand the fixed
legacy chat palette. Every exact color therefore gets approximated to the
palette entry closest to it, using the sum of absolute channel differences.
"""

from enum import Enum
from typing import NamedTuple, Optional

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Rgb(NamedTuple):
    """A 24-bit color, one int per channel in range 0-255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: Optional[str]) -> Optional["Rgb"]:
        """Parse a #RRGGBB notation (either case), None if it isn't one."""
        if value is None or len(value) != 7 or not value.startswith("#"):
            return None
        digits = value[1:]
        if not all(c in HEX_DIGITS for c in digits):
            return None
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        """Lower-case #rrggbb notation."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


WHITE = Rgb(0xFF, 0xFF, 0xFF)


class PaletteColor(Enum):
    """Legacy chat colors, in table order.

    The declaration order is significant: it is the scan order of the
    approximation and thereby decides ties.

    Attributes:
        code: Legacy color code character following the escape lead
        rgb: The color the client renders for this entry
    """

    BLACK = ("0", Rgb(0x00, 0x00, 0x00))
    DARK_BLUE = ("1", Rgb(0x00, 0x00, 0xAA))
    DARK_GREEN = ("2", Rgb(0x00, 0xAA, 0x00))
    DARK_AQUA = ("3", Rgb(0x00, 0xAA, 0xAA))
    DARK_RED = ("4", Rgb(0xAA, 0x00, 0x00))
    DARK_PURPLE = ("5", Rgb(0xAA, 0x00, 0xAA))
    GOLD = ("6", Rgb(0xFF, 0xAA, 0x00))
    GRAY = ("7", Rgb(0xAA, 0xAA, 0xAA))
    DARK_GRAY = ("8", Rgb(0x55, 0x55, 0x55))
    BLUE = ("9", Rgb(0x55, 0x55, 0xFF))
    GREEN = ("a", Rgb(0x55, 0xFF, 0x55))
    AQUA = ("b", Rgb(0x55, 0xFF, 0xFF))
    RED = ("c", Rgb(0xFF, 0x55, 0x55))
    LIGHT_PURPLE = ("d", Rgb(0xFF, 0x55, 0xFF))
    YELLOW = ("e", Rgb(0xFF, 0xFF, 0x55))
    WHITE = ("f", Rgb(0xFF, 0xFF, 0xFF))

    def __init__(self, code: str, rgb: Rgb) -> None:
        self.code = code
        self.rgb = rgb

    @property
    def json_name(self) -> str:
        """Name used by the attributed-text protocol (e.g. dark_purple)."""
        return self.name.lower()


class ColorApproximator:
    """Maps arbitrary colors onto the nearest entry of a fixed palette.

    The palette and the distance metric together form the approximation
    policy; subclass and override distance() to swap the metric.
    """

    def __init__(self, palette=PaletteColor) -> None:
        """Initialize the approximator.

        Args:
            palette: Iterable of PaletteColor entries, in tie-breaking order

        Raises:
            ValueError: If the palette is empty
        """
        self.palette: tuple[PaletteColor, ...] = tuple(palette)
        if not self.palette:
            raise ValueError("Palette must contain at least one color")

    @staticmethod
    def distance(a: Rgb, b: Rgb) -> int:
        """Sum of absolute per-channel differences."""
        return abs(a.red - b.red) + abs(a.green - b.green) + abs(a.blue - b.blue)

    def approximate(self, color: Rgb) -> PaletteColor:
        """Find the closest palette entry, earliest entry wins on ties."""
        closest = self.palette[0]
        closest_distance = self.distance(color, closest.rgb)

        for entry in self.palette[1:]:
            current = self.distance(color, entry.rgb)
            if current < closest_distance:
                closest = entry
                closest_distance = current

        return closest

    def approximate_hex(self, value: Optional[str]) -> Optional[PaletteColor]:
        """Approximate a #RRGGBB string, None if there's nothing to approximate."""
        rgb = Rgb.from_hex(value)
        if rgb is None:
            return None
        return self.approximate(rgb)


DEFAULT_APPROXIMATOR = ColorApproximator()
