import math
from typing import NamedTuple

from .seeded_sequence import SeededSequence

SECONDARY_SHIFT = 120
ACCENT_SHIFT = 240


class ColorHSL(NamedTuple):
    h: int
    s: float
    l: float

    def css(self) -> str:
        return f"hsl({self.h}, {self.s}%, {self.l}%)"

    def to_dict(self):
        return {"h": self.h, "s": self.s, "l": self.l}


class Palette(NamedTuple):
    """Three evenly spread hues: primary, +120 deg, +240 deg."""
    primary: ColorHSL
    secondary: ColorHSL
    accent: ColorHSL

    def to_dict(self):
        return {
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict(),
            "accent": self.accent.to_dict(),
        }


def derive_palette(seq: SeededSequence):
    """
    Consumes exactly three draws (hue, saturation, lightness) in that order.
    Returns (palette, advanced sequence).
    """
    (d_hue, d_sat, d_light), seq = seq.take(3)
    hue = math.floor(d_hue * 360)
    sat = 60 + d_sat * 20
    light = 50 + d_light * 20
    palette = Palette(
        primary=ColorHSL(hue, sat, light),
        secondary=ColorHSL((hue + SECONDARY_SHIFT) % 360, sat, light - 10),
        accent=ColorHSL((hue + ACCENT_SHIFT) % 360, sat, light + 10),
    )
    return palette, seq
