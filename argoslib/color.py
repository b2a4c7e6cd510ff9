"""RGB colours for LEDs with gamma correction."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "ArgosColor",
    "COLORS",
    "GAMMA8",
    "GAMMA_CORRECTED_COLORS",
    "gamma_correct",
]

_GAMMA = 2.8
_MAX_CHANNEL = 255


@dataclass(frozen=True)
class ArgosColor:
    """An RGB colour with integer channels."""

    r: int
    g: int
    b: int

    def __mul__(self, scale: float) -> ArgosColor:
        """Scale every channel, truncating toward zero."""
        return ArgosColor(int(self.r * scale), int(self.g * scale), int(self.b * scale))


def _gamma_table(gamma: float, size: int) -> tuple[int, ...]:
    top = size - 1
    return tuple(int((level / top) ** gamma * top + 0.5) for level in range(size))


GAMMA8: tuple[int, ...] = _gamma_table(_GAMMA, _MAX_CHANNEL + 1)


def gamma_correct(original: ArgosColor) -> ArgosColor:
    """Apply the 8-bit gamma table to each channel."""
    channels = (original.r, original.g, original.b)
    for channel in channels:
        if not 0 <= channel < len(GAMMA8):
            raise ValueError(f"channel value {channel} outside 0..255")
    return ArgosColor(*(GAMMA8[c] for c in channels))


COLORS = MappingProxyType(
    {
        "off": ArgosColor(0, 0, 0),
        "white": ArgosColor(120, 120, 120),
        "really_red": ArgosColor(255, 0, 0),
        "really_green": ArgosColor(0, 255, 0),
        "really_blue": ArgosColor(0, 0, 255),
        "cube_purple": ArgosColor(130, 0, 130),
        "cone_yellow": ArgosColor(222, 178, 18),
        "hot_pink": ArgosColor(255, 105, 180),
        "cat_yellow": ArgosColor(255, 163, 0),
        "purple": ArgosColor(75, 0, 130),
        "note_orange": ArgosColor(255, 130, 50),
        "plum": ArgosColor(160, 100, 150),
    }
)

GAMMA_CORRECTED_COLORS = MappingProxyType(
    {name: gamma_correct(color) for name, color in COLORS.items()}
)