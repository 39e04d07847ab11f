"""
Color codec and elevation → color interpolation.

Channel arithmetic is unsigned 8-bit: results wrap modulo 256 instead of
saturating, so elevations far outside [-1, 1] cycle through the palette.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

import numpy as np


class HexColorError(ValueError):
    """Bad hex color notation. ``kind`` is "length" or "digits"."""

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f'bad hex {kind} "{text}"')


@dataclass(frozen=True)
class RGBA:
    """8-bit color; alpha is carried but never encoded."""
    r: int
    g: int
    b: int
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


BLUE = RGBA(0, 0, 255)
RED = RGBA(255, 0, 0)


def decode_hex(text: str) -> RGBA:
    """Convert '#rgb' or '#rrggbb' (any case) to an opaque RGBA."""
    if len(text) not in (4, 7):
        raise HexColorError("length", text)
    digits = text[1:]
    if not text.startswith("#") or any(c not in string.hexdigits for c in digits):
        raise HexColorError("digits", text)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    value = int(digits, 16)
    return RGBA(r=value >> 16, g=(value >> 8) & 0xFF, b=value & 0xFF, a=255)


def encode_hex(color: RGBA) -> str:
    """Convert to '#rrggbb'. Alpha is dropped."""
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def normalize_elevation(z: float) -> float:
    """Map elevation onto the gradient; [-1, 1] lands on [0, 1], unclamped."""
    return z / 2 + 0.5


def interpolate(low: RGBA, high: RGBA, elevation_avg: float) -> RGBA:
    """
    Blend ``low`` toward ``high`` by the normalized elevation.

    Each channel is ``low + floor(t * (high - low))`` wrapped to 0..255,
    where the difference ``high - low`` is itself an 8-bit value: a
    channel that falls from low to high wraps instead (blue 255 → 0 has
    a delta of 1), so the gradient is only monotonic when high >= low.
    The alpha channel keeps a long-standing quirk: its base is ``low.b``,
    not ``low.a``. With opaque inputs the delta is zero, so the result
    alpha equals the low color's blue channel; alpha is never encoded.
    """
    t = normalize_elevation(elevation_avg)
    if not math.isfinite(t):
        t = 0.0
    base = np.array([low.r, low.g, low.b, low.b], dtype=np.float64)
    delta = np.mod(
        np.array(high.as_tuple(), dtype=np.float64) - np.array(low.as_tuple(), dtype=np.float64),
        256,
    )
    with np.errstate(over="ignore", invalid="ignore"):
        channels = np.nan_to_num(np.mod(base + np.floor(t * delta), 256))
    return RGBA(*(int(c) for c in channels))
