"""
Render state — the immutable description of one surface image.

A RenderConfig is built once per request (defaults overlaid with the
validated overrides) and never mutated; the scale factors are derived
from it on access so they can't go stale after an override.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from surface.color import BLUE, RED, RGBA, decode_hex
from surface.functions import SurfaceFunction, resolve

ISO_ANGLE = math.pi / 6  # tilt of the x and y axes (30°)
SIN30 = math.sin(ISO_ANGLE)
COS30 = math.cos(ISO_ANGLE)


@dataclass(frozen=True)
class RenderConfig:
    """Everything needed to render one image."""
    canvas_width: int = 600
    canvas_height: int = 320
    grid_cells: int = 100
    domain_range: float = 30.0
    low_color: RGBA = BLUE
    high_color: RGBA = RED
    surface_function: SurfaceFunction = SurfaceFunction.SCHAFFER

    def __post_init__(self):
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.grid_cells <= 0:
            raise ValueError("grid_cells must be positive")
        if not (math.isfinite(self.domain_range) and self.domain_range > 0):
            raise ValueError("domain_range must be positive and finite")

    @property
    def pixels_per_unit(self) -> float:
        return self.canvas_width / 2 / self.domain_range

    @property
    def elevation_scale(self) -> float:
        return self.canvas_height * 0.4

    def with_overrides(self, **overrides: Any) -> RenderConfig:
        return replace(self, **overrides)

    @classmethod
    def from_settings(cls, settings) -> RenderConfig:
        """Base config for a request, taken from process settings."""
        return cls(
            canvas_width=settings.CANVAS_WIDTH,
            canvas_height=settings.CANVAS_HEIGHT,
            grid_cells=settings.GRID_CELLS,
            domain_range=settings.XY_RANGE,
            low_color=decode_hex(settings.LOWEST_COLOR),
            high_color=decode_hex(settings.HIGHEST_COLOR),
            surface_function=resolve(settings.SURFACE_FUNCTION),
        )


@dataclass(frozen=True)
class SurfacePoint:
    """A sampled grid vertex in domain coordinates."""
    x: float
    y: float
    z: float

    @property
    def valid(self) -> bool:
        return math.isfinite(self.z)


@dataclass(frozen=True)
class ScreenPoint:
    """Canvas pixel coordinates of a projected vertex."""
    sx: float
    sy: float


@dataclass(frozen=True)
class Cell:
    """One grid quadrilateral, ready to draw."""
    i: int
    j: int
    corners: tuple[ScreenPoint, ScreenPoint, ScreenPoint, ScreenPoint]
    elevations: tuple[float, float, float, float] = field(repr=False)

    @property
    def mean_elevation(self) -> float:
        return sum(self.elevations) / len(self.elevations)
