"""
Grid sampler & isometric projector.

Walks the (cells+1)² vertex lattice one row at a time: each row is
evaluated in a single numpy call, and only the two rows bordering the
current strip of cells are kept alive.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

import numpy as np

from surface.functions import evaluate
from surface.state import COS30, SIN30, Cell, RenderConfig, ScreenPoint, SurfacePoint


@dataclass
class VertexRow:
    """Projected vertices (i, 0..cells) of one lattice row."""
    i: int
    x: float
    z: np.ndarray
    sx: np.ndarray
    sy: np.ndarray
    valid: np.ndarray

    def point(self, j: int) -> ScreenPoint:
        return ScreenPoint(float(self.sx[j]), float(self.sy[j]))


def domain_coords(config: RenderConfig) -> np.ndarray:
    """Domain coordinate of lattice index 0..cells along either axis."""
    n = config.grid_cells
    return config.domain_range * (np.arange(n + 1) / n - 0.5)


def sample_point(config: RenderConfig, i: int, j: int) -> SurfacePoint:
    """Sample a single lattice vertex (i, j)."""
    n = config.grid_cells
    x = config.domain_range * (i / n - 0.5)
    y = config.domain_range * (j / n - 0.5)
    return SurfacePoint(x, y, evaluate(config.surface_function, x, y))


def project(config: RenderConfig, point: SurfacePoint) -> Optional[ScreenPoint]:
    """Isometric projection of one point; None when it has no finite screen position."""
    if not point.valid:
        return None
    scale = config.pixels_per_unit
    sx = config.canvas_width / 2 + (point.x - point.y) * COS30 * scale
    sy = config.canvas_height / 2 + (point.x + point.y) * SIN30 * scale - point.z * config.elevation_scale
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    return ScreenPoint(sx, sy)


def sample_row(config: RenderConfig, i: int, ys: Optional[np.ndarray] = None) -> VertexRow:
    """Evaluate and project every vertex of lattice row ``i``."""
    if ys is None:
        ys = domain_coords(config)
    x = config.domain_range * (i / config.grid_cells - 0.5)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        z = np.asarray(config.surface_function(np.float64(x), ys), dtype=np.float64)
        z = np.broadcast_to(z, ys.shape)
        scale = config.pixels_per_unit
        sx = config.canvas_width / 2 + (x - ys) * COS30 * scale
        sy = config.canvas_height / 2 + (x + ys) * SIN30 * scale - z * config.elevation_scale
    valid = np.isfinite(z) & np.isfinite(sx) & np.isfinite(sy)
    return VertexRow(i=i, x=x, z=z, sx=sx, sy=sy, valid=valid)


def iter_cells(
    config: RenderConfig,
    cancelled: Optional[Callable[[], bool]] = None,
) -> Iterator[Cell]:
    """
    Yield every drawable cell in row-major order (i, then j).

    A cell is drawable only when all four corners have a finite
    elevation and a finite screen position; otherwise it is skipped.
    Corners are ordered (i+1, j), (i, j), (i, j+1), (i+1, j+1).

    Args:
        config: The render to sample.
        cancelled: Polled before each cell; iteration stops once it
            returns True.
    """
    n = config.grid_cells
    ys = domain_coords(config)
    row = sample_row(config, 0, ys)
    for i in range(n):
        next_row = sample_row(config, i + 1, ys)
        for j in range(n):
            if cancelled is not None and cancelled():
                return
            if not (row.valid[j] and row.valid[j + 1] and next_row.valid[j] and next_row.valid[j + 1]):
                continue
            yield Cell(
                i=i,
                j=j,
                corners=(
                    next_row.point(j),
                    row.point(j),
                    row.point(j + 1),
                    next_row.point(j + 1),
                ),
                elevations=(
                    float(next_row.z[j]),
                    float(row.z[j]),
                    float(row.z[j + 1]),
                    float(next_row.z[j + 1]),
                ),
            )
        row = next_row
