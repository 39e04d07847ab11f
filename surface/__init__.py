"""Surface renderer — height field → isometric SVG pipeline."""

from surface.color import RGBA, decode_hex, encode_hex, interpolate
from surface.functions import SurfaceFunction, evaluate, resolve
from surface.params import RenderParameterError, parse_render_params
from surface.projection import iter_cells
from surface.renderer import iter_svg, render_surface
from surface.state import RenderConfig

__all__ = [
    "RGBA",
    "decode_hex",
    "encode_hex",
    "interpolate",
    "SurfaceFunction",
    "evaluate",
    "resolve",
    "RenderParameterError",
    "parse_render_params",
    "iter_cells",
    "iter_svg",
    "render_surface",
    "RenderConfig",
]
