"""
SVG emitter — RenderConfig → streamed SVG document.

Renders a Jinja2 template over a lazy stream of projected cells, so the
document is written out piece by piece and never held in memory whole.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, Optional

from jinja2 import Environment, FileSystemLoader

from config import settings
from surface.color import encode_hex, interpolate
from surface.projection import iter_cells
from surface.state import Cell, RenderConfig

# Jinja2 environment pointing at our templates directory
_TEMPLATE_DIR = Path(__file__).parent / "templates"
_jinja_env = Environment(loader=FileSystemLoader(str(_TEMPLATE_DIR)))

SVG_MEDIA_TYPE = "image/svg+xml"


def format_coord(value: float) -> str:
    """Shortest round-trip text for a coordinate; integral values drop the '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _polygon(cell: Cell, config: RenderConfig) -> tuple[str, str]:
    points = " ".join(f"{format_coord(p.sx)},{format_coord(p.sy)}" for p in cell.corners)
    fill = interpolate(config.low_color, config.high_color, cell.mean_elevation)
    return points, encode_hex(fill)


def _polygons(cells: Iterable[Cell], config: RenderConfig) -> Iterator[tuple[str, str]]:
    for cell in cells:
        yield _polygon(cell, config)


def iter_svg(
    config: RenderConfig,
    cancelled: Optional[Callable[[], bool]] = None,
    buffer_size: Optional[int] = None,
) -> Iterator[bytes]:
    """
    Stream the SVG document for ``config`` as UTF-8 chunks.

    Args:
        config: The render to draw.
        cancelled: Polled once per cell; the document is cut short
            (left unterminated) once it returns True.
        buffer_size: Template chunks joined per yielded piece
            (defaults to settings.STREAM_BUFFER_CELLS).
    """
    if buffer_size is None:
        buffer_size = settings.STREAM_BUFFER_CELLS

    template = _jinja_env.get_template("surface.svg.j2")
    stream = template.stream(
        width=config.canvas_width,
        height=config.canvas_height,
        polygons=_polygons(iter_cells(config, cancelled), config),
    )
    stream.enable_buffering(size=buffer_size)
    for chunk in stream:
        if cancelled is not None and cancelled():
            return
        yield chunk.encode("utf-8")


def render_surface(config: RenderConfig, sink: BinaryIO) -> None:
    """
    Write the SVG for ``config`` to a binary ``sink``.

    Pipeline: RenderConfig → grid sampling → isometric projection →
    elevation colors → SVG polygons, written incrementally.
    """
    for chunk in iter_svg(config):
        sink.write(chunk)
