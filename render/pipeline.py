"""Backend-independent frame building.

Turns tile state into an ordered list of :class:`HexCell` draw records in
world coordinates. Backends (pygame canvas, Pillow export) only project and
stroke those records, so everything about *what* gets drawn lives here and
can be tested without a display. Nothing in this module mutates the store or
the extent; UI state such as the hover cell and active tool comes in through
:class:`RenderOptions`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple

import numpy as np

from hexgrid import Coord, axial_to_pixel, hex_centers
from editor.config import (
    EMPTY_OUTLINE, EXPORT_BG, EXPORT_EMPTY_OUTLINE, EXPORT_TILE_OUTLINE, GRID_TOOLS,
    HEX_SIZE, HIGHLIGHT_ERASE, HIGHLIGHT_PAINT, RENDER_PADDING, TILE_OUTLINE,
)
from editor.extent import GridExtent
from editor.terrain import Color
from editor.tiles import TileStore
from editor.viewport import Viewport

Point = Tuple[float, float]

# decorate(target, pattern, center, size): draws ornamentation for a
# non-solid terrain pattern onto the backend's target at screen ``center``.
Decorate = Callable[[Any, str, Point, float], None]


@dataclass(frozen=True)
class RenderOptions:
    show_grid: bool = True
    hover: Optional[Coord] = None
    tool: str = "tile"
    erasing: bool = False


@dataclass(frozen=True)
class CellStyle:
    tile_outline: Color
    tile_outline_width: float
    empty_fill: Optional[Color]
    empty_outline: Color
    empty_outline_width: float


LIVE_STYLE = CellStyle(TILE_OUTLINE, 1, None, EMPTY_OUTLINE, 0.5)
EXPORT_STYLE = CellStyle(EXPORT_TILE_OUTLINE, 2, EXPORT_BG, EXPORT_EMPTY_OUTLINE, 1)
HIGHLIGHT_WIDTH = 3


@dataclass(frozen=True)
class HexCell:
    q: int
    r: int
    center: Point
    fill: Optional[Color]
    outline: Optional[Color]
    outline_width: float
    pattern: Optional[str] = None


def highlight_color(options: RenderOptions) -> Optional[Color]:
    """Outline colour for the hover cell, or None when the tool does not paint the grid."""
    if options.hover is None or options.tool not in GRID_TOOLS:
        return None
    return HIGHLIGHT_ERASE if options.erasing else HIGHLIGHT_PAINT


def iter_range(extent: GridExtent, padding: int) -> Iterator[Coord]:
    """Every coordinate of the padded extent, row by row."""
    min_q, max_q, min_r, max_r = extent.hex_range(padding)
    for r in range(min_r, max_r + 1):
        for q in range(min_q, max_q + 1):
            yield q, r


def iter_visible(extent: GridExtent, padding: int, viewport: Viewport,
                 canvas_size: Tuple[int, int], hex_size: float) -> Iterator[Coord]:
    """Like :func:`iter_range` but skips cells whose bounding circle is off screen."""
    min_q, max_q, min_r, max_r = extent.hex_range(padding)
    rs, qs = np.mgrid[min_r:max_r + 1, min_q:max_q + 1]
    wx, wy = hex_centers(qs, rs, hex_size)
    w, h = canvas_size
    sx = wx * viewport.scale + w / 2.0 + viewport.pan_x
    sy = wy * viewport.scale + h / 2.0 + viewport.pan_y
    rad = hex_size * viewport.scale
    mask = (sx + rad >= 0) & (sx - rad <= w) & (sy + rad >= 0) & (sy - rad <= h)
    for q, r in zip(qs[mask].tolist(), rs[mask].tolist()):
        yield q, r


def build_cells(tiles: TileStore, coords: Iterator[Coord], hex_size: float,
                style: CellStyle, show_grid: bool = True,
                highlight: Optional[Tuple[Coord, Color]] = None) -> List[HexCell]:
    cells: List[HexCell] = []
    for q, r in coords:
        center = axial_to_pixel(q, r, hex_size)
        tile = tiles.get((q, r))
        if tile is not None:
            terrain = tiles.catalog.get(tile.type)
            if terrain is not None:
                cells.append(HexCell(
                    q, r, center, terrain.color,
                    style.tile_outline if show_grid else None, style.tile_outline_width,
                    terrain.pattern if terrain.pattern != "solid" else None,
                ))
        else:
            cells.append(HexCell(
                q, r, center, style.empty_fill,
                style.empty_outline if show_grid else None, style.empty_outline_width,
            ))
        if highlight is not None and highlight[0] == (q, r):
            cells.append(HexCell(q, r, center, None, highlight[1], HIGHLIGHT_WIDTH))
    return cells


def build_frame(tiles: TileStore, extent: GridExtent,
                options: RenderOptions = RenderOptions(),
                padding: int = RENDER_PADDING, hex_size: float = HEX_SIZE,
                viewport: Optional[Viewport] = None,
                canvas_size: Optional[Tuple[int, int]] = None) -> List[HexCell]:
    """Draw records for the live canvas.

    The set of cells is driven by the declared extent plus ``padding``. When
    ``viewport`` and ``canvas_size`` are given, cells entirely off screen are
    culled; that never changes which hexes can be painted.
    """
    if viewport is not None and canvas_size is not None:
        coords = iter_visible(extent, padding, viewport, canvas_size, hex_size)
    else:
        coords = iter_range(extent, padding)
    color = highlight_color(options)
    highlight = (tuple(options.hover), color) if color is not None else None
    return build_cells(tiles, coords, hex_size, LIVE_STYLE, options.show_grid, highlight)


def build_export_frame(tiles: TileStore, extent: GridExtent,
                       hex_size: float = HEX_SIZE) -> List[HexCell]:
    """Draw records for a static export: unpadded extent, grid always on, no hover."""
    return build_cells(tiles, iter_range(extent, 0), hex_size, EXPORT_STYLE)
