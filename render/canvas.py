"""Live pygame canvas backend."""
from __future__ import annotations
from typing import Optional, Tuple

import pygame

from hexgrid import hex_corners
from editor.config import CANVAS_BG, HEX_SIZE, RENDER_PADDING
from editor.extent import GridExtent
from editor.tiles import TileStore
from editor.viewport import Viewport
from .pipeline import Decorate, RenderOptions, build_frame


def stroke_width(width: float, scale: float) -> int:
    """pygame strokes are whole pixels; keep hairlines visible when zoomed out."""
    return max(1, int(round(width * scale)))


def draw_map(surface: pygame.Surface, tiles: TileStore, extent: GridExtent,
             viewport: Viewport, options: RenderOptions = RenderOptions(),
             hex_size: float = HEX_SIZE, padding: int = RENDER_PADDING,
             decorate: Optional[Decorate] = None,
             background: Tuple[int, int, int] = CANVAS_BG) -> int:
    """Clear ``surface`` and draw the map through ``viewport``.

    Returns the number of draw records issued after culling.
    """
    surface.fill(background)
    sw, sh = surface.get_size()
    center = (sw / 2.0, sh / 2.0)
    size = hex_size * viewport.scale
    cells = build_frame(tiles, extent, options, padding=padding, hex_size=hex_size,
                        viewport=viewport, canvas_size=(sw, sh))
    for cell in cells:
        sx, sy = viewport.world_to_screen(cell.center[0], cell.center[1], center)
        pts = hex_corners(sx, sy, size)
        if cell.fill is not None:
            pygame.draw.polygon(surface, cell.fill, pts)
        if cell.outline is not None:
            pygame.draw.polygon(surface, cell.outline, pts,
                                stroke_width(cell.outline_width, viewport.scale))
        if cell.pattern is not None and decorate is not None:
            decorate(surface, cell.pattern, (sx, sy), size)
    return len(cells)
