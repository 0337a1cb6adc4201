"""Static PNG export with Pillow."""
from __future__ import annotations
import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from hexgrid import SQRT3, hex_corners
from editor.config import EXPORT_BG, EXPORT_PADDING, HEX_SIZE
from editor.extent import GridExtent
from editor.tiles import TileStore
from .pipeline import Decorate, build_export_frame

logger = logging.getLogger(__name__)


def export_size(extent: GridExtent, hex_size: float = HEX_SIZE) -> Tuple[int, int]:
    """Image size for ``extent``: one hex of margin on each side."""
    hex_w = hex_size * SQRT3
    hex_h = hex_size * 2
    return (int((extent.width + EXPORT_PADDING) * hex_w),
            int((extent.height + EXPORT_PADDING) * hex_h * 0.75))


def render_export(tiles: TileStore, extent: GridExtent, hex_size: float = HEX_SIZE,
                  decorate: Optional[Decorate] = None) -> Image.Image:
    """Rasterise the declared extent onto a white image centred on hex (0, 0).

    ``decorate`` receives the :class:`PIL.ImageDraw.ImageDraw` as its target.
    """
    img_w, img_h = export_size(extent, hex_size)
    img = Image.new("RGB", (img_w, img_h), EXPORT_BG)
    draw = ImageDraw.Draw(img)
    ox, oy = img_w / 2.0, img_h / 2.0
    for cell in build_export_frame(tiles, extent, hex_size):
        cx, cy = cell.center[0] + ox, cell.center[1] + oy
        pts = hex_corners(cx, cy, hex_size)
        draw.polygon(pts, fill=cell.fill, outline=cell.outline,
                     width=max(1, int(round(cell.outline_width))))
        if cell.pattern is not None and decorate is not None:
            decorate(draw, cell.pattern, (cx, cy), hex_size)
    return img


def export_png(path: str, tiles: TileStore, extent: GridExtent,
               hex_size: float = HEX_SIZE, decorate: Optional[Decorate] = None) -> None:
    img = render_export(tiles, extent, hex_size, decorate)
    img.save(path, format="PNG")
    logger.info("exported %dx%d image to %s", img.width, img.height, path)
