from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from hexgrid import Coord, pixel_to_axial
from .config import MAX_SCALE, MIN_SCALE

Point = Tuple[float, float]


def clamp_scale(scale: float) -> float:
    return max(MIN_SCALE, min(MAX_SCALE, float(scale)))


@dataclass
class Viewport:
    """Pan/zoom transform between world pixels and screen pixels.

    Rendering translates by ``canvas_center + pan`` and then scales;
    :meth:`screen_to_world` is the algebraic inverse of :meth:`world_to_screen`.
    """

    pan_x: float = 0.0
    pan_y: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        self.scale = clamp_scale(self.scale)

    def pan(self, dx: float, dy: float) -> None:
        self.pan_x += dx
        self.pan_y += dy

    def zoom_by(self, factor: float) -> None:
        self.scale = clamp_scale(self.scale * factor)

    def zoom_delta(self, delta: float) -> None:
        self.scale = clamp_scale(self.scale + delta)

    def set_scale(self, scale: float) -> None:
        self.scale = clamp_scale(scale)

    def reset(self) -> None:
        self.pan_x, self.pan_y, self.scale = 0.0, 0.0, 1.0

    def world_to_screen(self, wx: float, wy: float, center: Point) -> Point:
        cx, cy = center
        return wx * self.scale + cx + self.pan_x, wy * self.scale + cy + self.pan_y

    def screen_to_world(self, sx: float, sy: float, center: Point) -> Point:
        cx, cy = center
        return (sx - cx - self.pan_x) / self.scale, (sy - cy - self.pan_y) / self.scale

    def screen_to_hex(self, sx: float, sy: float, center: Point, hex_size: float) -> Coord:
        wx, wy = self.screen_to_world(sx, sy, center)
        return pixel_to_axial(wx, wy, hex_size)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.pan_x, self.pan_y, self.scale)
