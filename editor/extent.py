"""Declared map bounds, measured in hexes and centred on the origin."""
from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Tuple

from hexgrid import Coord
from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, GROW_INCREMENT, GROW_MARGIN
from .errors import InvalidExpansion


@dataclass(frozen=True)
class GridExtent:
    """Nominal ``width`` x ``height`` of the map.

    Rendering adds its own padding around this rectangle, so the canvas
    always shows some unpainted cells past the border. Extents only grow.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")

    def should_grow(self, coord: Coord, margin: int = GROW_MARGIN) -> bool:
        """True when ``coord`` lies within ``margin`` hexes of the declared edge."""
        q, r = coord
        return abs(q) >= self.width / 2 - margin or abs(r) >= self.height / 2 - margin

    def grow(self, increment: int = GROW_INCREMENT) -> "GridExtent":
        return replace(self, width=self.width + increment, height=self.height + increment)

    def expand(self, north: int = 0, south: int = 0, east: int = 0, west: int = 0) -> "GridExtent":
        """Return a larger extent; north/south add height, east/west add width."""
        deltas = {"north": north, "south": south, "east": east, "west": west}
        negative = sorted(k for k, v in deltas.items() if v < 0)
        if negative:
            raise InvalidExpansion(f"expansion deltas must be >= 0: {negative}")
        return replace(self, width=self.width + east + west, height=self.height + north + south)

    def hex_range(self, padding: int = 0) -> Tuple[int, int, int, int]:
        """Inclusive ``(min_q, max_q, min_r, max_r)`` covered by the extent plus ``padding``."""
        min_q = math.floor(-self.width / 2) - padding
        max_q = math.ceil(self.width / 2) + padding
        min_r = math.floor(-self.height / 2) - padding
        max_r = math.ceil(self.height / 2) + padding
        return min_q, max_q, min_r, max_r

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
