"""Sparse tile storage keyed by axial coordinate."""
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
import logging
from typing import Dict, Iterator, Optional, Tuple

from hexgrid import Coord
from .errors import InvalidTerrain
from .terrain import DEFAULT_CATALOG, TerrainCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    type: str


class TileStore:
    """Authoritative map contents.

    A coordinate with no entry is empty, which is not the same as any
    terrain. Tiles are replaced on write, never edited in place.
    """

    def __init__(self, catalog: TerrainCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog
        self._tiles: Dict[Coord, Tile] = {}

    def paint(self, coord: Coord, terrain: str) -> None:
        if terrain not in self.catalog:
            logger.debug("paint rejected: unknown terrain %r at %s", terrain, coord)
            raise InvalidTerrain(f"unknown terrain {terrain!r}")
        q, r = coord
        self._tiles[(int(q), int(r))] = Tile(terrain)

    def erase(self, coord: Coord) -> None:
        self._tiles.pop((int(coord[0]), int(coord[1])), None)

    def get(self, coord: Coord) -> Optional[Tile]:
        return self._tiles.get((coord[0], coord[1]))

    def all(self) -> Iterator[Tuple[Coord, Tile]]:
        """Yield ``(coord, tile)`` pairs; callers must not rely on the order."""
        for coord, tile in self._tiles.items():
            yield coord, tile

    def clear(self) -> None:
        self._tiles.clear()

    def copy(self) -> "TileStore":
        other = TileStore(self.catalog)
        other._tiles = dict(self._tiles)
        return other

    def counts(self) -> Dict[str, int]:
        """Number of tiles per terrain id."""
        return dict(Counter(t.type for t in self._tiles.values()))

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, coord: object) -> bool:
        return coord in self._tiles

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileStore):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"TileStore({len(self._tiles)} tiles)"
