from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Terrain:
    id: str
    name: str
    color: Color
    pattern: str = "solid"


TERRAINS = (
    Terrain("plains", "Plains", (154, 205, 50)),
    Terrain("farmland", "Farmland", (154, 205, 50), "farmland"),
    Terrain("forest", "Forest", (34, 139, 34), "trees"),
    Terrain("dense-forest", "Dense Forest", (26, 92, 26), "dense-trees"),
    Terrain("hills", "Hills", (210, 180, 140), "wavy"),
    Terrain("mountain-range", "Mountain Range", (139, 115, 85), "peaks"),
    Terrain("large-mountain", "Large Mountain", (107, 83, 68), "large-peak"),
    Terrain("volcano", "Volcano", (139, 69, 19), "volcano"),
    Terrain("water", "Water", (70, 130, 180), "waves"),
    Terrain("shallow-water", "Shallow Water", (135, 206, 235), "shallow-waves"),
    Terrain("deep-water", "Deep Water", (30, 58, 95), "rough-waves"),
    Terrain("desert", "Desert/Beach", (244, 228, 166), "dots"),
    Terrain("swamp", "Swamp", (90, 107, 90), "reeds"),
)


class TerrainCatalog:
    """Ordered lookup table of the terrain kinds a map may use.

    The engine only ever asks whether an id is known and what it looks like;
    adding a terrain means adding a row to :data:`TERRAINS`.
    """

    def __init__(self, terrains: Iterable[Terrain]) -> None:
        self._by_id: Dict[str, Terrain] = {}
        for t in terrains:
            if t.id in self._by_id:
                raise ValueError(f"duplicate terrain id {t.id!r}")
            self._by_id[t.id] = t

    def __contains__(self, terrain_id: object) -> bool:
        return terrain_id in self._by_id

    def __iter__(self) -> Iterator[Terrain]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, terrain_id: str) -> Optional[Terrain]:
        return self._by_id.get(terrain_id)

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._by_id)


DEFAULT_CATALOG = TerrainCatalog(TERRAINS)
