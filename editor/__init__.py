# editor/__init__.py
# Map state engine: terrain catalog, tiles, extent, viewport and the session owning them

from .errors import MapError, InvalidTerrain, InvalidExpansion, MalformedDocument, AutosaveCorrupt
from .terrain import Terrain, TerrainCatalog, TERRAINS, DEFAULT_CATALOG
from .tiles import Tile, TileStore
from .extent import GridExtent
from .viewport import Viewport
from .session import MapSession

__all__ = [
    "MapError", "InvalidTerrain", "InvalidExpansion", "MalformedDocument", "AutosaveCorrupt",
    "Terrain", "TerrainCatalog", "TERRAINS", "DEFAULT_CATALOG",
    "Tile", "TileStore",
    "GridExtent",
    "Viewport",
    "MapSession",
]
