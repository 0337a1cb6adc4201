"""Editing session: the one owner of tiles, extent and viewport."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .config import DEFAULT_HEIGHT, DEFAULT_MAP_NAME, DEFAULT_WIDTH, HEX_SIZE
from .extent import GridExtent
from .terrain import DEFAULT_CATALOG, TerrainCatalog
from .tiles import Tile, TileStore
from .viewport import Viewport

logger = logging.getLogger(__name__)


class MapSession:
    """Map state plus the operations the editor performs on it.

    Every successful mutation bumps :attr:`revision` so a front-end can tell
    when an autosave is due. Failed operations raise a
    :class:`~editor.errors.MapError` and leave all state as it was.
    """

    def __init__(self, catalog: TerrainCatalog = DEFAULT_CATALOG,
                 width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 hex_size: float = HEX_SIZE) -> None:
        self.catalog = catalog
        self.hex_size = hex_size
        self.tiles = TileStore(catalog)
        self.extent = GridExtent(width, height)
        self.viewport = Viewport()
        self.name = DEFAULT_MAP_NAME
        self.created: Optional[int] = None
        self.revision = 0

    def _touch(self) -> None:
        self.revision += 1

    # --- painting ---------------------------------------------------------
    def paint(self, q: int, r: int, terrain: str) -> None:
        """Paint ``terrain`` at (q, r), growing the extent when near its edge."""
        self.tiles.paint((q, r), terrain)
        if self.extent.should_grow((q, r)):
            self.extent = self.extent.grow()
            logger.info("painted near edge at (%d,%d); extent grew to %dx%d",
                        q, r, self.extent.width, self.extent.height)
        self._touch()

    def erase(self, q: int, r: int) -> None:
        if (q, r) in self.tiles:
            self.tiles.erase((q, r))
            self._touch()

    def get(self, q: int, r: int) -> Optional[Tile]:
        return self.tiles.get((q, r))

    def expand(self, north: int = 0, south: int = 0, east: int = 0, west: int = 0) -> None:
        self.extent = self.extent.expand(north=north, south=south, east=east, west=west)
        logger.info("extent expanded to %dx%d", self.extent.width, self.extent.height)
        self._touch()

    def new_map(self) -> None:
        """Start over with an empty default-sized map and a reset view."""
        self.tiles = TileStore(self.catalog)
        self.extent = GridExtent(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        self.viewport.reset()
        self.name = DEFAULT_MAP_NAME
        self.created = None
        self._touch()

    # --- persistence ------------------------------------------------------
    def to_document(self, now: Optional[int] = None) -> Dict[str, Any]:
        from storage.codec import serialize
        return serialize(self.tiles, self.extent, name=self.name, created=self.created, now=now)

    def load_document(self, document: Any) -> None:
        """Replace the whole map with ``document``.

        Raises :class:`~editor.errors.MalformedDocument` before touching any
        state when the document does not parse.
        """
        from storage.codec import deserialize, document_metadata
        tiles, extent = deserialize(document, self.catalog)
        meta = document_metadata(document)
        self.tiles, self.extent = tiles, extent
        self.name, self.created = meta["name"], meta["created"]
        self.viewport.reset()
        self._touch()
        logger.info("loaded map %r: %d tiles, %dx%d",
                    self.name, len(tiles), extent.width, extent.height)

    def load_file(self, path: str) -> None:
        from storage.codec import load_json
        self.load_document(load_json(path))

    def save_file(self, path: str, now: Optional[int] = None) -> None:
        from storage.codec import save_json
        document = self.to_document(now=now)
        save_json(path, document)
        self.created = document["metadata"]["created"]

    def export_png(self, path: str) -> None:
        from render.export import export_png
        export_png(path, self.tiles, self.extent, self.hex_size)

    def restore(self, tiles: TileStore, extent: GridExtent, viewport: Viewport) -> None:
        """Adopt state recovered from the autosave slot."""
        self.tiles, self.extent = tiles, extent
        self.viewport = viewport
        self._touch()

    def summary(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "width": self.extent.width,
            "height": self.extent.height,
            "tiles": len(self.tiles),
            "terrain": self.tiles.counts(),
        }
