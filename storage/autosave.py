"""Single-slot autosave.

The slot holds one snapshot of the session::

    {"tiles": [["q,r", {"type": ...}], ...],
     "dimensions": {"width": .., "height": ..},
     "viewport": {"x": .., "y": .., "scale": ..},
     "lastModified": <ms>}

It is restored wholesale at startup. A slot that cannot be decoded is logged
and treated as if it were absent.
"""
from __future__ import annotations
from dataclasses import dataclass
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from editor.config import AUTOSAVE_SLOT
from editor.errors import AutosaveCorrupt, MalformedDocument
from editor.extent import GridExtent
from editor.safe_parse import to_float, to_int
from editor.terrain import DEFAULT_CATALOG, TerrainCatalog
from editor.tiles import TileStore
from editor.viewport import Viewport
from .codec import coord_key, now_ms, parse_dimensions, parse_tile

logger = logging.getLogger(__name__)


@dataclass
class AutosaveState:
    tiles: TileStore
    extent: GridExtent
    viewport: Viewport
    last_modified: int = 0


def encode_autosave(tiles: TileStore, extent: GridExtent, viewport: Viewport,
                    now: Optional[int] = None) -> Dict[str, Any]:
    return {
        "tiles": [[coord_key(c), {"type": t.type}] for c, t in tiles.all()],
        "dimensions": extent.to_dict(),
        "viewport": {"x": viewport.pan_x, "y": viewport.pan_y, "scale": viewport.scale},
        "lastModified": now_ms() if now is None else now,
    }


def decode_autosave(data: Any, catalog: TerrainCatalog = DEFAULT_CATALOG) -> AutosaveState:
    """Decode a slot payload, raising :class:`AutosaveCorrupt` on bad map data.

    Viewport numbers are coerced leniently; tiles and dimensions are not.
    """
    if not isinstance(data, Mapping):
        raise AutosaveCorrupt("autosave is not a JSON object")
    try:
        extent = parse_dimensions(data.get("dimensions"))
        pairs = data.get("tiles")
        if not isinstance(pairs, list):
            raise MalformedDocument("tiles must be a list of [key, tile] pairs")
        store = TileStore(catalog)
        for pair in pairs:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise MalformedDocument(f"bad tile entry {pair!r}")
            parse_tile(store, pair[0], pair[1])
    except MalformedDocument as exc:
        raise AutosaveCorrupt(str(exc)) from exc

    view = data.get("viewport")
    if not isinstance(view, Mapping):
        view = {}
    viewport = Viewport(
        pan_x=to_float(view.get("x"), 0.0),
        pan_y=to_float(view.get("y"), 0.0),
        scale=to_float(view.get("scale"), 1.0),
    )
    return AutosaveState(store, extent, viewport, to_int(data.get("lastModified"), 0))


class AutosaveSlot:
    """The fixed-name autosave file inside ``directory``."""

    def __init__(self, directory: str, slot: str = AUTOSAVE_SLOT) -> None:
        self.directory = directory
        self.path = os.path.join(directory, f"{slot}.json")

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def write(self, tiles: TileStore, extent: GridExtent, viewport: Viewport,
              now: Optional[int] = None) -> None:
        payload = encode_autosave(tiles, extent, viewport, now=now)
        os.makedirs(self.directory, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        os.replace(tmp, self.path)
        logger.debug("autosaved %d tiles to %s", len(tiles), self.path)

    def load(self, catalog: TerrainCatalog = DEFAULT_CATALOG) -> Optional[AutosaveState]:
        """Return the saved state, or ``None`` when the slot is missing or corrupt."""
        if not self.exists():
            return None
        try:
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
                raise AutosaveCorrupt(str(exc)) from exc
            return decode_autosave(data, catalog)
        except AutosaveCorrupt as exc:
            logger.warning("ignoring corrupt autosave %s: %s", self.path, exc)
            return None

    def clear(self) -> None:
        if self.exists():
            os.remove(self.path)
