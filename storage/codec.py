"""Map document codec.

A saved map is a JSON object::

    {
      "version": "1.0",
      "dimensions": {"width": 20, "height": 20},
      "tiles": {"0,0": {"type": "plains"}, "-3,2": {"type": "water"}},
      "metadata": {"created": 1700000000000, "modified": 1700000000000, "name": "Hex Map"}
    }

Tile keys are ``"q,r"`` strings in the document only; in memory the store is
keyed by ``(q, r)`` tuples. Unknown extra fields are ignored on load.
"""
from __future__ import annotations
import json
import logging
import re
import time
from typing import Any, Dict, Mapping, Optional, Tuple

from hexgrid import Coord
from editor.config import DEFAULT_MAP_NAME, DOCUMENT_VERSION
from editor.errors import InvalidTerrain, MalformedDocument
from editor.extent import GridExtent
from editor.terrain import DEFAULT_CATALOG, TerrainCatalog
from editor.tiles import TileStore

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"(-?[0-9]+),(-?[0-9]+)", re.ASCII)


def now_ms() -> int:
    """Wall clock in milliseconds, the unit used by document timestamps."""
    return int(time.time() * 1000)


def coord_key(coord: Coord) -> str:
    q, r = coord
    return f"{q},{r}"


def parse_key(key: Any) -> Coord:
    """Parse a ``"q,r"`` key, raising :class:`MalformedDocument` on anything else."""
    m = _KEY_RE.fullmatch(key) if isinstance(key, str) else None
    if m is None:
        raise MalformedDocument(f"bad tile key {key!r}")
    return int(m.group(1)), int(m.group(2))


def _dimension(data: Mapping[str, Any], name: str) -> int:
    if name not in data:
        raise MalformedDocument(f"dimensions missing {name!r}")
    value = data[name]
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise MalformedDocument(f"dimensions.{name} must be a positive int, got {value!r}")
    return value


def parse_dimensions(data: Any) -> GridExtent:
    if not isinstance(data, Mapping):
        raise MalformedDocument("dimensions must be an object")
    return GridExtent(width=_dimension(data, "width"), height=_dimension(data, "height"))


def parse_tile(store: TileStore, key: Any, value: Any) -> None:
    """Decode one ``key -> {"type": ...}`` entry into ``store``."""
    coord = parse_key(key)
    if coord in store:
        raise MalformedDocument(f"tile {key!r} repeats coordinate {coord}")
    if not isinstance(value, Mapping) or not isinstance(value.get("type"), str):
        raise MalformedDocument(f"tile {key!r} has no terrain type")
    try:
        store.paint(coord, value["type"])
    except InvalidTerrain as exc:
        raise MalformedDocument(f"tile {key!r}: {exc}") from exc


def serialize(tiles: TileStore, dimensions: GridExtent, name: str = DEFAULT_MAP_NAME,
              created: Optional[int] = None, now: Optional[int] = None) -> Dict[str, Any]:
    """Build the JSON-ready document for ``tiles`` and ``dimensions``."""
    stamp = now_ms() if now is None else now
    return {
        "version": DOCUMENT_VERSION,
        "dimensions": dimensions.to_dict(),
        "tiles": {coord_key(c): {"type": t.type} for c, t in tiles.all()},
        "metadata": {
            "created": stamp if created is None else created,
            "modified": stamp,
            "name": name,
        },
    }


def deserialize(document: Any,
                catalog: TerrainCatalog = DEFAULT_CATALOG) -> Tuple[TileStore, GridExtent]:
    """Inverse of :func:`serialize`.

    Raises :class:`MalformedDocument` when ``tiles`` or ``dimensions`` is
    missing, a dimension is not a positive int, a key is not ``"int,int"`` or
    a tile names a terrain the catalog does not know.
    """
    if not isinstance(document, Mapping):
        raise MalformedDocument("document must be a JSON object")
    missing = sorted({"tiles", "dimensions"}.difference(document))
    if missing:
        raise MalformedDocument(f"missing keys: {missing}")

    extent = parse_dimensions(document["dimensions"])
    raw_tiles = document["tiles"]
    if not isinstance(raw_tiles, Mapping):
        raise MalformedDocument("tiles must be an object")
    store = TileStore(catalog)
    for key, value in raw_tiles.items():
        parse_tile(store, key, value)
    return store, extent


def document_metadata(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Return whatever metadata the document carries, with defaults filled in."""
    meta = document.get("metadata")
    if not isinstance(meta, Mapping):
        meta = {}
    created = meta.get("created")
    name = meta.get("name")
    return {
        "created": created if isinstance(created, int) and not isinstance(created, bool) else None,
        "name": name if isinstance(name, str) and name else DEFAULT_MAP_NAME,
    }


def save_json(path: str, document: Mapping[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
    logger.info("saved map to %s", path)


def load_json(path: str) -> Any:
    """Read a document from ``path``; I/O and JSON errors become :class:`MalformedDocument`."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedDocument(f"cannot read {path}: {exc}") from exc
