"""Error kinds raised by the map engine.

Every error is raised before the offending mutation touches any state, so a
caller that catches one can simply carry on with the map it already had.
"""


class MapError(Exception):
    """Base class for refused map operations."""


class InvalidTerrain(MapError):
    """Paint requested with a terrain id missing from the catalog."""


class InvalidExpansion(MapError):
    """Manual expansion requested with a negative delta."""


class MalformedDocument(MapError):
    """A map document could not be read or parsed."""


class AutosaveCorrupt(MapError):
    """The autosave slot exists but cannot be decoded."""
