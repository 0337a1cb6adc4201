# storage/__init__.py
# Map document codec and the autosave slot

from .codec import serialize, deserialize, save_json, load_json, document_metadata
from .autosave import AutosaveSlot, AutosaveState, encode_autosave, decode_autosave

__all__ = [
    "serialize", "deserialize", "save_json", "load_json", "document_metadata",
    "AutosaveSlot", "AutosaveState", "encode_autosave", "decode_autosave",
]
