"""
Hex Map Builder GUI package.

Pygame window hosting the map editor.
"""

from .main import MapEditorGUI, main

__all__ = ["MapEditorGUI", "main"]
