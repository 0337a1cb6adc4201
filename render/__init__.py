# render/__init__.py
# Package init for rendering modules

from .pipeline import RenderOptions, HexCell, build_frame, build_export_frame
from .export import render_export, export_png, export_size

__all__ = [
    "RenderOptions", "HexCell", "build_frame", "build_export_frame",
    "render_export", "export_png", "export_size",
]
