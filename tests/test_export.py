import math

from PIL import Image

from editor.extent import GridExtent
from editor.tiles import TileStore
from render.export import export_png, export_size, render_export


def test_export_size_formula():
    w, h = export_size(GridExtent(20, 20), 70)
    assert w == int(22 * 70 * math.sqrt(3))
    assert h == int(22 * 140 * 0.75)


def test_render_export_pixels():
    store = TileStore()
    store.paint((0, 0), "plains")
    img = render_export(store, GridExtent(6, 4), hex_size=20)
    assert img.size == export_size(GridExtent(6, 4), 20)
    w, h = img.size
    assert img.getpixel((w // 2, h // 2)) == (154, 205, 50)
    # background corner stays white
    assert img.getpixel((0, 0)) == (255, 255, 255)


def test_export_calls_decorate_for_patterns():
    store = TileStore()
    store.paint((0, 0), "plains")
    store.paint((1, 0), "volcano")
    calls = []
    render_export(store, GridExtent(4, 4), hex_size=10,
                  decorate=lambda draw, pattern, center, size: calls.append((pattern, size)))
    assert calls == [("volcano", 10)]


def test_export_png_writes_file(tmp_path):
    store = TileStore()
    store.paint((-1, 1), "swamp")
    path = tmp_path / "map.png"
    export_png(str(path), store, GridExtent(5, 5), hex_size=12)
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == export_size(GridExtent(5, 5), 12)
