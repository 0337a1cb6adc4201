from editor.config import (
    EMPTY_OUTLINE, EXPORT_BG, HIGHLIGHT_ERASE, HIGHLIGHT_PAINT, TILE_OUTLINE,
)
from editor.extent import GridExtent
from editor.tiles import TileStore
from editor.viewport import Viewport
from render.pipeline import (
    HIGHLIGHT_WIDTH, RenderOptions, build_export_frame, build_frame, iter_range,
)


def _by_coord(cells):
    out = {}
    for c in cells:
        out.setdefault((c.q, c.r), []).append(c)
    return out


def test_frame_covers_padded_extent():
    cells = build_frame(TileStore(), GridExtent(20, 20), padding=5)
    assert len(cells) == 31 * 31
    coords = {(c.q, c.r) for c in cells}
    assert (-15, -15) in coords and (15, 15) in coords
    assert (16, 0) not in coords


def test_tile_and_empty_cells():
    store = TileStore()
    store.paint((0, 0), "plains")
    store.paint((1, 0), "forest")
    cells = _by_coord(build_frame(store, GridExtent(4, 4), padding=1))
    plains = cells[(0, 0)][0]
    assert plains.fill == (154, 205, 50)
    assert plains.outline == TILE_OUTLINE
    assert plains.pattern is None
    assert cells[(1, 0)][0].pattern == "trees"
    empty = cells[(2, 2)][0]
    assert empty.fill is None
    assert empty.outline == EMPTY_OUTLINE
    assert empty.outline_width == 0.5


def test_grid_off_suppresses_outlines():
    store = TileStore()
    store.paint((0, 0), "water")
    cells = build_frame(store, GridExtent(4, 4), RenderOptions(show_grid=False), padding=0)
    assert all(c.outline is None for c in cells)
    assert any(c.fill == (70, 130, 180) for c in cells)


def test_hover_highlight_depends_on_tool_and_mode():
    ext = GridExtent(4, 4)
    paint = _by_coord(build_frame(TileStore(), ext, RenderOptions(hover=(1, -1), tool="tile"), padding=0))
    assert [c.outline for c in paint[(1, -1)]] == [EMPTY_OUTLINE, HIGHLIGHT_PAINT]
    assert paint[(1, -1)][1].outline_width == HIGHLIGHT_WIDTH

    erase = _by_coord(build_frame(TileStore(), ext,
                                  RenderOptions(hover=(1, -1), tool="road", erasing=True), padding=0))
    assert erase[(1, -1)][1].outline == HIGHLIGHT_ERASE

    hand = build_frame(TileStore(), ext, RenderOptions(hover=(1, -1), tool="hand"), padding=0)
    assert len(hand) == 5 * 5


def test_render_does_not_mutate_state():
    store = TileStore()
    store.paint((2, 2), "hills")
    ext = GridExtent(6, 6)
    snapshot = store.copy()
    build_frame(store, ext, RenderOptions(hover=(2, 2)), viewport=Viewport(10, 10, 2.0),
                canvas_size=(300, 200))
    build_export_frame(store, ext)
    assert store == snapshot
    assert ext == GridExtent(6, 6)


def test_culling_only_drops_offscreen_cells():
    ext = GridExtent(40, 40)
    full = {(c.q, c.r) for c in build_frame(TileStore(), ext, padding=5, hex_size=10)}
    vp = Viewport(pan_x=0, pan_y=0, scale=1.0)
    visible = {(c.q, c.r) for c in build_frame(TileStore(), ext, padding=5, hex_size=10,
                                               viewport=vp, canvas_size=(100, 100))}
    assert visible < full
    assert (0, 0) in visible
    assert (25, 25) not in visible

    # a canvas big enough for everything culls nothing
    everything = {(c.q, c.r) for c in build_frame(TileStore(), ext, padding=5, hex_size=10,
                                                  viewport=vp, canvas_size=(5000, 5000))}
    assert everything == full


def test_culling_follows_pan():
    ext = GridExtent(40, 40)
    vp = Viewport(pan_x=-400, pan_y=0, scale=1.0)
    visible = {(c.q, c.r) for c in build_frame(TileStore(), ext, padding=5, hex_size=10,
                                               viewport=vp, canvas_size=(100, 100))}
    assert (0, 0) not in visible
    # world x ~ 400 is about 23 hexes east at size 10
    assert (23, 0) in visible


def test_export_frame_unpadded_without_hover():
    store = TileStore()
    store.paint((0, 0), "desert")
    cells = build_export_frame(store, GridExtent(20, 20))
    assert len(cells) == 21 * 21
    by = _by_coord(cells)
    assert by[(0, 0)][0].outline_width == 2
    assert by[(3, 3)][0].fill == EXPORT_BG


def test_iter_range_row_major():
    coords = list(iter_range(GridExtent(2, 2), 0))
    assert coords[0] == (-1, -1)
    assert coords[1] == (0, -1)
    assert coords[-1] == (1, 1)
