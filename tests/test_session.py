import pytest

from editor.errors import InvalidExpansion, InvalidTerrain, MalformedDocument
from editor.extent import GridExtent
from editor.session import MapSession
from editor.tiles import Tile


def test_scenario_paint_then_erase():
    sess = MapSession()
    sess.paint(0, 0, "plains")
    assert sess.get(0, 0) == Tile("plains")
    sess.erase(0, 0)
    assert sess.get(0, 0) is None


def test_scenario_paint_near_edge_grows():
    sess = MapSession(width=20, height=20)
    sess.paint(9, 0, "forest")
    assert sess.extent.width == 25
    assert sess.extent.height == 25
    assert sess.get(9, 0) == Tile("forest")


def test_paint_inside_does_not_grow():
    sess = MapSession()
    sess.paint(3, -4, "hills")
    assert sess.extent == GridExtent(20, 20)


def test_scenario_expand():
    sess = MapSession(width=20, height=20)
    sess.expand(north=5, south=0, east=3, west=3)
    assert sess.extent == GridExtent(26, 25)


def test_scenario_malformed_load_keeps_state():
    sess = MapSession()
    sess.paint(1, 1, "swamp")
    sess.viewport.pan(30, 40)
    before = (sess.tiles.copy(), sess.extent, sess.viewport.as_tuple(), sess.revision)
    with pytest.raises(MalformedDocument):
        sess.load_document({"dimensions": {"width": 10}})
    assert (sess.tiles, sess.extent, sess.viewport.as_tuple(), sess.revision) == before


def test_rejected_edits_change_nothing():
    sess = MapSession()
    rev = sess.revision
    with pytest.raises(InvalidTerrain):
        sess.paint(9, 9, "lava")
    with pytest.raises(InvalidExpansion):
        sess.expand(west=-1)
    assert sess.revision == rev
    assert len(sess.tiles) == 0
    assert sess.extent == GridExtent(20, 20)


def test_erase_absent_is_noop():
    sess = MapSession()
    rev = sess.revision
    sess.erase(4, 4)
    sess.erase(4, 4)
    assert sess.revision == rev


def test_load_replaces_wholesale_and_resets_view():
    sess = MapSession()
    sess.paint(0, 0, "plains")
    sess.viewport.zoom_by(2.0)
    doc = {
        "version": "1.0",
        "dimensions": {"width": 12, "height": 8},
        "tiles": {"2,2": {"type": "water"}},
        "metadata": {"created": 7, "modified": 8, "name": "Bay"},
    }
    sess.load_document(doc)
    assert sess.get(0, 0) is None
    assert sess.get(2, 2) == Tile("water")
    assert sess.extent == GridExtent(12, 8)
    assert sess.viewport.as_tuple() == (0.0, 0.0, 1.0)
    assert (sess.name, sess.created) == ("Bay", 7)


def test_save_and_load_file(tmp_path):
    path = str(tmp_path / "map.json")
    sess = MapSession()
    sess.paint(-2, 3, "desert")
    sess.expand(east=4)
    sess.save_file(path, now=100)
    created = sess.created

    other = MapSession()
    other.load_file(path)
    assert other.tiles == sess.tiles
    assert other.extent == sess.extent
    # re-saving keeps the first creation stamp
    other.save_file(path, now=200)
    doc = other.to_document(now=300)
    assert doc["metadata"]["created"] == created == 100


def test_new_map_resets_everything():
    sess = MapSession()
    sess.paint(9, 9, "volcano")
    sess.viewport.pan(5, 5)
    sess.new_map()
    assert len(sess.tiles) == 0
    assert sess.extent == GridExtent(20, 20)
    assert sess.viewport.as_tuple() == (0.0, 0.0, 1.0)


def test_export_png(tmp_path):
    sess = MapSession(width=4, height=4, hex_size=10)
    sess.paint(0, 0, "plains")
    path = tmp_path / "out.png"
    sess.export_png(str(path))
    assert path.exists()


def test_summary_counts():
    sess = MapSession()
    sess.paint(0, 0, "plains")
    sess.paint(1, 0, "plains")
    s = sess.summary()
    assert s["tiles"] == 2
    assert s["terrain"] == {"plains": 2}
    assert (s["width"], s["height"]) == (20, 20)
