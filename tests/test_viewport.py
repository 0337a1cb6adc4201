import random

import pytest

from editor.config import MAX_SCALE, MIN_SCALE
from editor.viewport import Viewport


def test_zoom_always_clamped():
    rng = random.Random(7)
    vp = Viewport()
    for _ in range(500):
        if rng.random() < 0.5:
            vp.zoom_by(rng.choice([0.9, 1.1, 0.1, 10.0, rng.uniform(0.01, 5.0)]))
        else:
            vp.zoom_delta(rng.uniform(-2.0, 2.0))
        assert MIN_SCALE <= vp.scale <= MAX_SCALE


def test_zoom_limits():
    vp = Viewport()
    for _ in range(100):
        vp.zoom_by(1.1)
    assert vp.scale == MAX_SCALE
    for _ in range(100):
        vp.zoom_delta(-0.1)
    assert vp.scale == MIN_SCALE
    assert Viewport(scale=50).scale == MAX_SCALE


def test_pan_and_reset():
    vp = Viewport()
    vp.pan(10, -5)
    vp.pan(-3, 2)
    assert (vp.pan_x, vp.pan_y) == (7, -3)
    vp.zoom_by(2.0)
    vp.reset()
    assert vp.as_tuple() == (0.0, 0.0, 1.0)


@pytest.mark.parametrize("pan_x,pan_y,scale", [
    (0, 0, 1.0), (123.5, -40, 0.3), (-900, 250, 3.0), (17, 17, 1.37),
])
def test_screen_world_inverse(pan_x, pan_y, scale):
    vp = Viewport(pan_x, pan_y, scale)
    center = (640.0, 400.0)
    for wx, wy in [(0, 0), (-350.2, 1000.7), (77.7, -13.1)]:
        sx, sy = vp.world_to_screen(wx, wy, center)
        assert vp.screen_to_world(sx, sy, center) == pytest.approx((wx, wy))


def test_screen_to_hex_hits_painted_center():
    vp = Viewport(pan_x=40, pan_y=-25, scale=0.5)
    center = (400.0, 300.0)
    # hex (0,0) sits at the canvas centre shifted by the pan
    assert vp.screen_to_hex(440, 275, center, 70) == (0, 0)
    assert vp.screen_to_hex(440 + 70 * 3 ** 0.5 * 0.5, 275, center, 70) == (1, 0)
