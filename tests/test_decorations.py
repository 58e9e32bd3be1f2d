import math

import pytest

from evergreen.decorations import draw_greeting, draw_star, star_center, star_points
from evergreen.particle import TreeGeometry


def test_star_points_alternate_radii():
    pts = star_points(0, 0)
    assert len(pts) == 10
    assert pts[0] == pytest.approx((0, -12))
    dists = [math.hypot(x, y) for x, y in pts]
    assert dists[0::2] == pytest.approx([12] * 5)
    assert dists[1::2] == pytest.approx([5] * 5)


def test_star_sits_above_crown():
    g = TreeGeometry.from_viewport(1000, 1000)
    cx, cy = star_center(g)
    assert cx == g.center_x
    assert cy == pytest.approx(g.ground_y - g.tree_height * 0.7 - 26)


def test_overlays_draw(canvas):
    g = TreeGeometry.from_viewport(*canvas.logical_size)
    draw_star(canvas, g)
    cx, cy = star_center(g)
    assert canvas.surface.get_at((int(cx), int(cy))) != canvas.surface.get_at((0, 0))
    draw_greeting(canvas, g, "")
    draw_greeting(canvas, g, "Season's greetings")
