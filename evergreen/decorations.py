"""Static overlays drawn above the depth-sorted particles."""

from __future__ import annotations

import math
from typing import List, Tuple

from evergreen.canvas import Canvas
from evergreen.constants import (
    CROWN_SCALE,
    GREETING_COLOR,
    GREETING_FONT_SIZE,
    GREETING_GLOW,
    GREETING_GLOW_COLOR,
    GREETING_Y_RATIO,
    STAR_COLOR,
    STAR_GLOW,
    STAR_INNER_RADIUS,
    STAR_OFFSET,
    STAR_OUTER_RADIUS,
    STAR_POINTS,
)
from evergreen.particle import TreeGeometry

DEFAULT_GREETING = "Merry Christmas!"


def star_center(geometry: TreeGeometry, crown_scale: float = CROWN_SCALE) -> Tuple[float, float]:
    return geometry.center_x, geometry.ground_y - geometry.tree_height * crown_scale - STAR_OFFSET


def star_points(
    cx: float,
    cy: float,
    outer: float = STAR_OUTER_RADIUS,
    inner: float = STAR_INNER_RADIUS,
    points: int = STAR_POINTS,
) -> List[Tuple[float, float]]:
    """Vertices of an upright star, alternating outer and inner radius."""
    step = math.pi / points
    verts = []
    for i in range(points * 2):
        radius = outer if i % 2 == 0 else inner
        # angle 0 points straight up (screen y grows downward)
        a = i * step
        verts.append((cx + math.sin(a) * radius, cy - math.cos(a) * radius))
    return verts


def draw_star(canvas: Canvas, geometry: TreeGeometry, crown_scale: float = CROWN_SCALE) -> None:
    cx, cy = star_center(geometry, crown_scale)
    canvas.fill_polygon(star_points(cx, cy), STAR_COLOR, glow=STAR_GLOW)


def draw_greeting(canvas: Canvas, geometry: TreeGeometry, text: str = DEFAULT_GREETING) -> None:
    if not text:
        return
    canvas.draw_text_glow(
        text,
        geometry.center_x,
        geometry.height * GREETING_Y_RATIO,
        size=GREETING_FONT_SIZE,
        color=GREETING_COLOR,
        glow_color=GREETING_GLOW_COLOR,
        glow=GREETING_GLOW,
    )


__all__ = ["DEFAULT_GREETING", "draw_greeting", "draw_star", "star_center", "star_points"]
