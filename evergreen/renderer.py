"""Per-frame rendering pipeline.

Layer order (bottom -> top):
1. Clear the canvas
2. Advance the scene rotation by one fixed step
3. Tree particles: trunk + foliage + lights, projected and drawn
   farthest first with an opacity chosen by particle kind
4. Star above the crown
5. Greeting text
6. Snow: update then draw
7. Performance overlay (optional)

The renderer has no timer and no paused state; it draws exactly one frame
per ``render`` call. ``capture_sequence`` records the executed steps so
tests can assert ordering without sampling pixels.
"""

from __future__ import annotations

from typing import List, Optional

from evergreen.canvas import Canvas
from evergreen.constants import SNOW_ALPHA, SNOW_COLOR
from evergreen.decorations import DEFAULT_GREETING, draw_greeting, draw_star
from evergreen.logger import get_logger
from evergreen.particle import kind_counts
from evergreen.perf_hud import PerformanceHUD
from evergreen.scene import Scene
from evergreen.snow_system import SnowSystem

_log = get_logger("renderer")


class Renderer:
    """Frame orchestrator.

    Usage:
        r = Renderer(greeting="Merry Christmas!")
        r.render(scene, snow, canvas)
    """

    def __init__(self, greeting: str = DEFAULT_GREETING, show_perf: bool = False) -> None:
        self.greeting = greeting
        self.perf_hud = PerformanceHUD(enabled=show_perf)
        self.frame = 0
        self.last_drawn = 0

    def render(
        self,
        scene: Scene,
        snow: SnowSystem,
        canvas: Canvas,
        capture_sequence: Optional[List[str]] = None,
        clock=None,
    ) -> None:
        seq = capture_sequence
        self.perf_hud.begin_frame()

        # 1. Clear
        canvas.clear()
        if seq is not None:
            seq.append("clear")

        # 2. Rotate
        scene.advance()
        if seq is not None:
            seq.append("rotate")

        # 3. Tree particles, farthest first
        self.last_drawn = self._draw_particles(scene, canvas)
        if seq is not None:
            seq.append("particles")

        # 4-5. Overlays ignore depth
        draw_star(canvas, scene.geometry, scene.shape.crown_scale)
        if seq is not None:
            seq.append("star")
        draw_greeting(canvas, scene.geometry, self.greeting)
        if seq is not None:
            seq.append("greeting")

        # 6. Snow on top of everything
        snow.update()
        for cmd in snow.get_draw_commands():
            canvas.fill_circle(cmd.x, cmd.y, cmd.radius, SNOW_COLOR, SNOW_ALPHA)
        if seq is not None:
            seq.append("snow")

        # 7. Optional overlay
        self.perf_hud.end_work_segment()
        if self.perf_hud.enabled:
            counts = {**kind_counts(scene.collections.all()), "snow": len(snow)}
            sprites = Canvas.get_sprite_cache_stats()
            counts["sprites"] = f"{sprites['size']}/{sprites['capacity']}"
            if self.perf_hud.render(canvas.surface, counts) and seq is not None:
                seq.append("perf")
        self.perf_hud.end_frame(clock=clock)

        self.frame += 1
        if self.frame % 600 == 0:
            _log.debug("frame", self.frame, "particles", self.last_drawn, "snow", len(snow))

    @staticmethod
    def _draw_particles(scene: Scene, canvas: Canvas) -> int:
        drawn = 0
        for particle, point in scene.draw_order():
            canvas.fill_circle(point.x, point.y, point.radius, particle.color, particle.kind.opacity(point.z))
            drawn += 1
        return drawn


__all__ = ["Renderer"]
