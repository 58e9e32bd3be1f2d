"""Application glue between the host window and the tree scene.

``TreeApp`` owns the scene, snow, renderer and canvas. The host loop
feeds it resize notifications, routed actions and one ``tick`` per
display refresh; the app never blocks or schedules anything itself.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pygame

from evergreen.canvas import Canvas, clamp_pixel_ratio
from evergreen.input_router import PERF_TOGGLE, QUIT, TOGGLE_DENSITY
from evergreen.logger import get_logger
from evergreen.renderer import Renderer
from evergreen.rng_service import RNGService
from evergreen.scene import Scene
from evergreen.settings import Settings
from evergreen.snow_system import SnowSystem

log = get_logger("app")


class TreeApp:
    def __init__(self, surface: pygame.Surface, settings: Settings | None = None) -> None:
        self.settings = settings or Settings(load=False)
        if self.settings.seed is not None:
            RNGService.initialize(self.settings.seed)
        self.pixel_ratio = clamp_pixel_ratio(self.settings.pixel_ratio)
        self.canvas = Canvas(surface, self.pixel_ratio)
        width, height = self.canvas.logical_size
        self.scene = Scene(width, height, dense=self.settings.start_dense)
        self.snow = SnowSystem(width, height)
        self.renderer = Renderer(greeting=self.settings.greeting, show_perf=self.settings.show_perf_overlay)
        self.running = True
        log.info(
            f"TreeApp ready: {width:.0f}x{height:.0f} @{self.pixel_ratio}x,",
            "dense" if self.scene.dense else "sparse",
        )

    # ---- Host signals ----
    def on_resize(self, surface: pygame.Surface) -> None:
        """Adopt a new physical surface (window resized or recreated)."""
        self.canvas.retarget(surface)
        width, height = self.canvas.logical_size
        self.snow.resize(width, height)
        self.scene.resize(width, height)

    def on_activate(self) -> bool:
        return self.scene.toggle_density()

    def handle_actions(self, actions: Sequence[str]) -> None:
        for action in actions:
            if action == TOGGLE_DENSITY:
                self.on_activate()
            elif action == PERF_TOGGLE:
                enabled = self.renderer.perf_hud.toggle()
                log.info("perf overlay", "on" if enabled else "off")
            elif action == QUIT:
                self.running = False

    def tick(self, capture_sequence: Optional[List[str]] = None, clock=None) -> None:
        self.renderer.render(self.scene, self.snow, self.canvas, capture_sequence=capture_sequence, clock=clock)


__all__ = ["TreeApp"]
