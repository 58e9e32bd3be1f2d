"""Falling snow in screen space.

A bounded pool of flakes: at most one spawn per update (below the cap),
linear fall plus sinusoidal sway, and removal once a flake drops past the
bottom edge. ``update`` mutates; ``get_draw_commands`` is read-only so the
renderer decides how to paint them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from evergreen.constants import (
    SNOW_CAP,
    SNOW_EXIT_MARGIN,
    SNOW_PHASE_STEP,
    SNOW_RADIUS_RANGE,
    SNOW_SPAWN_CHANCE,
    SNOW_SPAWN_Y,
    SNOW_SPEED_RANGE,
    SNOW_SWAY_AMPLITUDE,
    TAU,
)
from evergreen.rng_service import RNGService


class Snowflake:
    __slots__ = ("x", "y", "radius", "vy", "phase")

    def __init__(self, x: float, y: float, radius: float, vy: float, phase: float):
        self.x = x
        self.y = y
        self.radius = radius
        self.vy = vy
        self.phase = phase

    def update(self) -> None:
        self.phase += SNOW_PHASE_STEP
        self.x += math.sin(self.phase) * SNOW_SWAY_AMPLITUDE
        self.y += self.vy

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Snowflake(x={self.x:.1f}, y={self.y:.1f}, r={self.radius:.2f})"


@dataclass
class SnowDrawCommand:
    x: float
    y: float
    radius: float


class SnowSystem:
    def __init__(
        self,
        width: float,
        height: float,
        cap: int = SNOW_CAP,
        spawn_chance: float = SNOW_SPAWN_CHANCE,
        rng: RNGService | None = None,
    ):
        self.width = width
        self.height = height
        self.cap = cap
        self.spawn_chance = spawn_chance
        self._rng = rng
        self.flakes: List[Snowflake] = []

    @property
    def rng(self) -> RNGService:
        return self._rng or RNGService.get()

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    # ---- Spawn ----
    def spawn(self) -> Snowflake:
        rng = self.rng
        flake = Snowflake(
            x=rng.random() * self.width,
            y=SNOW_SPAWN_Y,
            radius=rng.uniform(*SNOW_RADIUS_RANGE),
            vy=rng.uniform(*SNOW_SPEED_RANGE),
            phase=rng.random() * TAU,
        )
        self.flakes.append(flake)
        return flake

    # ---- Update & draw collection ----
    def update(self) -> None:
        if len(self.flakes) < self.cap and self.rng.random() < self.spawn_chance:
            self.spawn()
        for flake in self.flakes:
            flake.update()
        limit = self.height + SNOW_EXIT_MARGIN
        self.flakes = [f for f in self.flakes if f.y < limit]

    def get_draw_commands(self) -> List[SnowDrawCommand]:
        return [SnowDrawCommand(f.x, f.y, f.radius) for f in self.flakes]

    def __len__(self) -> int:
        return len(self.flakes)


__all__ = ["SnowSystem", "Snowflake", "SnowDrawCommand"]
