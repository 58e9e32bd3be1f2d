"""Procedural sampling of the tree's particle collections.

Foliage is a stack of jittered rings that shrink toward the top, lights
are scattered over the crown and the trunk is a narrowing column of bark
specks. Every random draw goes through :class:`RNGService`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from evergreen.constants import (
    CROWN_SCALE,
    FOLIAGE_BASE_COUNT,
    FOLIAGE_COLOR,
    FOLIAGE_LAYER_STEP,
    FOLIAGE_MIN_COUNT,
    FOLIAGE_RADIUS_JITTER,
    FOLIAGE_SIZE_RANGE,
    LAYER_COUNT,
    LIGHT_COLORS,
    LIGHT_COUNT_DENSE,
    LIGHT_COUNT_SPARSE,
    LIGHT_RADIUS_RATIO,
    LIGHT_SIZE,
    TAU,
    TRUNK_BASE_RADIUS_RATIO,
    TRUNK_COLORS,
    TRUNK_COUNT,
    TRUNK_HEIGHT_RATIO,
    TRUNK_SIZE_RANGE,
)
from evergreen.particle import Particle, ParticleKind, TreeGeometry
from evergreen.rng_service import RNGService


@dataclass(frozen=True)
class TreeShape:
    """Sampling parameters independent of the viewport."""

    layer_count: int = LAYER_COUNT
    crown_scale: float = CROWN_SCALE
    foliage_base_count: int = FOLIAGE_BASE_COUNT
    foliage_layer_step: int = FOLIAGE_LAYER_STEP
    light_count_sparse: int = LIGHT_COUNT_SPARSE
    light_count_dense: int = LIGHT_COUNT_DENSE
    trunk_count: int = TRUNK_COUNT

    def __post_init__(self):
        if self.layer_count < 1:
            raise ValueError(f"layer_count must be >= 1, got {self.layer_count}")
        if not 0 < self.crown_scale <= 1:
            raise ValueError(f"crown_scale must be in (0, 1], got {self.crown_scale}")

    def layer_particle_count(self, layer: int) -> int:
        return max(FOLIAGE_MIN_COUNT, self.foliage_base_count - layer * self.foliage_layer_step)

    def light_count(self, dense: bool) -> int:
        return self.light_count_dense if dense else self.light_count_sparse


@dataclass(frozen=True)
class SceneCollections:
    foliage: Tuple[Particle, ...]
    lights: Tuple[Particle, ...]
    trunk: Tuple[Particle, ...]

    def all(self) -> Tuple[Particle, ...]:
        # Trunk first so equal depths resolve bark below foliage and lights
        return self.trunk + self.foliage + self.lights

    def __len__(self) -> int:
        return len(self.foliage) + len(self.lights) + len(self.trunk)


def build_foliage(geometry: TreeGeometry, shape: TreeShape, rng: RNGService) -> Tuple[Particle, ...]:
    crown_height = geometry.tree_height * shape.crown_scale
    band = crown_height / shape.layer_count
    leaves = []
    for layer in range(shape.layer_count):
        lt = layer / (shape.layer_count - 1) if shape.layer_count > 1 else 0.0
        layer_y = lt * crown_height
        layer_r = (1 - lt) * geometry.tree_radius
        for _ in range(shape.layer_particle_count(layer)):
            leaves.append(
                Particle(
                    r=layer_r * rng.uniform(1 - FOLIAGE_RADIUS_JITTER, 1 + FOLIAGE_RADIUS_JITTER),
                    y=layer_y + rng.random() * band,
                    theta=rng.random() * TAU,
                    size=rng.uniform(*FOLIAGE_SIZE_RANGE),
                    color=FOLIAGE_COLOR,
                    kind=ParticleKind.LEAF,
                )
            )
    return tuple(leaves)


def build_lights(
    geometry: TreeGeometry, shape: TreeShape, dense: bool, rng: RNGService
) -> Tuple[Particle, ...]:
    lights = []
    for _ in range(shape.light_count(dense)):
        t = rng.random() * shape.crown_scale
        lights.append(
            Particle(
                r=(1 - t) * geometry.tree_radius * LIGHT_RADIUS_RATIO,
                y=t * geometry.tree_height,
                theta=rng.random() * TAU,
                size=LIGHT_SIZE,
                color=rng.choice(LIGHT_COLORS),
                kind=ParticleKind.LIGHT,
            )
        )
    return tuple(lights)


def build_trunk(geometry: TreeGeometry, shape: TreeShape, rng: RNGService) -> Tuple[Particle, ...]:
    trunk_height = geometry.tree_height * TRUNK_HEIGHT_RATIO
    base_radius = geometry.tree_radius * TRUNK_BASE_RADIUS_RATIO
    bark = []
    for _ in range(shape.trunk_count):
        t = rng.random()
        bark.append(
            Particle(
                r=(1 - t) * base_radius,
                y=t * trunk_height,
                theta=rng.random() * TAU,
                size=rng.uniform(*TRUNK_SIZE_RANGE),
                color=rng.choice(TRUNK_COLORS),
                kind=ParticleKind.TRUNK,
            )
        )
    return tuple(bark)


def build_scene(
    geometry: TreeGeometry,
    dense: bool,
    shape: TreeShape | None = None,
    rng: RNGService | None = None,
) -> SceneCollections:
    shape = shape or TreeShape()
    rng = rng or RNGService.get()
    return SceneCollections(
        foliage=build_foliage(geometry, shape, rng),
        lights=build_lights(geometry, shape, dense, rng),
        trunk=build_trunk(geometry, shape, rng),
    )


__all__ = [
    "SceneCollections",
    "TreeShape",
    "build_foliage",
    "build_lights",
    "build_scene",
    "build_trunk",
]
