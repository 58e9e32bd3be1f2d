"""Tree particles and their pseudo-3D projection.

Particles live in cylindrical coordinates around the vertical tree axis:
``r`` is the distance from the axis, ``y`` the height above the ground
line and ``theta`` the angle around the axis. Projection spins the point
by the global rotation, applies a one-point perspective and maps it to
screen space. Nothing is cached; callers project every frame.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from evergreen.constants import (
    CAMERA_DISTANCE,
    GROUND_Y_RATIO,
    LEAF_ALPHA,
    LIGHT_ALPHA,
    PERSPECTIVE_MIN_DENOM_RATIO,
    TREE_HEIGHT_RATIO,
    TREE_RADIUS_RATIO,
    TRUNK_BACK_ALPHA,
    TRUNK_FRONT_ALPHA,
)


class ParticleKind(enum.Enum):
    LEAF = "leaf"
    LIGHT = "light"
    TRUNK = "trunk"

    def opacity(self, depth: float) -> float:
        """Alpha used when drawing a particle of this kind at ``depth``."""
        if self is ParticleKind.LIGHT:
            return LIGHT_ALPHA
        if self is ParticleKind.TRUNK:
            return TRUNK_FRONT_ALPHA if depth > 0 else TRUNK_BACK_ALPHA
        return LEAF_ALPHA


@dataclass(frozen=True)
class TreeGeometry:
    """Screen-space anchors derived from the logical viewport."""

    width: float
    height: float
    tree_height: float
    tree_radius: float
    center_x: float
    ground_y: float

    @classmethod
    def from_viewport(cls, width: float, height: float) -> "TreeGeometry":
        return cls(
            width=width,
            height=height,
            tree_height=height * TREE_HEIGHT_RATIO,
            tree_radius=width * TREE_RADIUS_RATIO,
            center_x=width / 2,
            ground_y=height * GROUND_Y_RATIO,
        )


@dataclass(frozen=True)
class ProjectedPoint:
    x: float
    y: float
    radius: float
    z: float

    @property
    def scale(self) -> float:
        return perspective_scale(self.z)


def perspective_scale(z: float, camera_distance: float = CAMERA_DISTANCE) -> float:
    """Return ``K / (K + z)`` with the denominator floored above zero."""
    denom = max(camera_distance + z, camera_distance * PERSPECTIVE_MIN_DENOM_RATIO)
    return camera_distance / denom


@dataclass(frozen=True)
class Particle:
    r: float
    y: float
    theta: float
    size: float
    color: str
    kind: ParticleKind

    def project(self, rot: float, geometry: TreeGeometry) -> ProjectedPoint:
        a = self.theta + rot
        x3 = math.cos(a) * self.r
        z3 = math.sin(a) * self.r
        scale = perspective_scale(z3)
        return ProjectedPoint(
            x=geometry.center_x + x3 * scale,
            y=geometry.ground_y - self.y * scale,
            radius=self.size * scale,
            z=z3,
        )


def depth_sorted(
    particles: Iterable[Particle], rot: float, geometry: TreeGeometry
) -> List[Tuple[Particle, ProjectedPoint]]:
    """Project once and order farthest first (painter's algorithm).

    ``sorted`` is stable so equal depths keep their input order.
    """
    projected = [(p, p.project(rot, geometry)) for p in particles]
    return sorted(projected, key=lambda item: item[1].z)


def kind_counts(particles: Sequence[Particle]) -> dict:
    counts = {kind.value: 0 for kind in ParticleKind}
    for p in particles:
        counts[p.kind.value] += 1
    return counts


__all__ = [
    "Particle",
    "ParticleKind",
    "ProjectedPoint",
    "TreeGeometry",
    "depth_sorted",
    "kind_counts",
    "perspective_scale",
]
