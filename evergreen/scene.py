"""Scene aggregate: the tree's particle collections plus animation state.

The renderer and the input glue share one ``Scene``. Rebuilds create a
fresh :class:`SceneCollections` and swap the reference, so a reader only
ever sees a complete old or a complete new scene.
"""

from __future__ import annotations

from typing import List, Tuple

from evergreen.constants import ROTATION_STEP
from evergreen.logger import get_logger
from evergreen.particle import Particle, ProjectedPoint, TreeGeometry, depth_sorted
from evergreen.rng_service import RNGService
from evergreen.scene_builder import SceneCollections, TreeShape, build_scene

log = get_logger("scene")


class Scene:
    def __init__(
        self,
        width: float,
        height: float,
        dense: bool = False,
        shape: TreeShape | None = None,
        rng: RNGService | None = None,
    ) -> None:
        self.shape = shape or TreeShape()
        self._rng = rng
        self.geometry = TreeGeometry.from_viewport(width, height)
        self.dense = dense
        self.rotation = 0.0
        self.rebuild_count = 0
        self._collections = SceneCollections((), (), ())
        self.rebuild()

    # Collections ---------------------------------------------------
    @property
    def collections(self) -> SceneCollections:
        return self._collections

    @property
    def foliage(self) -> Tuple[Particle, ...]:
        return self._collections.foliage

    @property
    def lights(self) -> Tuple[Particle, ...]:
        return self._collections.lights

    @property
    def trunk(self) -> Tuple[Particle, ...]:
        return self._collections.trunk

    # Transitions ---------------------------------------------------
    def rebuild(self) -> None:
        rng = self._rng or RNGService.get()
        self._collections = build_scene(self.geometry, self.dense, self.shape, rng)
        self.rebuild_count += 1
        log.debug(
            "rebuild",
            self.rebuild_count,
            "dense" if self.dense else "sparse",
            f"foliage={len(self.foliage)} lights={len(self.lights)} trunk={len(self.trunk)}",
        )

    def toggle_density(self) -> bool:
        self.dense = not self.dense
        log.info("density ->", "dense" if self.dense else "sparse")
        self.rebuild()
        return self.dense

    def resize(self, width: float, height: float) -> None:
        """Adopt a new viewport and resample so proportions match it."""
        geometry = TreeGeometry.from_viewport(width, height)
        if geometry == self.geometry:
            return
        self.geometry = geometry
        log.info(f"resize -> {width:.0f}x{height:.0f}")
        self.rebuild()

    # Per-frame -----------------------------------------------------
    def advance(self, step: float = ROTATION_STEP) -> float:
        self.rotation += step
        return self.rotation

    def draw_order(self) -> List[Tuple[Particle, ProjectedPoint]]:
        return depth_sorted(self._collections.all(), self.rotation, self.geometry)


__all__ = ["Scene"]
