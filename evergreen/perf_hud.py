"""Performance HUD metrics collection and overlay.

Timing (work segment, full frame, smoothed average) is kept apart from
drawing so the smoothing can be tested without a display:

    hud = PerformanceHUD(enabled=True)
    hud.begin_frame()
    # ... update + draw scene ...
    hud.end_work_segment()
    # ... present ...
    hud.end_frame(clock)
    hud.render(surface, counts)

The overlay text is rebuilt only every ``update_every`` frames.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import pygame


@dataclass
class PerformanceSample:
    """Snapshot of one frame.

    Attributes:
        work_ms (float): Milliseconds spent updating and drawing (excludes present/vsync).
        full_ms (float | None): Whole frame duration, filled in by ``end_frame``.
        avg_work_ms (float | None): Exponential moving average of ``work_ms``.
        fps (float | None): Frames per second reported by the pygame clock.
    """

    work_ms: float
    full_ms: float | None
    avg_work_ms: float | None
    fps: float | None


@dataclass
class PerformanceHUD:
    enabled: bool = False
    alpha: float = 0.1  # EMA smoothing factor for work segment
    update_every: int = 10
    _t_full_start: float = field(default=0.0, init=False, repr=False)
    _t_work_start: float = field(default=0.0, init=False, repr=False)
    _avg_work_ms: Optional[float] = field(default=None, init=False)
    _staging_sample: Optional[PerformanceSample] = field(default=None, init=False)
    _visible_sample: Optional[PerformanceSample] = field(default=None, init=False)
    _overlay: Optional[Any] = field(default=None, init=False, repr=False)
    _overlay_frame: int = field(default=0, init=False, repr=False)

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        self._overlay = None
        self._overlay_frame = 0
        return self.enabled

    def begin_frame(self) -> None:
        if not self.enabled:
            return
        now = time.perf_counter()
        self._t_full_start = now
        self._t_work_start = now

    def end_work_segment(self) -> None:
        if not self.enabled:
            return
        work_ms = (time.perf_counter() - self._t_work_start) * 1000.0
        if self._avg_work_ms is None:
            self._avg_work_ms = work_ms
        else:
            self._avg_work_ms = self.alpha * work_ms + (1 - self.alpha) * self._avg_work_ms
        self._staging_sample = PerformanceSample(
            work_ms=work_ms,
            full_ms=None,
            avg_work_ms=self._avg_work_ms,
            fps=None,
        )

    def end_frame(self, clock=None) -> None:
        if not self.enabled or self._staging_sample is None:
            return
        self._staging_sample.full_ms = (time.perf_counter() - self._t_full_start) * 1000.0
        self._staging_sample.fps = clock.get_fps() if clock is not None else None
        self._visible_sample = self._staging_sample

    @property
    def last_sample(self) -> Optional[PerformanceSample]:
        return self._staging_sample

    def lines(self, counts: Dict[str, Any] | None = None) -> list[str]:
        sample = self._visible_sample
        if sample is None:
            return []
        rows = [f"work {sample.work_ms:.2f}ms"]
        if sample.avg_work_ms is not None:
            rows.append(f"avg  {sample.avg_work_ms:.2f}ms")
        if sample.full_ms is not None:
            rows.append(f"frame {sample.full_ms:.2f}ms")
        if sample.fps is not None:
            rows.append(f"fps  {sample.fps:.1f}")
        for key in sorted(counts or {}):
            rows.append(f"{key}: {counts[key]}")
        return rows

    def render(self, surface: pygame.Surface, counts: Dict[str, Any] | None = None, x: int = 6, y: int = 6) -> bool:
        """Blit the overlay; returns True when something was drawn."""
        if not (self.enabled and self._visible_sample):
            return False
        self._overlay_frame += 1
        if self._overlay is None or (self._overlay_frame % self.update_every) == 1:
            self._overlay = self._build_overlay(self.lines(counts))
        surface.blit(self._overlay, (x, y))
        return True

    @staticmethod
    def _build_overlay(rows: list[str]) -> pygame.Surface:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.SysFont(None, 16)
        rendered = [font.render(row, True, (200, 230, 255)) for row in rows]
        w = max((r.get_width() for r in rendered), default=0) + 10
        h = sum(r.get_height() for r in rendered) + 10
        overlay = pygame.Surface((max(w, 120), h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        line = 5
        for r in rendered:
            overlay.blit(r, (5, line))
            line += r.get_height()
        return overlay


__all__ = ["PerformanceHUD", "PerformanceSample"]
