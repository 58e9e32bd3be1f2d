"""Drawing surface wrapper.

Callers work in logical (CSS-pixel-like) coordinates; ``Canvas`` scales
them by the device pixel ratio onto the physical pygame surface. The
ratio is clamped to ``MAX_PIXEL_RATIO`` to bound fill cost on dense
displays.

Translucent circles are pre-rendered on ``SRCALPHA`` sprites and blitted.
Sprites and glow text are kept in small LRU caches keyed by
color/alpha/quantized radius so a frame of ~1500 particles reuses a few
hundred surfaces.
"""

from __future__ import annotations

import math
from collections import OrderedDict
from typing import Sequence, Tuple

import pygame

from evergreen.constants import BACKGROUND_COLOR, MAX_PIXEL_RATIO

Point = Tuple[float, float]

_RADIUS_QUANTUM = 0.5  # physical pixels
_MIN_RADIUS = 1.0  # physical pixels
_GLOW_LAYERS = 4


def clamp_pixel_ratio(ratio: float | None) -> float:
    if not ratio or ratio < 1:
        return 1.0
    return min(MAX_PIXEL_RATIO, float(ratio))


class Canvas:
    # Circle sprite cache shared by every canvas (sprites do not depend on target)
    _sprite_cache: "OrderedDict[tuple[str, int, float], pygame.Surface]" = OrderedDict()
    _sprite_capacity: int = 512
    _sprite_stats = {"hits": 0, "misses": 0, "evictions": 0}
    _text_cache: "OrderedDict[tuple, pygame.Surface]" = OrderedDict()
    _text_capacity: int = 16

    def __init__(self, surface: pygame.Surface, pixel_ratio: float = 1.0, background=BACKGROUND_COLOR):
        self.surface = surface
        self.pixel_ratio = clamp_pixel_ratio(pixel_ratio)
        self.background = background

    # ---------- Size ----------
    @property
    def physical_size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    @property
    def logical_size(self) -> Tuple[float, float]:
        w, h = self.surface.get_size()
        return w / self.pixel_ratio, h / self.pixel_ratio

    def retarget(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def to_physical(self, x: float, y: float) -> Point:
        return x * self.pixel_ratio, y * self.pixel_ratio

    # ---------- Cache management ----------
    @staticmethod
    def clear_sprite_cache():
        Canvas._sprite_cache.clear()
        Canvas._sprite_stats = {"hits": 0, "misses": 0, "evictions": 0}
        Canvas._text_cache.clear()

    @staticmethod
    def configure_sprite_cache(capacity: int | None = None, clear: bool = False):
        if capacity is not None and capacity > 0:
            Canvas._sprite_capacity = capacity
            while len(Canvas._sprite_cache) > Canvas._sprite_capacity:
                Canvas._sprite_cache.popitem(last=False)
                Canvas._sprite_stats["evictions"] += 1
        if clear:
            Canvas.clear_sprite_cache()

    @staticmethod
    def get_sprite_cache_stats():
        return dict(
            Canvas._sprite_stats | {"size": len(Canvas._sprite_cache), "capacity": Canvas._sprite_capacity}
        )

    @staticmethod
    def circle_sprite(color: str, alpha: float, radius: float) -> pygame.Surface:
        """Return a cached sprite of a filled circle (radius in physical px)."""
        q = max(_MIN_RADIUS, round(radius / _RADIUS_QUANTUM) * _RADIUS_QUANTUM)
        a = max(0, min(255, int(round(alpha * 255))))
        key = (color, a, q)
        sprite = Canvas._sprite_cache.get(key)
        if sprite is not None:
            Canvas._sprite_cache.move_to_end(key)
            Canvas._sprite_stats["hits"] += 1
            return sprite

        Canvas._sprite_stats["misses"] += 1
        size = int(math.ceil(q * 2)) + 2
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        rgba = pygame.Color(color)
        rgba.a = a
        pygame.draw.circle(sprite, rgba, (size / 2, size / 2), q)

        while len(Canvas._sprite_cache) >= Canvas._sprite_capacity:
            Canvas._sprite_cache.popitem(last=False)
            Canvas._sprite_stats["evictions"] += 1
        Canvas._sprite_cache[key] = sprite
        return sprite

    # ---------- Primitives (logical coordinates) ----------
    def clear(self) -> None:
        self.surface.fill(self.background)

    def fill_circle(self, x: float, y: float, radius: float, color: str, alpha: float = 1.0) -> None:
        if radius <= 0 or alpha <= 0:
            return
        px, py = self.to_physical(x, y)
        sprite = self.circle_sprite(color, alpha, radius * self.pixel_ratio)
        half = sprite.get_width() / 2
        self.surface.blit(sprite, (px - half, py - half))

    def glow(self, x: float, y: float, radius: float, color: str, strength: float = 0.35) -> None:
        """Soft halo made of fading concentric circles."""
        for i in range(_GLOW_LAYERS, 0, -1):
            spread = radius * i / _GLOW_LAYERS
            self.fill_circle(x, y, spread, color, strength / _GLOW_LAYERS)

    def fill_polygon(self, points: Sequence[Point], color: str, glow: float = 0.0) -> None:
        if len(points) < 3:
            return
        if glow > 0:
            cx = sum(p[0] for p in points) / len(points)
            cy = sum(p[1] for p in points) / len(points)
            reach = max(math.hypot(p[0] - cx, p[1] - cy) for p in points)
            self.glow(cx, cy, reach + glow, color)
        physical = [self.to_physical(px, py) for px, py in points]
        pygame.draw.polygon(self.surface, pygame.Color(color), physical)

    def draw_text_glow(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: int,
        color: str,
        glow_color: str,
        glow: int,
        bold: bool = True,
    ) -> pygame.Rect:
        """Draw ``text`` centered on (x, y) with a blurred-looking halo."""
        px_size = max(1, int(size * self.pixel_ratio))
        px_glow = int(glow * self.pixel_ratio)
        key = (text, px_size, color, glow_color, px_glow, bold)
        text_surf = Canvas._text_cache.get(key)
        if text_surf is None:
            text_surf = self._render_glow_text(text, px_size, color, glow_color, px_glow, bold)
            while len(Canvas._text_cache) >= Canvas._text_capacity:
                Canvas._text_cache.popitem(last=False)
            Canvas._text_cache[key] = text_surf
        else:
            Canvas._text_cache.move_to_end(key)
        rect = text_surf.get_rect(center=self.to_physical(x, y))
        self.surface.blit(text_surf, rect.topleft)
        return rect

    @staticmethod
    def _render_glow_text(text, px_size, color, glow_color, px_glow, bold) -> pygame.Surface:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.SysFont(None, px_size, bold=bold)
        base = font.render(text, True, pygame.Color(color))
        halo = font.render(text, True, pygame.Color(glow_color))
        pad = px_glow + 2
        w, h = base.get_width(), base.get_height()
        surf = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        rings = max(1, px_glow // 4)
        for ring in range(rings, 0, -1):
            dist = px_glow * ring / rings
            layer = halo.copy()
            layer.set_alpha(int(120 / (ring + 1)))
            for step in range(8):
                ang = step * math.pi / 4
                surf.blit(layer, (pad + math.cos(ang) * dist, pad + math.sin(ang) * dist))
        surf.blit(base, (pad, pad))
        return surf


__all__ = ["Canvas", "clamp_pixel_ratio"]
