import pygame

from evergreen.constants import ROTATION_STEP
from evergreen.particle import ParticleKind
from evergreen.renderer import Renderer
from evergreen.scene import Scene
from evergreen.snow_system import SnowSystem


def test_renderer_layer_order(canvas):
    scene = Scene(*canvas.logical_size)
    snow = SnowSystem(*canvas.logical_size)
    r = Renderer(show_perf=False)
    seq = []
    r.render(scene, snow, canvas, capture_sequence=seq)
    assert seq == ["clear", "rotate", "particles", "star", "greeting", "snow"]


def test_render_advances_rotation_and_snow(canvas):
    scene = Scene(*canvas.logical_size)
    snow = SnowSystem(*canvas.logical_size, spawn_chance=1.0)
    r = Renderer()
    for _ in range(3):
        r.render(scene, snow, canvas)
    assert abs(scene.rotation - 3 * ROTATION_STEP) < 1e-12
    assert len(snow) == 3
    assert r.frame == 3
    assert r.last_drawn == len(scene.collections)


def test_particles_drawn_far_to_near_with_kind_alpha(canvas, monkeypatch):
    scene = Scene(*canvas.logical_size)
    calls = []
    monkeypatch.setattr(canvas, "fill_circle", lambda x, y, radius, color, alpha=1.0: calls.append((color, alpha)))
    drawn = Renderer._draw_particles(scene, canvas)
    order = scene.draw_order()
    assert drawn == len(order) == len(calls)
    for (particle, point), (color, alpha) in zip(order, calls):
        assert color == particle.color
        assert alpha == particle.kind.opacity(point.z)
    trunk_alphas = {particle.kind.opacity(point.z) for particle, point in order if particle.kind is ParticleKind.TRUNK}
    assert trunk_alphas == {0.9, 0.65}


def test_render_paints_pixels(canvas):
    scene = Scene(*canvas.logical_size)
    snow = SnowSystem(*canvas.logical_size)
    Renderer().render(scene, snow, canvas)
    bg = pygame.Color(*canvas.background)
    g = scene.geometry
    painted = 0
    for x in range(int(g.center_x - g.tree_radius), int(g.center_x + g.tree_radius), 2):
        for y in range(int(g.ground_y - g.tree_height * 0.7), int(g.ground_y), 2):
            if canvas.surface.get_at((x, y)) != bg:
                painted += 1
    assert painted > 200


def test_perf_overlay_step_when_enabled(canvas):
    scene = Scene(*canvas.logical_size)
    snow = SnowSystem(*canvas.logical_size)
    r = Renderer(show_perf=True)
    first, second = [], []
    r.render(scene, snow, canvas, capture_sequence=first)
    r.render(scene, snow, canvas, capture_sequence=second)
    # the overlay shows the previous frame's sample, so it appears from frame two
    assert "perf" not in first
    assert second[-1] == "perf"
