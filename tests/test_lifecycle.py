import pygame

from evergreen.input_router import PERF_TOGGLE, QUIT, TOGGLE_DENSITY
from evergreen.lifecycle import TreeApp
from evergreen.rng_service import RNGService
from evergreen.settings import Settings


def make_settings(**overrides):
    s = Settings(load=False)
    for key, value in overrides.items():
        setattr(s, key, value)
    return s


def test_app_builds_scene_from_surface(pygame_init):
    app = TreeApp(pygame.Surface((800, 600)), make_settings())
    assert app.scene.geometry.width == 800
    assert app.snow.height == 600
    assert app.scene.dense is False


def test_pixel_ratio_normalizes_logical_size(pygame_init):
    app = TreeApp(pygame.Surface((1600, 1200)), make_settings(pixel_ratio=2.0))
    assert app.canvas.logical_size == (800, 600)
    assert app.scene.geometry.center_x == 400


def test_seed_from_settings(pygame_init):
    TreeApp(pygame.Surface((200, 200)), make_settings(seed=314))
    assert RNGService.get().seed_value == 314


def test_activate_twice_restores_density(pygame_init):
    app = TreeApp(pygame.Surface((800, 600)), make_settings(start_dense=True))
    before = app.scene.collections
    app.handle_actions([TOGGLE_DENSITY])
    assert app.scene.dense is False
    app.handle_actions([TOGGLE_DENSITY])
    assert app.scene.dense is True
    assert app.scene.collections is not before
    assert len(app.scene.lights) == len(before.lights) == 80


def test_resize_rebuilds_scene(pygame_init):
    app = TreeApp(pygame.Surface((800, 600)), make_settings())
    count = app.scene.rebuild_count
    app.on_resize(pygame.Surface((400, 300)))
    assert app.scene.geometry.width == 400
    assert app.snow.width == 400
    assert app.scene.rebuild_count == count + 1


def test_tick_and_actions(pygame_init):
    app = TreeApp(pygame.Surface((400, 300)), make_settings())
    seq = []
    app.tick(capture_sequence=seq)
    assert seq[0] == "clear" and "particles" in seq
    app.handle_actions([PERF_TOGGLE])
    assert app.renderer.perf_hud.enabled is True
    app.handle_actions([QUIT])
    assert app.running is False
