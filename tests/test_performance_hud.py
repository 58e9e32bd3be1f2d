import pygame

from evergreen.perf_hud import PerformanceHUD


def test_performance_hud_ema_smoothing():
    hud = PerformanceHUD(enabled=True, alpha=0.1)
    hud.begin_frame()
    hud._t_work_start -= 0.010
    hud.end_work_segment()
    first = hud.last_sample
    assert first is not None
    assert 9.5 <= first.work_ms <= 10.5
    assert first.avg_work_ms == first.work_ms

    hud.begin_frame()
    hud._t_work_start -= 0.030
    hud.end_work_segment()
    second = hud.last_sample
    # EMA: 0.1 * 30 + 0.9 * 10 = 12.0
    assert 11.5 <= (second.avg_work_ms or 0) <= 12.5


def test_disabled_hud_collects_nothing():
    hud = PerformanceHUD(enabled=False)
    hud.begin_frame()
    hud.end_work_segment()
    hud.end_frame()
    assert hud.last_sample is None
    assert hud.render(pygame.Surface((10, 10))) is False


def test_toggle_and_lines():
    hud = PerformanceHUD()
    assert hud.toggle() is True
    hud.begin_frame()
    hud.end_work_segment()
    hud.end_frame()
    rows = hud.lines({"leaf": 3, "snow": 1})
    assert rows[0].startswith("work")
    assert "leaf: 3" in rows and "snow: 1" in rows
    assert hud.toggle() is False


def test_overlay_rebuild_throttled(pygame_init, monkeypatch):
    hud = PerformanceHUD(enabled=True, update_every=5)
    hud.begin_frame()
    hud.end_work_segment()
    hud.end_frame()
    builds = []
    original = PerformanceHUD._build_overlay

    def counting(rows):
        builds.append(rows)
        return original(rows)

    monkeypatch.setattr(PerformanceHUD, "_build_overlay", staticmethod(counting))
    surf = pygame.Surface((200, 150))
    for _ in range(15):
        assert hud.render(surf, {"snow": 1})
    # frames 1, 6 and 11
    assert len(builds) == 3
