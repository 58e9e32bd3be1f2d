import pygame

from evergreen.input_router import PERF_TOGGLE, QUIT, TOGGLE_DENSITY, InputRouter


def test_click_and_keys_map_to_actions(pygame_init):
    router = InputRouter()
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (5, 5)}),
        pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_F1}),
        pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_ESCAPE}),
    ]
    assert router.process(events) == [TOGGLE_DENSITY, PERF_TOGGLE, QUIT]


def test_finger_tap_toggles_once(pygame_init):
    router = InputRouter()
    events = [
        pygame.event.Event(pygame.FINGERDOWN, {"x": 0.5, "y": 0.5, "finger_id": 0, "touch_id": 0}),
        # SDL also emits an emulated mouse click for the same tap
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (5, 5), "touch": True}),
    ]
    assert router.process(events) == [TOGGLE_DENSITY]


def test_every_tap_counts_but_other_actions_collapse(pygame_init):
    router = InputRouter()
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (5, 5)})
    f1 = pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_F1})
    assert router.process([click, f1, click, f1]) == [TOGGLE_DENSITY, PERF_TOGGLE, TOGGLE_DENSITY]


def test_window_close_quits(pygame_init):
    router = InputRouter()
    assert router.process([pygame.event.Event(pygame.QUIT, {})]) == [QUIT]


def test_unbound_events_ignored(pygame_init):
    router = InputRouter()
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 3, "pos": (5, 5)}),
        pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_q}),
        pygame.event.Event(pygame.KEYUP, {"key": pygame.K_SPACE}),
    ]
    assert router.process(events) == []


def test_custom_bindings(pygame_init):
    router = InputRouter({TOGGLE_DENSITY: [pygame.K_t]})
    assert router.process([pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_t})]) == [TOGGLE_DENSITY]
    assert router.process([pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_SPACE})]) == []
