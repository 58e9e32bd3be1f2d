"""Input routing.

Transforms raw pygame events into semantic actions. Rules are predicates
evaluated in declaration order; the first match per event wins and an
action is reported at most once per frame, except density toggles
which are kept one per tap.

Touch input arrives both as ``FINGERDOWN`` and as an emulated mouse click
flagged with ``touch=True``; only the finger event is honored so a single
tap toggles once.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]

TOGGLE_DENSITY = "toggle_density"
PERF_TOGGLE = "perf_toggle"
QUIT = "quit"

# Every tap counts, even several in one frame; other actions collapse per frame
REPEATABLE = frozenset({TOGGLE_DENSITY})


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _mouse_button_rule(button: int, action: Action, event_type=pygame.MOUSEBUTTONDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "button", None) == button and not getattr(e, "touch", False):
            return action
        return None

    return _r


def _finger_rule(action: Action) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == pygame.FINGERDOWN:
            return action
        return None

    return _r


def _quit_rule(e: pygame.event.Event):
    if e.type == pygame.QUIT:
        return QUIT
    return None


DEFAULT_BINDINGS: Dict[Action, List[int]] = {
    TOGGLE_DENSITY: [pygame.K_SPACE, pygame.K_RETURN],
    PERF_TOGGLE: [pygame.K_F1],
    QUIT: [pygame.K_ESCAPE],
}


class InputRouter:
    """Maps pygame events to actions understood by :class:`TreeApp`."""

    def __init__(self, bindings: Dict[Action, List[int]] | None = None) -> None:
        self._rules: List[Rule] = []
        self._register_default_rules(bindings or DEFAULT_BINDINGS)

    def _register_default_rules(self, bindings: Dict[Action, List[int]]) -> None:
        self._rules.append(_quit_rule)
        self._rules.append(_mouse_button_rule(1, TOGGLE_DENSITY))
        self._rules.append(_finger_rule(TOGGLE_DENSITY))
        for action, keys in bindings.items():
            self._rules.extend(_key_rule(k, action) for k in keys)

    def process(self, events: Iterable[pygame.event.Event]) -> List[Action]:
        actions: List[Action] = []
        for e in events:
            for rule in self._rules:
                a = rule(e)
                if a:
                    if a in REPEATABLE or a not in actions:
                        actions.append(a)
                    break
        return actions


__all__ = ["InputRouter", "Action", "TOGGLE_DENSITY", "PERF_TOGGLE", "QUIT"]
