"""Entry point: open a window and run the rotating tree.

The host loop owns timing. Each iteration polls events once, routes them
to actions, lets ``TreeApp`` draw one frame and flips the display. Motion
advances by fixed per-tick steps, so the clock is capped at the
configured fps (60 by default).
"""

from __future__ import annotations

import pygame

from evergreen.input_router import InputRouter
from evergreen.lifecycle import TreeApp
from evergreen.settings import Settings


def create_window(settings: Settings) -> pygame.Surface:
    if settings.fullscreen:
        return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    w, h = settings.window_size
    ratio = settings.pixel_ratio
    return pygame.display.set_mode((int(w * ratio), int(h * ratio)), pygame.RESIZABLE)


def main():
    settings = Settings()
    pygame.init()
    pygame.display.set_caption("Evergreen")
    screen = create_window(settings)
    clock = pygame.time.Clock()

    app = TreeApp(screen, settings)
    router = InputRouter()

    while app.running:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.VIDEORESIZE:
                current_surface = pygame.display.get_surface()
                if current_surface is not None:
                    app.on_resize(current_surface)
        app.handle_actions(router.process(events))
        if not app.running:
            break

        app.tick(clock=clock)
        pygame.display.flip()
        clock.tick(settings.fps)

    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
