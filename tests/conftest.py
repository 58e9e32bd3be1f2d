import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path for module imports (app, evergreen)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless mode for pygame surfaces and fonts
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from evergreen.canvas import Canvas  # noqa: E402
from evergreen.rng_service import RNGService  # noqa: E402


@pytest.fixture(autouse=True)
def seeded_rng():
    """Fresh deterministic RNG per test."""
    return RNGService.initialize(1234)


@pytest.fixture(scope="module")
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def canvas(pygame_init):
    Canvas.clear_sprite_cache()
    return Canvas(pygame.Surface((400, 300)), pixel_ratio=1.0)
