import json
import os

from evergreen.constants import DEFAULT_FPS, MAX_PIXEL_RATIO
from evergreen.decorations import DEFAULT_GREETING
from evergreen.logger import get_logger

log = get_logger("settings")


class Settings:
    """Startup configuration.

    Defaults can be overridden by a JSON file (path from
    ``EVERGREEN_SETTINGS``). The file is read once and never written:
    the animation keeps no state between sessions.
    """

    SETTINGS_FILE = os.environ.get("EVERGREEN_SETTINGS", "data/settings.json")

    def __init__(self, path: str | None = None, load: bool = True):
        self.path = path or self.SETTINGS_FILE
        self._width = 1000
        self._height = 1000
        self._pixel_ratio = 1.0
        self._fps = DEFAULT_FPS
        self.seed = None
        self.start_dense = False
        self.greeting = DEFAULT_GREETING
        self.show_perf_overlay = False
        self.fullscreen = False
        if load:
            self.load_settings()

    @property
    def window_size(self):
        return self._width, self._height

    @window_size.setter
    def window_size(self, value):
        w, h = value
        self._width = max(1, int(w))
        self._height = max(1, int(h))

    @property
    def pixel_ratio(self) -> float:
        return self._pixel_ratio

    @pixel_ratio.setter
    def pixel_ratio(self, value) -> None:
        self._pixel_ratio = max(1.0, min(MAX_PIXEL_RATIO, float(value)))

    @property
    def fps(self) -> int:
        return self._fps

    @fps.setter
    def fps(self, value) -> None:
        self._fps = max(1, int(value))

    def load_settings(self):
        """Apply values from the JSON file if it exists."""
        if not os.path.exists(self.path):
            log.debug("No settings file at", self.path, "- using defaults")
            return
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warn("Error loading settings; using defaults", e)
            return
        if not isinstance(data, dict):
            log.warn("Settings file is not a JSON object; using defaults")
            return
        try:
            if "window_size" in data:
                self.window_size = data["window_size"]
            if "pixel_ratio" in data:
                self.pixel_ratio = data["pixel_ratio"]
            if "fps" in data:
                self.fps = data["fps"]
        except (TypeError, ValueError) as e:
            log.warn("Invalid display setting ignored", e)
        if "seed" in data:
            seed = data["seed"]
            if seed is None or (isinstance(seed, (int, str)) and not isinstance(seed, bool)):
                self.seed = seed
            else:
                log.warn("Invalid seed ignored:", repr(seed))
        for key in ("start_dense", "show_perf_overlay", "fullscreen"):
            if key not in data:
                continue
            if isinstance(data[key], bool):
                setattr(self, key, data[key])
            else:
                log.warn(f"Invalid {key} ignored (expected true/false):", repr(data[key]))
        if "greeting" in data:
            if isinstance(data["greeting"], str):
                self.greeting = data["greeting"]
            else:
                log.warn("Invalid greeting ignored:", repr(data["greeting"]))
        log.info("Settings loaded from", self.path)

    def as_dict(self) -> dict:
        return {
            "window_size": list(self.window_size),
            "pixel_ratio": self._pixel_ratio,
            "fps": self._fps,
            "seed": self.seed,
            "start_dense": self.start_dense,
            "greeting": self.greeting,
            "show_perf_overlay": self.show_perf_overlay,
            "fullscreen": self.fullscreen,
        }
