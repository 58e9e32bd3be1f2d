"""Scene and animation tuning constants.

All per-tick values assume the host calls the frame callback at roughly
60 Hz; motion is not scaled by elapsed time.
"""

import math

TAU = math.pi * 2

# Projection
CAMERA_DISTANCE = 600.0  # virtual camera distance K
PERSPECTIVE_MIN_DENOM_RATIO = 0.05  # floor for (K + z) as a fraction of K

# Tree geometry (fractions of the logical viewport)
TREE_HEIGHT_RATIO = 0.58  # of viewport height
TREE_RADIUS_RATIO = 0.22  # of viewport width
GROUND_Y_RATIO = 0.82  # of viewport height
CROWN_SCALE = 0.7  # crown height as a fraction of tree height
LAYER_COUNT = 6

# Foliage
FOLIAGE_BASE_COUNT = 220  # particles in the base layer
FOLIAGE_LAYER_STEP = 25  # fewer particles per layer going up
FOLIAGE_MIN_COUNT = 1
FOLIAGE_RADIUS_JITTER = 0.1  # +/- fraction of the layer radius
FOLIAGE_SIZE_RANGE = (0.6, 1.9)
FOLIAGE_COLOR = "#2ecc71"

# String lights
LIGHT_COUNT_SPARSE = 45
LIGHT_COUNT_DENSE = 80
LIGHT_RADIUS_RATIO = 0.9  # of the crown radius at the light's height
LIGHT_SIZE = 2.5
LIGHT_COLORS = ("#ff6b6b", "#ffd93d", "#4dd2ff")

# Trunk
TRUNK_COUNT = 420
TRUNK_HEIGHT_RATIO = 0.66  # of tree height, kept below CROWN_SCALE
TRUNK_BASE_RADIUS_RATIO = 0.16  # of tree radius
TRUNK_SIZE_RANGE = (0.7, 2.1)
TRUNK_COLORS = ("#8b5a2b", "#7a4a24")

# Opacity per particle kind
LEAF_ALPHA = 0.6
LIGHT_ALPHA = 0.85
TRUNK_FRONT_ALPHA = 0.9
TRUNK_BACK_ALPHA = 0.65

# Animation
ROTATION_STEP = 0.0025  # radians per tick

# Snow
SNOW_CAP = 100
SNOW_SPAWN_CHANCE = 0.6
SNOW_SPAWN_Y = -10.0
SNOW_EXIT_MARGIN = 10.0
SNOW_RADIUS_RANGE = (0.6, 2.4)
SNOW_SPEED_RANGE = (0.4, 0.9)
SNOW_PHASE_STEP = 0.01
SNOW_SWAY_AMPLITUDE = 0.15
SNOW_ALPHA = 0.45
SNOW_COLOR = "#ffffff"

# Decorations
STAR_OFFSET = 26.0  # above the crown top
STAR_OUTER_RADIUS = 12.0
STAR_INNER_RADIUS = 5.0
STAR_POINTS = 5
STAR_COLOR = "#ffe066"
STAR_GLOW = 18
GREETING_Y_RATIO = 0.16  # of viewport height
GREETING_FONT_SIZE = 28
GREETING_COLOR = "#ffffff"
GREETING_GLOW_COLOR = "#ffcc66"
GREETING_GLOW = 14
BACKGROUND_COLOR = (6, 10, 24)

# Display
MAX_PIXEL_RATIO = 2.0
DEFAULT_FPS = 60

__all__ = [name for name in globals().keys() if name.isupper()]
