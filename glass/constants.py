"""Named configuration constants for the tilting glass.

Areas in cm², lengths in cm, canvas sizes in pixels, angles in degrees.
"""
import math

# Glass
BASE_AREA_CM = 3 * math.pi        # 3π cm² base (radius √3 cm)
HEIGHT_RATIO = 2.5                # glass height / base diameter

# Canvas (one square canvas per glass)
CANVAS_SIZE_PX = 300
BASE_DIAM_PX = CANVAS_SIZE_PX / 3 # base diameter drawn 100 px wide
CANVAS_PAD_PX = 1                 # shift so 2 px strokes are not clipped
CANVAS_GAP_PX = 12                # space between the two canvases
LABEL_H_PX = 24                   # volume caption below each canvas

# Search
DEFAULT_ANGLE = 45.0
DEFAULT_LOW = 0.0
DEFAULT_HIGH = 90.0
BISECTION_STEPS = 30
SWEEP_SAMPLES = 901               # 0.1° spacing over [0, 90]
