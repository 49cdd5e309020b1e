"""
CMYK Portrait Studio - Constants and Configuration

This module contains all constant values used throughout the application:
- Channel hues and luminance weights for color separation
- Placement policy offsets (mirroring of paired parts)
- Tracking binder tuning (smoothing, anti-overlap biases)
- Pointer interaction tuning
- Paint order convention and canvas hit-testing hints
"""

# ======================================================================
# COLOR SEPARATION
# ======================================================================
# Fixed RGB hue painted by each separation raster (alpha carries the data)

CHANNEL_HUES = {
    'c': (0, 255, 255),
    'm': (255, 0, 255),
    'y': (255, 255, 0),
    'k': (0, 0, 0),
}

# Stack order of the four separation rasters when composed
CHANNEL_STACK_ORDER = ('c', 'm', 'y', 'k')

# Rec. 601 luma weights used for the black (key) channel
LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)

# ======================================================================
# PLACEMENT POLICY
# ======================================================================
# Lateral offset given to the second eye/ear when the first one sits on
# the center line (x == 0)

EYE_MIRROR_OFFSET = 120
EAR_MIRROR_OFFSET = 140
EAR_EXTRA_PUSH = 80  # Ears are pushed further out in the same direction

# ======================================================================
# TRACKING
# ======================================================================
# Exponential smoothing weight toward the live target (per tick)
# Lower = smoother but slower, higher = more responsive

TRACKING_SMOOTHING = 0.3

# Horizontal biases as a fraction of the canvas width
SECOND_EYE_BIAS = 0.02  # Keeps the second eye from overlapping the first
EAR_SIDE_BIAS = 0.08    # Left ear gets -bias, right ear +bias

# ======================================================================
# POINTER INTERACTION
# ======================================================================
# Horizontal pointer travel (pixels) per degree of rotation in rotate mode

ROTATE_PIXELS_PER_DEGREE = 2

# ======================================================================
# PAINT ORDER
# ======================================================================
# Scene order doubles as paint order. When True the renderer paints the
# sequence front to back with later entries on top, so moving a layer to
# the tail raises it above every other layer.

PAINT_ORDER_TAIL_ON_TOP = True

# ======================================================================
# CANVAS
# ======================================================================
# Per-role scale applied to part artwork when drawn on the canvas

ROLE_RENDER_SCALES = {
    'eyes': 0.3,
    'ears': 0.3,
    'nose': 0.25,
    'lips': 0.25,
    'arm_left': 0.6,
    'arm_right': 0.6,
}

# Nominal edge length (pixels) of part artwork before the role scale
LAYER_BASE_SIZE = 400

# MIME type used for drop payloads (plain text channel)
DROP_PAYLOAD_MIME = 'text/plain'
