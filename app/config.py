# all the settings live here so we dont scatter magic numbers everywhere

# surface
SURFACE_WIDTH = 640
SURFACE_HEIGHT = 360
WINDOW_NAME = "Signature"

# stroke defaults (colors are BGR like everything else in opencv)
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_STROKE_COLOR = (0, 0, 0)          # black
DEFAULT_BACKGROUND_COLOR = (255, 255, 255)  # white
CIRCULAR_DOTS = True   # taps make a round dot, otherwise a short line

# tap marks
DOT_RADIUS = 0.7       # radius of the arc drawn for a tap
MARK_HALF_LENGTH = 1.0  # tap line runs from x-1 to x+1

# rasterizer
CURVE_SEGMENTS = 16    # chords per cubic segment when flattening
ARC_SEGMENTS = 24      # chords per full circle
SUBPIXEL_SHIFT = 4     # fractional bits passed to cv2.polylines
ANTIALIAS = True
TRANSPARENT_EXPORT = True  # exported images get alpha 0 where nothing is drawn

# gestures
TAP_SLOP = 4.0         # px the pointer may wander and still count as a tap

# export
EXPORT_PREFIX = "signature"

# logging (main.py sets up the handler)
LOG_FILE = "sigpad.log"
