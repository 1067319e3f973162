"""
incremental stroke smoothing.

raw pointer samples come in one at a time and go into a 5 slot window.
every time the window fills up we fit one cubic bezier through it and
append it to the path, then slide the window so the next curve starts
exactly where this one ended. constant work per point, no backtracking.

the trick that makes it smooth: the curve doesnt end on a raw sample.
slot 3 gets replaced with the midpoint of slots 2 and 4, so consecutive
curves share a tangent at the joint and sample jitter gets averaged out.
"""
import enum
import logging
import math

from app.config import DOT_RADIUS, MARK_HALF_LENGTH
from sigpad.path import Path, Point

logger = logging.getLogger(__name__)

WINDOW_SIZE = 5


class MarkStyle(enum.Enum):
    DOT = "dot"
    LINE = "line"


class StrokeAccumulator:
    """owns the path and the sliding window of recent points"""

    def __init__(self, on_change=None):
        self.path = Path()
        self._pts = [Point(0.0, 0.0)] * WINDOW_SIZE
        self._ctr = 0
        self._in_progress = False
        self._segments = 0
        # repaint hook, called after every point and every new mark
        self._on_change = on_change

    @property
    def cursor(self):
        return self._ctr

    @property
    def in_progress(self):
        return self._in_progress

    @property
    def segment_count(self):
        """curve segments emitted since the last clear"""
        return self._segments

    @property
    def window(self):
        """the filled part of the window, slot 0 first"""
        if not self._in_progress:
            return []
        return list(self._pts[:self._ctr + 1])

    def begin_stroke(self, p):
        self._ctr = 0
        self._pts[0] = Point(*p)
        self._in_progress = True

    def extend_stroke(self, p):
        """
        push one more sample. returns True if this point completed a
        window and a curve segment was appended to the path.
        """
        if not self._in_progress:
            logger.debug("extend_stroke outside a stroke, ignoring %s", p)
            return False

        self._ctr += 1
        self._pts[self._ctr] = Point(*p)
        emitted = False

        if self._ctr == 4:
            pts = self._pts
            pts[3] = pts[2].midpoint(pts[4])
            self.path.move_to(pts[0])
            self.path.curve_to(pts[3], pts[1], pts[2])
            self._segments += 1
            emitted = True

            # slide - the midpoint becomes the start of the next curve
            pts[0] = pts[3]
            pts[1] = pts[4]
            self._ctr = 1

        self._request_repaint()
        return emitted

    def end_stroke(self):
        # whatever is still sitting in the window never makes it into the path
        if self._in_progress and self._ctr > 0:
            logger.debug("stroke ended with %d buffered point(s) dropped", self._ctr)
        self._ctr = 0
        self._in_progress = False

    def emit_mark(self, at, style=MarkStyle.DOT):
        """zero length mark for a tap - a tiny circle or a 2px line"""
        at = Point(*at)
        self.path.move_to((at.x - MARK_HALF_LENGTH, at.y))
        if style is MarkStyle.DOT:
            self.path.add_arc(at, DOT_RADIUS, 0.0, 2 * math.pi)
        else:
            self.path.line_to((at.x + MARK_HALF_LENGTH, at.y))
        self._request_repaint()

    def clear(self):
        self.path.clear()
        self._ctr = 0
        self._in_progress = False
        self._segments = 0

    def is_empty(self):
        return self.path.is_empty

    def _request_repaint(self):
        if self._on_change is not None:
            self._on_change()
