import math

from app.config import TAP_SLOP


class TapRecognizer:
    """
    figures out whether a press/release was a tap or the start of a drag.
    mice and fingers wobble a little even on a tap, so the pointer is
    allowed to move up to `slop` pixels before we call it a drag.
    """

    def __init__(self, slop=TAP_SLOP):
        self.slop = slop
        self._origin = None
        self._dragging = False

    @property
    def pressed(self):
        return self._origin is not None

    @property
    def dragging(self):
        return self._dragging

    def press(self, p):
        self._origin = p
        self._dragging = False

    def move(self, p):
        """returns True once this press has turned into a drag"""
        if self._origin is None:
            return False
        if not self._dragging:
            dx = p[0] - self._origin[0]
            dy = p[1] - self._origin[1]
            if math.sqrt(dx * dx + dy * dy) > self.slop:
                self._dragging = True
        return self._dragging

    def release(self, p=None):
        """returns True if the press that just ended was a tap"""
        was_tap = self._origin is not None and not self._dragging
        self._origin = None
        self._dragging = False
        return was_tap
