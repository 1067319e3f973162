"""
the drawing surface as the host sees it.

translates pointer events into accumulator calls, holds the pen and
background settings, and does the exports. one controller per surface,
no shared state between them.
"""
import logging
import math
import numbers
from datetime import datetime

from app.canvas import (
    RenderError, render_path, crop_image, outset_rect, scale_rect, save_image,
)
from app.config import (
    DEFAULT_STROKE_WIDTH, DEFAULT_STROKE_COLOR, DEFAULT_BACKGROUND_COLOR,
    CIRCULAR_DOTS, TRANSPARENT_EXPORT, EXPORT_PREFIX,
)
from sigpad.path import Point
from sigpad.stroke_accumulator import StrokeAccumulator, MarkStyle

logger = logging.getLogger(__name__)


class StrokeObserver:
    """
    gets told when a stroke starts and ends. subclass and override
    whichever one you care about, both default to doing nothing.
    """

    def stroke_started(self):
        pass

    def stroke_finished(self):
        pass


def _positive_real(value, what):
    # numpy scalars are Real too, bools are not a size
    if (isinstance(value, bool) or not isinstance(value, numbers.Real)
            or not math.isfinite(value) or value <= 0):
        raise ValueError(f"{what} must be a finite positive number, got {value!r}")
    return float(value)


def _check_scale(scale):
    return _positive_real(scale, "scale")


class SurfaceController:
    """
    one signature surface.

    usage:
        surface = SurfaceController(640, 360, observer=my_observer)
        surface.on_pointer_down((10, 10))
        surface.on_pointer_move((12, 11))
        ...
        surface.on_pointer_up()
        if surface.contains_signature:
            img = surface.render_cropped(scale=2)
    """

    def __init__(self, width, height, observer=None, on_repaint=None,
                 stroke_width=DEFAULT_STROKE_WIDTH,
                 stroke_color=DEFAULT_STROKE_COLOR,
                 background_color=DEFAULT_BACKGROUND_COLOR,
                 circular_dots=CIRCULAR_DOTS):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.observer = observer
        self.on_repaint = on_repaint

        self._stroke_width = DEFAULT_STROKE_WIDTH
        self.stroke_width = stroke_width
        self.stroke_color = stroke_color
        self.background_color = background_color
        self.circular_dots = circular_dots

        self.accumulator = StrokeAccumulator(on_change=self._request_repaint)

    # --- presentation state ---

    @property
    def stroke_width(self):
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, value):
        self._stroke_width = _positive_real(value, "stroke width")

    @property
    def contains_signature(self):
        return not self.accumulator.is_empty()

    # --- pointer events ---

    def on_pointer_down(self, p):
        self.accumulator.begin_stroke(Point(*p))
        if self.observer is not None:
            self.observer.stroke_started()

    def on_pointer_move(self, p):
        # the accumulator asks for the repaint itself
        self.accumulator.extend_stroke(Point(*p))

    def on_pointer_up(self, p=None):
        self.accumulator.end_stroke()
        if self.observer is not None:
            self.observer.stroke_finished()

    def on_tap(self, p):
        style = MarkStyle.DOT if self.circular_dots else MarkStyle.LINE
        self.accumulator.emit_mark(Point(*p), style)

    def clear(self):
        self.accumulator.clear()
        self._request_repaint()

    # --- export ---

    def render(self, scale=1.0, transparent=False):
        """
        paint the current path no matter what, empty or not.
        this is what the live window shows on each repaint.
        """
        scale = _check_scale(scale)
        return render_path(self.accumulator.path, (self.width, self.height),
                           self._stroke_width, self.stroke_color,
                           self.background_color, scale, transparent)

    def render_full(self, scale=1.0):
        """
        the whole surface as a BGRA image, or None if there is nothing
        drawn or the rasterizer fails.
        """
        scale = _check_scale(scale)
        if not self.contains_signature:
            logger.debug("render_full: surface is empty, nothing to export")
            return None
        try:
            return self.render(scale, transparent=TRANSPARENT_EXPORT)
        except RenderError as e:
            logger.warning("render_full failed: %s", e)
            return None

    def render_cropped(self, scale=1.0):
        """
        like render_full but cut down to the ink. the crop box is the
        path bounds grown by half the pen width so the stroke edges
        survive, then scaled to image pixels.
        """
        scale = _check_scale(scale)
        full = self.render_full(scale)
        if full is None:
            return None

        # half the pen width, as stroked geometry. LINE_AA can paint up to
        # about a pixel of faint fringe past that, which gets cut
        rect = scale_rect(outset_rect(self.accumulator.path.bounds(),
                                      self._stroke_width / 2.0), scale)
        try:
            return crop_image(full, rect)
        except RenderError as e:
            logger.warning("render_cropped failed: %s", e)
            return None

    def save(self, filename=None, cropped=False, scale=1.0):
        """write the signature to a png. returns the filename, or None if nothing was saved"""
        image = self.render_cropped(scale) if cropped else self.render_full(scale)
        if image is None:
            return None
        if filename is None:
            filename = f"{EXPORT_PREFIX}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.png"
        try:
            return save_image(image, filename)
        except RenderError as e:
            logger.warning("save failed: %s", e)
            return None

    def _request_repaint(self):
        if self.on_repaint is not None:
            self.on_repaint()
