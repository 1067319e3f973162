import logging
import math

import numpy as np
import cv2

from app.config import (
    CURVE_SEGMENTS, ARC_SEGMENTS, SUBPIXEL_SHIFT, ANTIALIAS,
)

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """the rasterizer couldnt produce (or crop, or save) an image"""


def _to_fixed(polyline, scale):
    """scale points and convert to the fixed point ints cv2 wants with shift"""
    factor = scale * (1 << SUBPIXEL_SHIFT)
    pts = np.array([(p.x * factor, p.y * factor) for p in polyline], dtype=np.float64)
    return np.round(pts).astype(np.int32).reshape(-1, 1, 2)


def render_path(path, size, stroke_width, stroke_color, background_color,
                scale=1.0, transparent=True):
    """
    paint a Path into a fresh BGRA image.

    size is the surface (width, height) in points; the image comes out
    at size * scale. the whole path gets one width and one color.
    """
    width, height = size
    out_w = int(round(width * scale))
    out_h = int(round(height * scale))
    if out_w <= 0 or out_h <= 0:
        raise RenderError(f"cant allocate a {out_w}x{out_h} image")

    image = np.zeros((out_h, out_w, 4), dtype=np.uint8)
    image[:, :, :3] = background_color[:3]
    image[:, :, 3] = 0 if transparent else 255

    thickness = max(1, int(round(stroke_width * scale)))
    line_type = cv2.LINE_AA if ANTIALIAS else cv2.LINE_8
    color = tuple(int(c) for c in stroke_color[:3]) + (255,)

    polylines = [_to_fixed(line, scale)
                 for line in path.flatten(CURVE_SEGMENTS, ARC_SEGMENTS) if line]
    try:
        for pts in polylines:
            if len(pts) == 1:
                # lone point, draw it as a dot the size of the pen
                radius = max(1, thickness // 2) << SUBPIXEL_SHIFT
                cv2.circle(image, tuple(int(v) for v in pts[0][0]), radius,
                           color, -1, line_type, SUBPIXEL_SHIFT)
            else:
                cv2.polylines(image, [pts], False, color, thickness,
                              line_type, SUBPIXEL_SHIFT)
    except cv2.error as e:
        raise RenderError(f"opencv failed drawing the path: {e}") from e

    return image


def outset_rect(rect, d):
    """grow (x0, y0, x1, y1) by d on every side"""
    x0, y0, x1, y1 = rect
    return (x0 - d, y0 - d, x1 + d, y1 + d)


def scale_rect(rect, factor):
    x0, y0, x1, y1 = rect
    return (x0 * factor, y0 * factor, x1 * factor, y1 * factor)


def crop_image(image, rect):
    """
    cut rect out of the image. the rect is snapped outward to whole
    pixels and clipped to the image. raises RenderError if nothing is
    left after clipping.
    """
    h, w = image.shape[:2]
    x0, y0, x1, y1 = rect
    if not all(math.isfinite(v) for v in rect):
        raise RenderError(f"bad crop rect {rect}")

    left = max(0, int(math.floor(x0)))
    top = max(0, int(math.floor(y0)))
    right = min(w, int(math.ceil(x1)))
    bottom = min(h, int(math.ceil(y1)))

    if right <= left or bottom <= top:
        raise RenderError(f"crop rect {rect} is outside the {w}x{h} image")
    return image[top:bottom, left:right].copy()


def save_image(image, filename):
    """write an image to disk, format picked from the extension"""
    try:
        ok = cv2.imwrite(filename, image)
    except cv2.error as e:
        raise RenderError(f"couldnt write {filename}: {e}") from e
    if not ok:
        raise RenderError(f"couldnt write {filename}")
    logger.info("saved image to %s", filename)
    return filename


def compose_preview(image, live_points=None, color=(160, 160, 160)):
    """
    turn the BGRA surface into an opaque BGR frame for the window,
    and optionally draw the points still waiting in the stroke window
    as a thin polyline so the pen doesnt feel laggy.
    """
    # color channels already hold the stroke painted over the background,
    # alpha only matters for exports
    frame = np.ascontiguousarray(image[:, :, :3])

    if live_points and len(live_points) > 1:
        pts = _to_fixed(live_points, 1.0)
        cv2.polylines(frame, [pts], False, color, 1, cv2.LINE_AA, SUBPIXEL_SHIFT)
    return frame
