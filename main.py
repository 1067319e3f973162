import sys
import logging

import cv2

from sigpad.surface_controller import SurfaceController, StrokeObserver
from sigpad.tap_recognizer import TapRecognizer
from app.canvas import compose_preview
from app.ui import UI
from app.config import SURFACE_WIDTH, SURFACE_HEIGHT, WINDOW_NAME, LOG_FILE

_logger = logging.getLogger("sigpad")


def _setup_logging():
    # everything the engine logs goes to sigpad.log so it doesnt
    # get lost in stdout noise
    handler = logging.FileHandler(LOG_FILE, mode="a")
    handler.setFormatter(logging.Formatter("%(asctime)s  %(name)s  %(message)s", datefmt="%H:%M:%S"))
    for name in ("sigpad", "app"):
        logging.getLogger(name).setLevel(logging.DEBUG)
        logging.getLogger(name).addHandler(handler)


class LoggingObserver(StrokeObserver):
    """just writes stroke boundaries to the log"""

    def __init__(self):
        self.strokes = 0

    def stroke_started(self):
        self.strokes += 1
        _logger.info("stroke %d started", self.strokes)

    def stroke_finished(self):
        _logger.info("stroke %d finished", self.strokes)


class SignatureWindow:
    """wires opencv mouse events to a surface and repaints on request"""

    def __init__(self, surface):
        self.surface = surface
        self.taps = TapRecognizer()
        self.ui = UI()
        self.dirty = True
        surface.on_repaint = self.request_repaint

    def request_repaint(self):
        # coalesced - we only redraw once per loop iteration
        self.dirty = True

    def on_mouse(self, event, x, y, flags, param):
        p = (float(x), float(y))
        if event == cv2.EVENT_LBUTTONDOWN:
            self.taps.press(p)
            self.surface.on_pointer_down(p)
            self.dirty = True
        elif event == cv2.EVENT_MOUSEMOVE and self.taps.pressed:
            self.taps.move(p)
            self.surface.on_pointer_move(p)
        elif event == cv2.EVENT_LBUTTONUP and self.taps.pressed:
            self.surface.on_pointer_up(p)
            if self.taps.release(p):
                self.surface.on_tap(p)
            self.dirty = True

    def frame(self):
        image = self.surface.render()
        live = self.surface.accumulator.window
        frame = compose_preview(image, live)
        return self.ui.draw_overlay(frame, self.surface)

    def handle_key(self, key):
        """returns False when the user wants out"""
        if key == ord('q') or key == 27:  # q or ESC
            return False
        if key == ord('c'):
            self.surface.clear()
            self.ui.last_saved = None
        elif key in (ord('s'), ord('x')):
            saved = self.surface.save(cropped=(key == ord('x')), scale=2.0)
            if saved is None:
                print("nothing to save yet")
            else:
                print(f"saved signature to {saved}")
                self.ui.last_saved = saved
        elif key == ord('d'):
            self.surface.circular_dots = not self.surface.circular_dots
        elif key in (ord('+'), ord('=')):
            self.surface.stroke_width = self.surface.stroke_width + 1.0
        elif key == ord('-') and self.surface.stroke_width > 1.0:
            self.surface.stroke_width = self.surface.stroke_width - 1.0
        self.dirty = True
        return True


def main():
    _setup_logging()

    try:
        surface = SurfaceController(SURFACE_WIDTH, SURFACE_HEIGHT, observer=LoggingObserver())
    except ValueError as e:
        print(f"\nBad surface config: {e}")
        sys.exit(1)

    window = SignatureWindow(surface)

    print("Signature pad started. Draw with the left mouse button, press 'q' to quit.")
    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
    cv2.setMouseCallback(WINDOW_NAME, window.on_mouse)

    shown = None
    while True:
        if window.dirty or shown is None:
            shown = window.frame()
            window.dirty = False
        cv2.imshow(WINDOW_NAME, shown)

        key = cv2.waitKey(15) & 0xFF
        if key != 0xFF and not window.handle_key(key):
            break

        # also quit if the window X button is clicked
        if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
            break

    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
