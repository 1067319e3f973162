import cv2


STATUS_COLORS = {
    "signed": (0, 160, 0),      # green
    "empty":  (150, 150, 150),  # gray
    "active": (0, 140, 255),    # orange
}

HELP_TEXT = "c: clear  s: save  x: save cropped  d: dot/line  +/-: width  q: quit"


class UI:
    """status overlay for the signature window - state, pen settings, key help"""

    def __init__(self, show_help=True):
        self.show_help = show_help
        self.last_saved = None

    def _draw_pill(self, frame, text, x, y, color, bg=(40, 40, 40)):
        """draw text with a rounded pill-shaped background"""
        font = cv2.FONT_HERSHEY_SIMPLEX
        scale = 0.5
        thick = 1
        sz, baseline = cv2.getTextSize(text, font, scale, thick)
        pad_x, pad_y = 8, 5
        x1, y1 = x, y - sz[1] - pad_y
        x2, y2 = x + sz[0] + pad_x * 2, y + pad_y + baseline

        # semi-transparent background
        overlay = frame.copy()
        cv2.rectangle(overlay, (x1, y1), (x2, y2), bg, -1)
        cv2.addWeighted(overlay, 0.65, frame, 0.35, 0, frame)

        cv2.putText(frame, text, (x + pad_x, y), font, scale, color, thick, cv2.LINE_AA)
        return x2  # return right edge for chaining

    def status_of(self, surface):
        if surface.accumulator.in_progress:
            return "active"
        return "signed" if surface.contains_signature else "empty"

    def draw_overlay(self, frame, surface):
        """draw all the UI elements onto the frame"""
        h, w = frame.shape[:2]

        status = self.status_of(surface)
        right = self._draw_pill(frame, status.upper(), 8, 24, STATUS_COLORS[status])

        # pen settings next to the status
        mark = "DOT" if surface.circular_dots else "LINE"
        pen_text = f"{surface.stroke_width:g}px  {mark}"
        right = self._draw_pill(frame, pen_text, right + 6, 24, (255, 255, 255))
        cv2.circle(frame, (right + 14, 20), 7, tuple(int(c) for c in surface.stroke_color), -1)
        cv2.circle(frame, (right + 14, 20), 8, (255, 255, 255), 1)

        if self.last_saved:
            self._draw_pill(frame, f"saved {self.last_saved}", 8, h - 36, (200, 200, 200))

        if self.show_help:
            hsz = cv2.getTextSize(HELP_TEXT, cv2.FONT_HERSHEY_SIMPLEX, 0.4, 1)[0]
            hx = max(4, (w - hsz[0]) // 2)
            cv2.putText(frame, HELP_TEXT, (hx, h - 10),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, (120, 120, 120), 1, cv2.LINE_AA)

        # hint in the middle until something is drawn
        if status == "empty":
            hint = "Sign here"
            hsz = cv2.getTextSize(hint, cv2.FONT_HERSHEY_SIMPLEX, 0.7, 1)[0]
            hx = (w - hsz[0]) // 2
            cv2.putText(frame, hint, (hx, h // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, (200, 200, 200), 1, cv2.LINE_AA)

        return frame
