"""
tests for the interactive window glue in main.py and the overlay.

no real window gets opened - we call the mouse callback directly
with the same arguments opencv would pass.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
import unittest
import cv2
from sigpad.path import Arc
from sigpad.surface_controller import SurfaceController
from app.ui import UI
from main import SignatureWindow, LoggingObserver


def mouse(win, event, x, y):
    win.on_mouse(event, x, y, 0, None)


class TestMouseWiring(unittest.TestCase):

    def setUp(self):
        self.surface = SurfaceController(200, 100, observer=LoggingObserver())
        self.win = SignatureWindow(self.surface)

    def test_click_makes_a_dot(self):
        mouse(self.win, cv2.EVENT_LBUTTONDOWN, 50, 50)
        mouse(self.win, cv2.EVENT_LBUTTONUP, 50, 50)
        arcs = [c for c in self.surface.accumulator.path if isinstance(c, Arc)]
        self.assertEqual(len(arcs), 1)

    def test_drag_makes_curves_not_dots(self):
        mouse(self.win, cv2.EVENT_LBUTTONDOWN, 10, 10)
        for i in range(1, 12):
            mouse(self.win, cv2.EVENT_MOUSEMOVE, 10 + i * 8, 10 + i * 3)
        mouse(self.win, cv2.EVENT_LBUTTONUP, 98, 43)
        self.assertTrue(self.surface.contains_signature)
        self.assertFalse(any(isinstance(c, Arc) for c in self.surface.accumulator.path))
        self.assertEqual(self.surface.accumulator.segment_count, 3)

    def test_hover_without_button_does_nothing(self):
        for i in range(10):
            mouse(self.win, cv2.EVENT_MOUSEMOVE, i * 5, i * 5)
        self.assertFalse(self.surface.contains_signature)
        self.assertFalse(self.surface.accumulator.in_progress)

    def test_repaint_marks_dirty(self):
        self.win.dirty = False
        mouse(self.win, cv2.EVENT_LBUTTONDOWN, 10, 10)
        self.win.dirty = False
        mouse(self.win, cv2.EVENT_MOUSEMOVE, 30, 10)
        self.assertTrue(self.win.dirty)

    def test_observer_counts_strokes(self):
        for _ in range(3):
            mouse(self.win, cv2.EVENT_LBUTTONDOWN, 10, 10)
            mouse(self.win, cv2.EVENT_LBUTTONUP, 10, 10)
        self.assertEqual(self.surface.observer.strokes, 3)


class TestLoggingSetup(unittest.TestCase):

    def test_import_adds_no_file_handler(self):
        """the log file only gets opened when main() runs"""
        for name in ("sigpad", "app"):
            handlers = logging.getLogger(name).handlers
            self.assertFalse(any(isinstance(h, logging.FileHandler) for h in handlers))


class TestKeys(unittest.TestCase):

    def setUp(self):
        self.surface = SurfaceController(200, 100)
        self.win = SignatureWindow(self.surface)

    def test_quit(self):
        self.assertFalse(self.win.handle_key(ord('q')))
        self.assertFalse(self.win.handle_key(27))

    def test_clear(self):
        self.surface.on_tap((20, 20))
        self.assertTrue(self.win.handle_key(ord('c')))
        self.assertFalse(self.surface.contains_signature)

    def test_toggle_dots(self):
        self.win.handle_key(ord('d'))
        self.assertFalse(self.surface.circular_dots)

    def test_width_keys(self):
        self.win.handle_key(ord('+'))
        self.assertEqual(self.surface.stroke_width, 3.0)
        self.win.handle_key(ord('-'))
        self.win.handle_key(ord('-'))
        self.win.handle_key(ord('-'))
        self.assertEqual(self.surface.stroke_width, 1.0)


class TestOverlay(unittest.TestCase):

    def test_frame_has_window_size(self):
        surface = SurfaceController(320, 180)
        win = SignatureWindow(surface)
        frame = win.frame()
        self.assertEqual(frame.shape, (180, 320, 3))

    def test_status(self):
        surface = SurfaceController(320, 180)
        ui = UI()
        self.assertEqual(ui.status_of(surface), "empty")
        surface.on_pointer_down((10, 10))
        self.assertEqual(ui.status_of(surface), "active")
        surface.on_pointer_up()
        surface.on_tap((10, 10))
        self.assertEqual(ui.status_of(surface), "signed")


if __name__ == "__main__":
    unittest.main()
