"""
tests for the vector path - bounds and flattening.
"""
import sys
import os
import math

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from sigpad.path import Path, Point, MoveTo, cubic_point


class TestPoint(unittest.TestCase):

    def test_midpoint(self):
        self.assertEqual(Point(2, 0).midpoint(Point(4, 0)), Point(3, 0))
        self.assertEqual(Point(-1, 5).midpoint(Point(2, -2)), Point(0.5, 1.5))

    def test_points_are_immutable(self):
        p = Point(1, 2)
        with self.assertRaises(AttributeError):
            p.x = 5

    def test_cubic_endpoints(self):
        p0, c1, c2, p3 = Point(0, 0), Point(1, 5), Point(4, 5), Point(5, 0)
        self.assertEqual(cubic_point(p0, c1, c2, p3, 0.0), p0)
        end = cubic_point(p0, c1, c2, p3, 1.0)
        self.assertAlmostEqual(end.x, 5)
        self.assertAlmostEqual(end.y, 0)


class TestBounds(unittest.TestCase):

    def test_empty_path_has_no_bounds(self):
        self.assertIsNone(Path().bounds())

    def test_straight_curve(self):
        path = Path()
        path.move_to((0, 0))
        path.curve_to((3, 0), (1, 0), (2, 0))
        self.assertEqual(path.bounds(), (0, 0, 3, 0))

    def test_control_points_not_counted(self):
        """the bulge of this curve only reaches y=7.5, not the controls at y=10"""
        path = Path()
        path.move_to((0, 0))
        path.curve_to((10, 0), (0, 10), (10, 10))
        x0, y0, x1, y1 = path.bounds()
        self.assertAlmostEqual(x0, 0)
        self.assertAlmostEqual(y0, 0)
        self.assertAlmostEqual(x1, 10)
        self.assertAlmostEqual(y1, 7.5)

    def test_s_curve_extrema(self):
        path = Path()
        path.move_to((0, 0))
        path.curve_to((3, 0), (1, 4), (2, -4))
        _, y0, _, y1 = path.bounds()
        # sample densely and compare
        samples = [cubic_point(Point(0, 0), Point(1, 4), Point(2, -4), Point(3, 0), i / 1000.0)
                   for i in range(1001)]
        self.assertAlmostEqual(y1, max(s.y for s in samples), places=3)
        self.assertAlmostEqual(y0, min(s.y for s in samples), places=3)

    def test_arc_uses_full_circle(self):
        path = Path()
        path.move_to((4, 5))
        path.add_arc((5, 5), 0.7, 0, 2 * math.pi)
        x0, y0, x1, y1 = path.bounds()
        self.assertAlmostEqual(x0, 4)     # the lead-in from the move
        self.assertAlmostEqual(y0, 4.3)
        self.assertAlmostEqual(x1, 5.7)
        self.assertAlmostEqual(y1, 5.7)


class TestFlatten(unittest.TestCase):

    def test_each_move_starts_a_polyline(self):
        path = Path()
        path.move_to((0, 0))
        path.curve_to((3, 0), (1, 0), (2, 0))
        path.move_to((10, 10))
        path.line_to((12, 10))
        lines = path.flatten(curve_segments=8)
        self.assertEqual(len(lines), 2)
        self.assertEqual(len(lines[0]), 9)
        self.assertEqual(lines[1], [Point(10, 10), Point(12, 10)])

    def test_curve_ends_on_end_point(self):
        path = Path()
        path.move_to((0, 0))
        path.curve_to((7, 3), (1, 5), (6, -2))
        last = path.flatten()[0][-1]
        self.assertAlmostEqual(last.x, 7)
        self.assertAlmostEqual(last.y, 3)

    def test_arc_is_closed_loop(self):
        path = Path()
        path.move_to((4, 5))
        path.add_arc((5, 5), 1.0, 0, 2 * math.pi)
        line = path.flatten(arc_segments=12)[0]
        self.assertEqual(len(line), 1 + 13)
        self.assertAlmostEqual(line[1].x, line[-1].x)
        self.assertAlmostEqual(line[1].y, line[-1].y)

    def test_clear(self):
        path = Path()
        path.move_to((1, 1))
        path.line_to((2, 2))
        path.clear()
        self.assertTrue(path.is_empty)
        self.assertEqual(path.flatten(), [])

    def test_commands_are_a_snapshot(self):
        path = Path()
        path.move_to((1, 1))
        snap = path.commands
        path.line_to((2, 2))
        self.assertEqual(snap, (MoveTo(Point(1, 1)),))
        self.assertEqual(len(path), 2)


if __name__ == "__main__":
    unittest.main()
