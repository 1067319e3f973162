"""
vector path for a signature stroke.

a Path is an append-only list of commands (move, cubic curve, line, arc)
in surface coordinates. nothing here knows about pixels - the rasterizer
in app/canvas.py flattens the commands into polylines and paints them.
"""
import math
from collections import namedtuple


class Point(namedtuple("Point", ["x", "y"])):
    """immutable 2d point in surface-local space"""

    __slots__ = ()

    def midpoint(self, other):
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)


MoveTo = namedtuple("MoveTo", ["point"])
LineTo = namedtuple("LineTo", ["point"])
CurveTo = namedtuple("CurveTo", ["end", "control1", "control2"])
Arc = namedtuple("Arc", ["center", "radius", "start_angle", "end_angle"])


def arc_point(arc, angle):
    return Point(arc.center.x + arc.radius * math.cos(angle),
                 arc.center.y + arc.radius * math.sin(angle))


def cubic_point(p0, c1, c2, p3, t):
    """evaluate a cubic bezier at t in [0, 1]"""
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    return Point(a * p0.x + b * c1.x + c * c2.x + d * p3.x,
                 a * p0.y + b * c1.y + c * c2.y + d * p3.y)


def _cubic_extrema(a, b, c, d):
    """
    parameter values in (0, 1) where one axis of a cubic bezier
    has a turning point. solves the derivative, which is a quadratic.
    """
    qa = -a + 3 * b - 3 * c + d
    qb = 2 * (a - 2 * b + c)
    qc = b - a

    roots = []
    if abs(qa) < 1e-12:
        if abs(qb) > 1e-12:
            roots.append(-qc / qb)
    else:
        disc = qb * qb - 4 * qa * qc
        if disc >= 0:
            sq = math.sqrt(disc)
            roots.append((-qb + sq) / (2 * qa))
            roots.append((-qb - sq) / (2 * qa))
    return [t for t in roots if 0.0 < t < 1.0]


class Path:
    """
    ordered list of drawing commands forming one stroke.

    commands are only ever appended. clear() is the one way to get
    rid of them, and an empty path means there is no signature.
    """

    def __init__(self):
        self._commands = []

    def __len__(self):
        return len(self._commands)

    def __iter__(self):
        return iter(self._commands)

    @property
    def commands(self):
        return tuple(self._commands)

    @property
    def is_empty(self):
        return not self._commands

    def move_to(self, point):
        self._commands.append(MoveTo(Point(*point)))

    def line_to(self, point):
        self._commands.append(LineTo(Point(*point)))

    def curve_to(self, end, control1, control2):
        self._commands.append(CurveTo(Point(*end), Point(*control1), Point(*control2)))

    def add_arc(self, center, radius, start_angle, end_angle):
        self._commands.append(Arc(Point(*center), float(radius), start_angle, end_angle))

    def clear(self):
        self._commands.clear()

    def bounds(self):
        """
        tight bounding box (x0, y0, x1, y1) of the drawn geometry.

        curve control points are not included, only the actual extent
        of the curves. an arc counts with its full circle, plus the
        straight line joining the current point to where the arc starts.
        returns None for an empty path.
        """
        xs = []
        ys = []
        current = None

        for cmd in self._commands:
            if isinstance(cmd, MoveTo):
                current = cmd.point
                xs.append(current.x)
                ys.append(current.y)
            elif isinstance(cmd, LineTo):
                current = cmd.point
                xs.append(current.x)
                ys.append(current.y)
            elif isinstance(cmd, CurveTo):
                start = current if current is not None else cmd.control1
                xs.append(cmd.end.x)
                ys.append(cmd.end.y)
                for t in _cubic_extrema(start.x, cmd.control1.x, cmd.control2.x, cmd.end.x):
                    xs.append(cubic_point(start, cmd.control1, cmd.control2, cmd.end, t).x)
                for t in _cubic_extrema(start.y, cmd.control1.y, cmd.control2.y, cmd.end.y):
                    ys.append(cubic_point(start, cmd.control1, cmd.control2, cmd.end, t).y)
                current = cmd.end
            elif isinstance(cmd, Arc):
                cx, cy = cmd.center
                r = cmd.radius
                xs.extend((cx - r, cx + r))
                ys.extend((cy - r, cy + r))
                current = arc_point(cmd, cmd.end_angle)

        if not xs:
            return None
        return (min(xs), min(ys), max(xs), max(ys))

    def flatten(self, curve_segments=16, arc_segments=24):
        """
        turn the path into a list of polylines (lists of Points), one
        per subpath. every MoveTo starts a new polyline.
        """
        polylines = []
        line = None
        current = None

        for cmd in self._commands:
            if isinstance(cmd, MoveTo):
                line = [cmd.point]
                polylines.append(line)
                current = cmd.point
                continue

            if line is None:
                # drawing without a MoveTo starts from the command's first point
                line = []
                polylines.append(line)

            if isinstance(cmd, LineTo):
                line.append(cmd.point)
                current = cmd.point
            elif isinstance(cmd, CurveTo):
                start = current if current is not None else cmd.control1
                if not line:
                    line.append(start)
                for i in range(1, curve_segments + 1):
                    t = i / float(curve_segments)
                    line.append(cubic_point(start, cmd.control1, cmd.control2, cmd.end, t))
                current = cmd.end
            elif isinstance(cmd, Arc):
                sweep = cmd.end_angle - cmd.start_angle
                for i in range(arc_segments + 1):
                    angle = cmd.start_angle + sweep * i / float(arc_segments)
                    line.append(arc_point(cmd, angle))
                current = arc_point(cmd, cmd.end_angle)

        return polylines
