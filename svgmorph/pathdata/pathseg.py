from collections import namedtuple

from svgmorph.pathdata.errors import PathStructureError, SegmentTypeMismatch
from svgmorph.pathdata.serialize import render
from svgmorph.pathdata.utils import almost_equal, format_number, lerp, TOL


class PathSeg:
    """Base of the segment variants.

    Every variant is an immutable record of absolute coordinates ending in
    the terminal point ``x, y``. Two segments are only equal when they are
    of the same variant.
    """

    __slots__ = ()

    PATHSEG_UNKNOWN = 0
    PATHSEG_MOVETO = 1
    PATHSEG_LINETO = 2
    PATHSEG_QUADRATIC = 3
    PATHSEG_CUBIC = 4
    PATHSEG_ARC = 5

    letters = ['', 'M', 'L', 'Q', 'C', 'A']

    seg_type = PATHSEG_UNKNOWN

    @property
    def letter(self):
        return self.letters[self.seg_type]

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.seg_type, tuple(self)))

    def _check_variant(self, other):
        if type(other) is not type(self):
            raise SegmentTypeMismatch(None, type(self).__name__, type(other).__name__)

    def blend(self, other, t):
        """Blend every field with the same variant ``other`` at ``t``."""
        self._check_variant(other)
        return type(self)(*(lerp(a, b, t) for a, b in zip(self, other)))

    def almost_equal(self, other, tolerance=TOL):
        if type(self) is not type(other):
            return False
        for a, b in zip(self, other):
            if isinstance(a, (str, bool)):
                if a != b:
                    return False
            elif not almost_equal(a, b, tolerance):
                return False
        return True

    def d(self, precision=None):
        return ' '.join([self.letter] + [format_number(v, precision) for v in self])

    def __str__(self):
        return self.d()


class Move(PathSeg, namedtuple('Move', ['x', 'y'])):
    __slots__ = ()
    seg_type = PathSeg.PATHSEG_MOVETO

    @classmethod
    def from_relative(cls, prev, x, y):
        return cls(prev.x + x, prev.y + y)


class Line(PathSeg, namedtuple('Line', ['x', 'y'])):
    """Straight segment.

    Kept for completeness of the variant set: the parser writes straight
    segments as degenerate cubics (see ``Cubic.straight``) and never builds
    a Line.
    """
    __slots__ = ()
    seg_type = PathSeg.PATHSEG_LINETO

    @classmethod
    def from_relative(cls, prev, x, y):
        return cls(prev.x + x, prev.y + y)


class Quadratic(PathSeg, namedtuple('Quadratic', ['cx', 'cy', 'x', 'y'])):
    __slots__ = ()
    seg_type = PathSeg.PATHSEG_QUADRATIC

    @classmethod
    def from_relative(cls, prev, cx, cy, x, y):
        return cls(prev.x + cx, prev.y + cy, prev.x + x, prev.y + y)


class Cubic(PathSeg, namedtuple('Cubic', ['c1x', 'c1y', 'c2x', 'c2y', 'x', 'y'])):
    __slots__ = ()
    seg_type = PathSeg.PATHSEG_CUBIC

    @classmethod
    def from_relative(cls, prev, c1x, c1y, c2x, c2y, x, y):
        return cls(prev.x + c1x, prev.y + c1y,
                   prev.x + c2x, prev.y + c2y,
                   prev.x + x, prev.y + y)

    @classmethod
    def straight(cls, prev, x, y):
        """Degenerate cubic drawing the straight segment from ``prev`` to (x, y).

        Both control points sit on the midpoint, so the curve is the
        straight segment itself and blends with any other cubic.
        """
        mid_x = (prev.x + x) / 2
        mid_y = (prev.y + y) / 2
        return cls(mid_x, mid_y, mid_x, mid_y, x, y)

    @property
    def is_straight(self):
        return self.c1x == self.c2x and self.c1y == self.c2y


class Arc(PathSeg, namedtuple('Arc', ['rx', 'ry', 'x_axis_rotation',
                                       'large_arc_flag', 'sweep_flag', 'x', 'y'])):
    __slots__ = ()
    seg_type = PathSeg.PATHSEG_ARC

    @classmethod
    def from_relative(cls, prev, rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x, y):
        # only the terminal point is an offset
        return cls(rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, prev.x + x, prev.y + y)

    def blend(self, other, t):
        self._check_variant(other)
        # rotation and flags have no linear law: keep the start shape's
        return Arc(
            lerp(self.rx, other.rx, t),
            lerp(self.ry, other.ry, t),
            self.x_axis_rotation,
            self.large_arc_flag,
            self.sweep_flag,
            lerp(self.x, other.x, t),
            lerp(self.y, other.y, t),
        )

    def d(self, precision=None):
        if isinstance(self.x_axis_rotation, str):
            rotation = self.x_axis_rotation
        else:
            rotation = format_number(self.x_axis_rotation, precision)
        return ' '.join([
            self.letter,
            format_number(self.rx, precision),
            format_number(self.ry, precision),
            rotation,
            '1' if self.large_arc_flag else '0',
            '1' if self.sweep_flag else '0',
            format_number(self.x, precision),
            format_number(self.y, precision),
        ])


class Path(tuple):
    """Immutable sequence of absolute segments starting with a Move."""

    def __new__(cls, segments=()):
        segments = tuple(segments)
        if not segments:
            raise PathStructureError('A path needs at least one segment')
        if not isinstance(segments[0], Move):
            raise PathStructureError('A path must start with a move, not %r' % (segments[0],))
        return super().__new__(cls, segments)

    def __repr__(self):
        return 'Path(%r)' % (list(self),)

    def __str__(self):
        return self.d()

    def d(self, precision=None):
        return render(self, precision)

    def almost_equal(self, other, tolerance=TOL):
        if len(other) != len(self):
            return False
        for i, segment in enumerate(other):
            if not self[i].almost_equal(segment, tolerance):
                return False
        return True
