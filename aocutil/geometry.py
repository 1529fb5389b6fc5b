"""Grid coordinates for puzzles played out on a lattice.

Everything here treats the grid as tiles rather than continuous space, with
the origin at the top left: x grows to the east, y grows to the south, and
neither may go negative.  Grids themselves are never stored; the width and
height are passed in by whoever is asking about neighbors.
"""
from enum import Enum
import re


class CoordinateParseError(ValueError):
    pass


class Direction(Enum):
    # Listed in the order neighbors are swept: clockwise, starting west
    left = (-1, 0)
    up_left = (-1, -1)
    up = (0, -1)
    up_right = (1, -1)
    right = (1, 0)
    down_right = (1, 1)
    down = (0, 1)
    down_left = (-1, 1)

    @property
    def is_orthogonal(self):
        return 0 in self.value

    @property
    def parents(self):
        """The two orthogonal directions a diagonal is made of.  Orthogonal
        directions are their own (only) parent.
        """
        if self.is_orthogonal:
            return (self,)

        dx, dy = self.value
        return (Direction((dx, 0)), Direction((0, dy)))


ORTHOGONAL_DIRECTIONS = tuple(d for d in Direction if d.is_orthogonal)


class Span(tuple):
    """A one-dimensional range, with inclusive endpoints."""
    def __new__(cls, start, end):
        return super().__new__(cls, (start, end))

    @classmethod
    def between(cls, a, b):
        """The span covering both `a` and `b`, whichever is larger."""
        return cls(min(a, b), max(a, b))

    @property
    def start(self):
        return self[0]

    @property
    def end(self):
        return self[1]

    def __contains__(self, n):
        return self.start <= n <= self.end

    def range(self):
        """Iterate over every integer in the span, ascending."""
        return range(self.start, self.end + 1)


# ASCII digits, optionally with a redundant plus.  int() alone would also
# accept whitespace, underscores, and minus signs
_UINT_RX = re.compile(r'\+?[0-9]+')


def _parse_uint(token, source):
    if not _UINT_RX.fullmatch(token):
        raise CoordinateParseError(
            "Expected a non-negative integer, got {!r} in {!r}"
            .format(token, source))
    return int(token)


class Coordinate(tuple):
    """An (x, y) point on the grid.

    Since this is a tuple, equality, hashing, and ordering all come for free
    and compare x first, then y.
    """
    def __new__(cls, x, y):
        assert isinstance(x, int) and not isinstance(x, bool) and x >= 0, x
        assert isinstance(y, int) and not isinstance(y, bool) and y >= 0, y
        return tuple.__new__(cls, (x, y))

    @classmethod
    def origin(cls):
        return cls(0, 0)

    @classmethod
    def parse(cls, string):
        """Parse a point written as ``x,y``, e.g. ``"498,13"``."""
        tokens = string.split(',')
        if len(tokens) != 2:
            raise CoordinateParseError(
                "Expected exactly two comma-separated numbers, got {!r}"
                .format(string))

        x, y = (_parse_uint(token, string) for token in tokens)
        return cls(x, y)

    @property
    def x(self):
        return self[0]

    @property
    def y(self):
        return self[1]

    def __repr__(self):
        return "{}({}, {})".format(type(self).__name__, self.x, self.y)

    def __str__(self):
        return "{},{}".format(self.x, self.y)

    def __add__(self, other):
        if isinstance(other, Direction):
            other = other.value
        elif isinstance(other, Coordinate):
            pass
        else:
            return NotImplemented

        return Coordinate(self.x + other[0], self.y + other[1])

    def is_within_bounds(self, min_x, max_x, min_y, max_y):
        return self.x in Span(min_x, max_x) and self.y in Span(min_y, max_y)

    def points_between(self, to):
        """Return every point on the straight line from here to `to`,
        inclusive, ordered along the line from its top or left end.

        The two points must share a row or a column; diagonal lines aren't
        supported.
        """
        assert self.x == to.x or self.y == to.y, (
            "{} and {} are not on a horizontal or vertical line"
            .format(self, to))

        cls = type(self)
        if self.x == to.x:
            return [cls(self.x, y) for y in Span.between(self.y, to.y).range()]
        else:
            return [cls(x, self.y) for x in Span.between(self.x, to.x).range()]

    def _open_directions(self, max_width, max_height):
        """Orthogonal directions that stay on a grid of the given size."""
        assert max_width >= 1 and max_height >= 1, (max_width, max_height)

        # Check before stepping; a coordinate can't hold a negative value
        open_directions = set()
        if self.x > 0:
            open_directions.add(Direction.left)
        if self.y > 0:
            open_directions.add(Direction.up)
        if self.x < max_width - 1:
            open_directions.add(Direction.right)
        if self.y < max_height - 1:
            open_directions.add(Direction.down)
        return open_directions

    def orthogonal_neighbors(self, max_width, max_height):
        """Return the points sharing an edge with this one, in the order west,
        north, east, south.  Anything that would fall off the grid is left
        out, so corners have 2 neighbors and edges have 3.
        """
        open_directions = self._open_directions(max_width, max_height)
        return [self + d for d in ORTHOGONAL_DIRECTIONS if d in open_directions]

    def all_neighbors(self, max_width, max_height):
        """Return the points sharing an edge or a corner with this one,
        sweeping clockwise from the west.

        A diagonal only counts if both of the orthogonal steps it's made of
        are on the grid, too.
        """
        open_directions = self._open_directions(max_width, max_height)
        return [
            self + d for d in Direction
            if all(parent in open_directions for parent in d.parents)
        ]
