from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def div(self, divisor: float) -> Point:
        return Point(self.x / divisor, self.y / divisor)

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)


@dataclass(frozen=True)
class Segment:
    """Straight line between *a* and *b*.

    The direction only matters where a normal is derived from it.
    """

    a: Point
    b: Point

    def length(self) -> float:
        return self.b.sub(self.a).magnitude()

    def intersect(self, other: Segment) -> Optional[Point]:
        """Crossing point of both segments, or ``None``.

        Parallel and coincident segments never intersect. A crossing of
        the infinite lines counts only if it lies on both segments
        according to :meth:`contains_point`.
        """
        a1 = self.b.y - self.a.y
        b1 = self.a.x - self.b.x
        c1 = a1 * self.a.x + b1 * self.a.y

        a2 = other.b.y - other.a.y
        b2 = other.a.x - other.b.x
        c2 = a2 * other.a.x + b2 * other.a.y

        delta = a1 * b2 - a2 * b1
        if delta == 0.0:
            return None

        crossing = Point(
            (b2 * c1 - b1 * c2) / delta,
            (a1 * c2 - a2 * c1) / delta,
        )
        if self.contains_point(crossing) and other.contains_point(crossing):
            return crossing
        return None

    def contains_point(self, point: Point) -> bool:
        """True if *point* is no farther from either end than the ends are apart.

        Only meaningful for points already known to lie on the line.
        """
        a_to_b = self.b.sub(self.a).magnitude()
        a_to_point = point.sub(self.a).magnitude()
        b_to_point = point.sub(self.b).magnitude()
        return a_to_b >= a_to_point and a_to_b >= b_to_point


@dataclass(frozen=True)
class Face:
    """One facet of the illusion.

    *points* is the closed boundary in drawing order. The shifted-line
    corner appears twice in a row.
    """

    index: int
    points: tuple[Point, ...]

    def vertex_count(self) -> int:
        return len(self.points)

    def color(self, palette: tuple[str, ...] | list[str]) -> str:
        return palette[self.index % len(palette)]


@dataclass(frozen=True)
class Construction:
    """Every intermediate product of one impossible-polygon construction.

    Attributes
    ----------
    n : int
        Edge count of both regular polygons.
    outer_side_len : float
        Side length of the outer cutting polygon.
    perspective_modifier : float
        Scale applied to the shift distance of the offset lines.
    inner_polygon, outer_polygon : tuple[Segment, ...]
        Outlines of the two regular polygons.
    intersections : tuple[Point, ...]
        The ``2n`` crossings of both outlines in angular order, after the
        even-``n`` rotation.
    constructed_polygon : tuple[Segment, ...]
        Outline through all intersections.
    diagonals : tuple[Segment, ...]
        Guide lines from every even intersection to the third one after it.
    shift_distance : float
        Offset ``b`` before the perspective scale is applied.
    shifted_lines : tuple[Segment, ...]
        One long offset line per chord pair.
    faces : tuple[Face, ...]
        The ``n`` facets.
    view_box : tuple[float, float, float, float]
        ``(min_x, min_y, width, height)`` framing the construction.
    """

    n: int
    outer_side_len: float
    perspective_modifier: float
    inner_polygon: tuple[Segment, ...]
    outer_polygon: tuple[Segment, ...]
    intersections: tuple[Point, ...]
    constructed_polygon: tuple[Segment, ...]
    diagonals: tuple[Segment, ...]
    shift_distance: float
    shifted_lines: tuple[Segment, ...]
    faces: tuple[Face, ...]
    view_box: tuple[float, float, float, float] = field(default=(0.0, 0.0, 0.0, 0.0))
