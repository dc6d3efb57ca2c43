"""Geometry helper functions used across the package."""

from __future__ import annotations

import math
from typing import List, MutableSequence, Sequence, TypeVar

from .models import Point, Segment

T = TypeVar("T")


def get_wrap(items: Sequence[T], index: int) -> T:
    """Element at *index*, wrapping around past the end.

    ``get_wrap([1, 2, 3], 3)`` returns ``1``.
    """
    if not items:
        raise ValueError("cannot index into an empty sequence")
    return items[index % len(items)]


def rotate_vec(items: MutableSequence[T]) -> None:
    """Move the last element to the front, shifting the rest right by one."""
    if not items:
        raise ValueError("cannot rotate an empty sequence")
    items.insert(0, items.pop())


def inner_angle_of_regular_polygon(n: int) -> float:
    """Interior angle of a regular polygon with *n* edges, in radians.

    ``inner_angle_of_regular_polygon(3)`` is 60°, ``(4)`` is 90°.
    """
    if n < 3:
        raise ValueError("a polygon needs at least 3 edges")
    return (n - 2) * math.pi / n


def generate_regular_polygon(n: int, radius: float, phi: float) -> List[Point]:
    """Vertices of a regular *n*-gon rotated by *phi* radians.

    Angles are measured clockwise from the positive y axis, so the first
    vertex of an unrotated polygon sits at ``(0, radius)``.
    """
    if n < 3:
        raise ValueError("a polygon needs at least 3 edges")
    delta_angle = 2.0 * math.pi / n
    angles = [k * delta_angle + phi for k in range(n)]
    return [Point(math.sin(a) * radius, math.cos(a) * radius) for a in angles]


def calculate_regular_polygon_radius(n: int, side_len: float) -> float:
    """Circumradius of a regular *n*-gon with the given side length.

    A square with side 1 has radius ``sqrt(2) / 2``.
    """
    alpha = inner_angle_of_regular_polygon(n)
    return (side_len * math.sin(alpha / 2.0)) / math.sin(math.pi - alpha)


def calculate_regular_polygon_side_len(n: int, radius: float) -> float:
    """Side length of a regular *n*-gon with the given circumradius."""
    alpha = inner_angle_of_regular_polygon(n)
    return (radius * math.sin(math.pi - alpha)) / math.sin(alpha / 2.0)


def connect_points(points: Sequence[Point]) -> List[Segment]:
    """Close *points* into an outline.

    ``points[0]`` connects to ``points[1]`` and so on; the last point
    connects back to the first.
    """
    if len(points) < 3:
        raise ValueError("an outline needs at least 3 points")
    return [Segment(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]


def gen_polygon(n: int, side_len: float, rotation: float) -> List[Segment]:
    """Outline of a regular *n*-gon with edges of length *side_len*."""
    radius = calculate_regular_polygon_radius(n, side_len)
    return connect_points(generate_regular_polygon(n, radius, rotation))


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of *points*."""
    if not points:
        raise ValueError("centroid of no points")
    total = Point(0.0, 0.0)
    for p in points:
        total = total.add(p)
    return total.div(len(points))


def get_intersections(
    segments_a: Sequence[Segment], segments_b: Sequence[Segment]
) -> List[Point]:
    """All crossings between two sets of segments, in angular order.

    Segments within one set are never tested against each other. The
    crossings are sorted by ``atan2(dx, dy)`` about their mean, starting
    just past the negative y axis. Ties keep their discovery order.
    """
    points: list[Point] = []
    for seg_a in segments_a:
        for seg_b in segments_b:
            crossing = seg_a.intersect(seg_b)
            if crossing is not None:
                points.append(crossing)

    if not points:
        return []

    center = centroid(points)

    def angle(p: Point) -> float:
        offset = p.sub(center)
        return math.atan2(offset.x, offset.y)

    return sorted(points, key=angle)
