"""Face construction of the impossible polygon.

Two regular polygons share a centre: a fixed inner polygon with side
length :data:`INNER_SIDE_LEN`, and a larger outer polygon rotated by
``π/n`` whose edges cut off the inner polygon's corners. The ``2n``
crossings of both outlines, together with one offset line per cut, bound
the ``n`` faces that make up the illusion.

Usage
-----
>>> from impossible_polygon.construction import build_construction
>>> construction = build_construction(3, outer_side_len=15.0, perspective_modifier=0.5)
>>> len(construction.faces)
3
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .geometry import (
    connect_points,
    gen_polygon,
    get_intersections,
    get_wrap,
    inner_angle_of_regular_polygon,
    rotate_vec,
)
from .models import Construction, Face, Point, Segment

INNER_SIDE_LEN = 10.0
VIEW_BOX_SCALE = 1.1
SHIFTED_LINE_EXTENT = 10.0


class ConstructionError(RuntimeError):
    """The polygons do not produce a valid face construction."""


def build_construction(
    n: int,
    outer_side_len: float,
    perspective_modifier: float,
) -> Construction:
    """Construct all faces for an *n*-sided impossible polygon.

    Raises :class:`ConstructionError` if the outlines do not cross exactly
    ``2n`` times or if any face corner is missing.
    """
    if n < 3:
        raise ValueError("a polygon needs at least 3 edges")

    alpha = inner_angle_of_regular_polygon(n)

    inner_polygon = gen_polygon(n, INNER_SIDE_LEN, 0.0)
    outer_polygon = gen_polygon(n, outer_side_len, math.pi / n)

    intersections = get_intersections(outer_polygon, inner_polygon)
    if len(intersections) != 2 * n:
        raise ConstructionError(
            f"expected {2 * n} intersections for n={n}, got {len(intersections)} "
            f"(outer side length {outer_side_len})"
        )

    # Even polygons start their angular walk half a cut early.
    if n % 2 == 0:
        rotate_vec(intersections)

    constructed_polygon = connect_points(intersections)
    diagonals = [
        Segment(intersections[i], intersections[(i + 3) % len(intersections)])
        for i in range(0, len(intersections), 2)
    ]

    shift_distance = _shift_distance(intersections, alpha)
    shifted_lines = _shifted_lines(intersections, shift_distance, perspective_modifier)

    faces = tuple(_build_face(e, intersections, shifted_lines) for e in range(n))

    return Construction(
        n=n,
        outer_side_len=outer_side_len,
        perspective_modifier=perspective_modifier,
        inner_polygon=tuple(inner_polygon),
        outer_polygon=tuple(outer_polygon),
        intersections=tuple(intersections),
        constructed_polygon=tuple(constructed_polygon),
        diagonals=tuple(diagonals),
        shift_distance=shift_distance,
        shifted_lines=tuple(shifted_lines),
        faces=faces,
        view_box=view_box(constructed_polygon),
    )


def _shift_distance(intersections: Sequence[Point], alpha: float) -> float:
    cut_len = intersections[0].sub(intersections[1]).magnitude()
    return math.sin(math.pi - alpha) / math.sin(alpha) * math.sin((math.pi - alpha) / 2.0) * cut_len


def _shifted_lines(
    intersections: Sequence[Point],
    shift_distance: float,
    perspective_modifier: float,
) -> List[Segment]:
    """One long line per chord, parallel to it and moved
    ``shift_distance * (1 + perspective_modifier)`` against its left normal.

    The chords pair up the intersections after rotating them by one, so
    every chord spans the gap between two neighbouring cuts.
    """
    shifted = list(intersections)
    rotate_vec(shifted)

    lines: list[Segment] = []
    for k in range(0, len(shifted), 2):
        i = shifted[k]
        j = shifted[k + 1]
        i_to_j = j.sub(i)
        normal = Point(-i_to_j.y, i_to_j.x)
        unit_normal = normal.div(normal.magnitude())
        displacement = unit_normal.scale(shift_distance).scale(1.0 + perspective_modifier)
        center = i.add(i_to_j.div(2.0)).sub(displacement)
        lines.append(
            Segment(
                center.sub(i_to_j.scale(SHIFTED_LINE_EXTENT)),
                center.add(i_to_j.scale(SHIFTED_LINE_EXTENT)),
            )
        )
    return lines


def _build_face(e: int, intersections: Sequence[Point], shifted_lines: Sequence[Segment]) -> Face:
    near = get_wrap(shifted_lines, e + 2)
    far = get_wrap(shifted_lines, e + 3)

    far_chord = Segment(get_wrap(intersections, 2 * e + 2), get_wrap(intersections, 2 * e + 5))
    near_chord = Segment(get_wrap(intersections, 2 * e), get_wrap(intersections, 2 * e + 3))

    points = (
        intersections[2 * e],
        intersections[2 * e + 1],
        get_wrap(intersections, 2 * e + 2),
        _require(far_chord.intersect(far), e),
        # The inner corner is listed twice; renderers treat it as a
        # zero-length edge.
        _require(far.intersect(near), e),
        _require(far.intersect(near), e),
        _require(near_chord.intersect(near), e),
    )
    return Face(index=e, points=points)


def _require(point: Point | None, e: int) -> Point:
    if point is None:
        raise ConstructionError(f"face {e} is missing a corner")
    return point


def view_box(segments: Sequence[Segment]) -> tuple[float, float, float, float]:
    """``(min_x, min_y, width, height)`` of *segments* with every extreme scaled by 1.1.

    The construction is centred on the origin, so scaling the extremes
    leaves a 10% margin on each side.
    """
    xs = [p.x for seg in segments for p in (seg.a, seg.b)]
    ys = [p.y for seg in segments for p in (seg.a, seg.b)]
    if not xs:
        raise ValueError("cannot frame an empty outline")
    min_x = min(xs) * VIEW_BOX_SCALE
    min_y = min(ys) * VIEW_BOX_SCALE
    max_x = max(xs) * VIEW_BOX_SCALE
    max_y = max(ys) * VIEW_BOX_SCALE
    return (min_x, min_y, max_x - min_x, max_y - min_y)
