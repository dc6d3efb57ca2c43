from __future__ import annotations

import math
from typing import Dict, List

import numpy as np

from .models import Construction, Face


def face_signed_area(face: Face) -> float:
    """Signed area of *face* via the shoelace formula.

    Positive for counter-clockwise winding in a y-up frame.
    """
    coords = np.array([(p.x, p.y) for p in face.points], dtype=float)
    xs = coords[:, 0]
    ys = coords[:, 1]
    return float(np.dot(xs, np.roll(ys, -1)) - np.dot(np.roll(xs, -1), ys)) / 2.0


def face_areas(construction: Construction) -> List[float]:
    return [abs(face_signed_area(face)) for face in construction.faces]


def intersection_radii(construction: Construction) -> List[float]:
    """Distance of every intersection from the origin."""
    coords = np.array([(p.x, p.y) for p in construction.intersections], dtype=float)
    return [float(r) for r in np.hypot(coords[:, 0], coords[:, 1])]


def face_extent(construction: Construction) -> tuple[float, float, float, float]:
    """``(min_x, min_y, max_x, max_y)`` over all face points."""
    coords = np.array(
        [(p.x, p.y) for face in construction.faces for p in face.points], dtype=float
    )
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


def faces_inside_view_box(construction: Construction) -> bool:
    min_x, min_y, width, height = construction.view_box
    fx0, fy0, fx1, fy1 = face_extent(construction)
    return fx0 >= min_x and fy0 >= min_y and fx1 <= min_x + width and fy1 <= min_y + height


def diagnostics_report(construction: Construction) -> Dict[str, object]:
    """Summary numbers for a construction, JSON-serialisable."""
    areas = face_areas(construction)
    radii = intersection_radii(construction)
    return {
        "n": construction.n,
        "outer_side_len": construction.outer_side_len,
        "shift_distance": construction.shift_distance,
        "intersection_count": len(construction.intersections),
        "intersection_radius_min": min(radii),
        "intersection_radius_max": max(radii),
        "face_area_min": min(areas),
        "face_area_max": max(areas),
        "face_area_spread": (max(areas) - min(areas)) / max(areas) if max(areas) else math.nan,
        "faces_inside_view_box": faces_inside_view_box(construction),
        "view_box": list(construction.view_box),
    }
