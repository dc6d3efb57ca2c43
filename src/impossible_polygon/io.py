"""Writers for generated images and geometry exports.

Functions
---------
- :func:`save_svg`: write SVG text to a file
- :func:`export_construction_payload`: build a JSON-serialisable dict
- :func:`export_construction_json`: write the payload to a file
- :func:`validate_construction_payload`: structural check of a payload
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from .models import Construction, Point, Segment

PathLike = Union[str, Path]

_EXPORT_VERSION = "1.0"


def save_svg(svg: str, path: PathLike) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(svg, encoding="utf-8")
    return out


def _point(p: Point) -> List[float]:
    return [p.x, p.y]


def _segment(seg: Segment) -> List[List[float]]:
    return [_point(seg.a), _point(seg.b)]


def export_construction_payload(
    construction: Construction,
    palette: Sequence[str],
) -> Dict[str, Any]:
    """Build a JSON-serialisable description of *construction*.

    The returned dict has four top-level keys:

    ``metadata``
        Edge count, side lengths, shift distance, view box.
    ``intersections``
        The ordered ``2n`` crossing points as ``[x, y]``.
    ``faces``
        Per-face dicts with index, colour and boundary points.
    ``shifted_lines``
        The offset lines as ``[[x1, y1], [x2, y2]]``.
    """
    if not palette:
        raise ValueError("palette must not be empty")

    metadata = {
        "version": _EXPORT_VERSION,
        "generator": "impossible_polygon",
        "n": construction.n,
        "outer_side_len": construction.outer_side_len,
        "perspective_modifier": construction.perspective_modifier,
        "shift_distance": construction.shift_distance,
        "face_count": len(construction.faces),
        "view_box": list(construction.view_box),
    }

    faces = [
        {
            "index": face.index,
            "color": face.color(palette),
            "points": [_point(p) for p in face.points],
        }
        for face in construction.faces
    ]

    return {
        "metadata": metadata,
        "intersections": [_point(p) for p in construction.intersections],
        "faces": faces,
        "shifted_lines": [_segment(s) for s in construction.shifted_lines],
    }


def export_construction_json(
    construction: Construction,
    palette: Sequence[str],
    path: PathLike,
    *,
    indent: int = 2,
) -> Path:
    payload = export_construction_payload(construction, palette)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=indent), encoding="utf-8")
    return out


def validate_construction_payload(payload: Dict[str, Any]) -> List[str]:
    """Validate an export payload against its expected structure.

    Returns a list of error messages (empty = valid). The formal schema
    lives in ``schemas/construction.schema.json``.
    """
    errors: List[str] = []

    for key in ("metadata", "intersections", "faces", "shifted_lines"):
        if key not in payload:
            errors.append(f"Missing top-level key: {key}")

    meta = payload.get("metadata", {})
    for key in ("version", "n", "outer_side_len", "face_count", "view_box"):
        if key not in meta:
            errors.append(f"Missing metadata key: {key}")

    n = meta.get("n", 0)
    intersections = payload.get("intersections", [])
    if not isinstance(intersections, list):
        errors.append("'intersections' must be a list")
    elif len(intersections) != 2 * n:
        errors.append(f"expected {2 * n} intersections, got {len(intersections)}")

    faces = payload.get("faces", [])
    if not isinstance(faces, list):
        errors.append("'faces' must be a list")
    else:
        expected_count = meta.get("face_count", 0)
        if len(faces) != expected_count:
            errors.append(f"face_count mismatch: metadata says {expected_count}, got {len(faces)}")
        for i, face in enumerate(faces):
            if "color" not in face:
                errors.append(f"Face {i}: missing 'color'")
            points = face.get("points")
            if not isinstance(points, list) or len(points) < 3:
                errors.append(f"Face {i}: 'points' must hold at least 3 points")
            elif any(not isinstance(p, list) or len(p) != 2 for p in points):
                errors.append(f"Face {i}: every point must be [x, y]")

    view_box = meta.get("view_box")
    if view_box is not None and (not isinstance(view_box, list) or len(view_box) != 4):
        errors.append("'view_box' must be [min_x, min_y, width, height]")

    return errors
