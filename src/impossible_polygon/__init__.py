"""Impossible polygon: Escher-style illusions from two regular polygons.

Public API is organised into layers:

- **Core** - point/segment models, regular-polygon geometry
- **Construction** - face construction and outer-polygon sizing
- **Output** - SVG and PNG rendering, JSON export, diagnostics
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import Point, Segment, Face, Construction
from .geometry import (
    calculate_regular_polygon_radius,
    calculate_regular_polygon_side_len,
    connect_points,
    gen_polygon,
    generate_regular_polygon,
    get_intersections,
    get_wrap,
    inner_angle_of_regular_polygon,
    rotate_vec,
)

# ── Construction ────────────────────────────────────────────────────
from .construction import ConstructionError, build_construction
from .sizing import find_side_len_bracket, get_outer_side_len
from .config import PolygonConfig, parse_palette, PRIMARY, GREYSCALE, PASTEL
from .generator import generate, generate_construction, generate_svg

# ── Output ──────────────────────────────────────────────────────────
from .render import construction_to_svg, render_png
from .io import (
    save_svg,
    export_construction_payload,
    export_construction_json,
    validate_construction_payload,
)
from .diagnostics import diagnostics_report

__all__ = [
    # Core
    "Point",
    "Segment",
    "Face",
    "Construction",
    "calculate_regular_polygon_radius",
    "calculate_regular_polygon_side_len",
    "connect_points",
    "gen_polygon",
    "generate_regular_polygon",
    "get_intersections",
    "get_wrap",
    "inner_angle_of_regular_polygon",
    "rotate_vec",
    # Construction
    "ConstructionError",
    "build_construction",
    "find_side_len_bracket",
    "get_outer_side_len",
    "PolygonConfig",
    "parse_palette",
    "PRIMARY",
    "GREYSCALE",
    "PASTEL",
    "generate",
    "generate_construction",
    "generate_svg",
    # Output
    "construction_to_svg",
    "render_png",
    "save_svg",
    "export_construction_payload",
    "export_construction_json",
    "validate_construction_payload",
    "diagnostics_report",
]
