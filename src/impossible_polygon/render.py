from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import drawsvg as draw
from drawsvg.elements import DrawingBasicElement

from .models import Construction, Point, Segment

STROKE_WIDTH = 0.3

# Width in pixels the document asks to be shown at; height follows the
# view box aspect ratio.
RENDER_WIDTH = 512

# Debug layers, bottom to top.
INNER_COLOR = "red"
OUTER_COLOR = "green"
OUTLINE_COLOR = "black"
DIAGONAL_COLOR = "yellow"
SHIFTED_COLOR = "blue"


def line_element(segment: Segment, color: str) -> draw.Line:
    return draw.Line(
        segment.a.x,
        segment.a.y,
        segment.b.x,
        segment.b.y,
        stroke=color,
        stroke_width=STROKE_WIDTH,
        stroke_linecap="round",
        fill="none",
    )


class Polygon(DrawingBasicElement):
    """Closed filled shape, written as an SVG ``<polygon>``."""

    TAG_NAME = "polygon"

    def __init__(self, points: Sequence[Point], **kwargs):
        super().__init__(points=" ".join(f"{p.x},{p.y}" for p in points), **kwargs)


def polygon_element(points: Sequence[Point], color: str) -> Polygon:
    return Polygon(points, fill=color)


def draw_lines(drawing: draw.Drawing, segments: Iterable[Segment], color: str) -> None:
    for segment in segments:
        drawing.append(line_element(segment, color))


def draw_polygon(drawing: draw.Drawing, points: Sequence[Point], color: str) -> None:
    drawing.append(polygon_element(points, color))


def new_drawing(view_box: tuple[float, float, float, float]) -> draw.Drawing:
    """Empty drawing whose ``viewBox`` is *view_box*, shown :data:`RENDER_WIDTH` pixels wide."""
    min_x, min_y, width, height = view_box
    drawing = draw.Drawing(width, height, origin=(min_x, min_y))
    drawing.set_render_size(w=RENDER_WIDTH)
    return drawing


def construction_to_svg(
    construction: Construction,
    palette: Sequence[str],
    debug: bool = False,
) -> draw.Drawing:
    """Draw *construction* into a new SVG drawing.

    In debug mode every construction layer is stroked and the faces are
    outlined; otherwise only the faces are drawn, filled round-robin from
    *palette*.
    """
    if not palette:
        raise ValueError("palette must not be empty")

    drawing = new_drawing(construction.view_box)
    if debug:
        draw_lines(drawing, construction.inner_polygon, INNER_COLOR)
        draw_lines(drawing, construction.outer_polygon, OUTER_COLOR)
        draw_lines(drawing, construction.constructed_polygon, OUTLINE_COLOR)
        draw_lines(drawing, construction.diagonals, DIAGONAL_COLOR)
        draw_lines(drawing, construction.shifted_lines, SHIFTED_COLOR)

    for face in construction.faces:
        if debug:
            draw_lines(drawing, _outline(face.points), OUTLINE_COLOR)
        else:
            draw_polygon(drawing, face.points, face.color(palette))
    return drawing


def _outline(points: Sequence[Point]) -> list[Segment]:
    # Faces repeat a corner, so connect_points' three-point minimum is not
    # the right check here.
    return [Segment(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]


def render_png(
    construction: Construction,
    output_path: str | Path,
    palette: Sequence[str],
    debug: bool = False,
    dpi: int = 150,
    size: float = 6.0,
) -> None:
    """Render *construction* to PNG with the same layers as the SVG.

    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon as PolygonPatch
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    if not palette:
        raise ValueError("palette must not be empty")

    fig, ax = plt.subplots(figsize=(size, size))

    if debug:
        layers = [
            (construction.inner_polygon, INNER_COLOR),
            (construction.outer_polygon, OUTER_COLOR),
            (construction.constructed_polygon, OUTLINE_COLOR),
            (construction.diagonals, DIAGONAL_COLOR),
            (construction.shifted_lines, SHIFTED_COLOR),
        ]
        for segments, color in layers:
            _plot_segments(ax, segments, color)

    for face in construction.faces:
        if debug:
            _plot_segments(ax, _outline(face.points), OUTLINE_COLOR)
        else:
            coords = [(p.x, p.y) for p in face.points]
            ax.add_patch(PolygonPatch(coords, closed=True, facecolor=face.color(palette), edgecolor="none"))

    min_x, min_y, width, height = construction.view_box
    ax.set_aspect("equal", "box")
    ax.set_xlim(min_x, min_x + width)
    # SVG y runs downwards.
    ax.set_ylim(min_y + height, min_y)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)


def _plot_segments(ax, segments: Iterable[Segment], color: str) -> None:
    for segment in segments:
        ax.plot(
            [segment.a.x, segment.b.x],
            [segment.a.y, segment.b.y],
            color=color,
            linewidth=1.0,
            solid_capstyle="round",
        )
