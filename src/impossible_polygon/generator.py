"""Public entry points: from inputs to a finished SVG document."""

from __future__ import annotations

import logging
from typing import Sequence

from .config import PolygonConfig
from .construction import ConstructionError, build_construction
from .models import Construction
from .render import construction_to_svg
from .sizing import get_outer_side_len

logger = logging.getLogger(__name__)


def generate_construction(config: PolygonConfig) -> Construction:
    """Size the outer polygon for *config* and build every face.

    Raises ``ValueError`` for an invalid config. A
    :class:`ConstructionError` here means the sizing search picked a side
    length that does not construct, which the search rules out.
    """
    config.check()
    side_len = get_outer_side_len(config.n, config.thickness_modifier, config.perspective_modifier)
    try:
        return build_construction(config.n, side_len, config.perspective_modifier)
    except ConstructionError as exc:
        logger.error(
            "sizing search chose side length %r for n=%d but it does not construct",
            side_len, config.n,
        )
        raise ConstructionError(
            f"side length {side_len} chosen for n={config.n} does not construct: {exc}"
        ) from exc


def generate(
    n: int,
    debug: bool,
    thickness_modifier: float,
    perspective_modifier: float,
    color_palette: Sequence[str],
) -> str:
    """Return the SVG text of an *n*-sided impossible polygon.

    Output is a pure function of the arguments.
    """
    config = PolygonConfig(
        n=n,
        debug=debug,
        thickness_modifier=thickness_modifier,
        perspective_modifier=perspective_modifier,
        color_palette=list(color_palette),
    )
    return generate_svg(config)


def generate_svg(config: PolygonConfig) -> str:
    construction = generate_construction(config)
    logger.debug("built %d faces for n=%d", len(construction.faces), config.n)
    return construction_to_svg(construction, config.color_palette, debug=config.debug).as_svg()
