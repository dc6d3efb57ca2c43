"""Outer-polygon sizing search.

Which outer side lengths produce a valid construction is decided by
trying them: the bracket ``[min, max]`` is narrowed in fixed steps until
:func:`~impossible_polygon.construction.build_construction` succeeds at
both ends, and the thickness modifier then picks a value inside it.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from .construction import INNER_SIDE_LEN, ConstructionError, build_construction
from .geometry import inner_angle_of_regular_polygon

logger = logging.getLogger(__name__)

SEARCH_START = 1.0
SEARCH_STEP = 0.1
MAX_SEARCH_STEPS = 5000

# Lower end of the bracket that still looks good for small polygons,
# found by trial and error. Larger polygons use the whole bracket.
RECOMMENDED_MIN: Dict[int, float] = {
    3: 0.5,
    4: 0.48,
    5: 0.26,
}


def recommended_min(n: int) -> float:
    return RECOMMENDED_MIN.get(n, 0.0)


def circumscribing_side_len(n: int) -> float:
    """Side length of the rotated outer polygon that touches every inner vertex."""
    alpha = inner_angle_of_regular_polygon(n)
    return (2.0 * INNER_SIDE_LEN * math.sin((math.pi - alpha) / 2.0)) / math.sin(alpha)


def constructs(n: int, outer_side_len: float, perspective_modifier: float) -> bool:
    """True if a full construction succeeds at *outer_side_len*."""
    try:
        build_construction(n, outer_side_len, perspective_modifier)
    except ConstructionError:
        return False
    return True


def find_side_len_bracket(n: int, perspective_modifier: float) -> Tuple[float, float]:
    """Smallest and largest outer side lengths that construct.

    Both ends move in steps of :data:`SEARCH_STEP`, ``min`` up from
    :data:`SEARCH_START` and ``max`` down from the circumscribing side
    length. Raises :class:`ConstructionError` if either end runs out of
    steps or the ends cross.
    """
    low = SEARCH_START
    steps = 0
    while not constructs(n, low, perspective_modifier):
        low += SEARCH_STEP
        steps += 1
        if steps >= MAX_SEARCH_STEPS:
            raise ConstructionError(f"no valid outer side length found for n={n}")
    logger.debug("n=%d: lower bound %.4f after %d steps", n, low, steps)

    high = circumscribing_side_len(n)
    steps = 0
    while not constructs(n, high, perspective_modifier):
        high -= SEARCH_STEP
        steps += 1
        if steps >= MAX_SEARCH_STEPS or high < low:
            raise ConstructionError(f"no valid outer side length found for n={n}")
    logger.debug("n=%d: upper bound %.4f after %d steps", n, high, steps)

    return low, high


def get_outer_side_len(n: int, thickness_modifier: float, perspective_modifier: float) -> float:
    """Outer side length for the given thickness.

    ``0`` selects the thinnest recommended faces, ``1`` the largest valid
    side length.
    """
    if not 0.0 <= thickness_modifier <= 1.0:
        raise ValueError(f"thickness_modifier must be within [0, 1], got {thickness_modifier}")

    low, high = find_side_len_bracket(n, perspective_modifier)
    rec = recommended_min(n)
    side_len = low + (high - low) * (rec + (1.0 - rec) * thickness_modifier)
    logger.debug(
        "n=%d: bracket [%.4f, %.4f], thickness %.3f -> side length %.4f",
        n, low, high, thickness_modifier, side_len,
    )
    return side_len
