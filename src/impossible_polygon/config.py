"""Generator configuration and colour palettes."""

from __future__ import annotations

import json
from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple


# ═══════════════════════════════════════════════════════════════════
# Palettes
# ═══════════════════════════════════════════════════════════════════

PRIMARY: Tuple[str, ...] = ("#FF0000", "#00FF00", "#0000FF")
GREYSCALE: Tuple[str, ...] = ("#2b2b2b", "#7a7a7a", "#c4c4c4")
PASTEL: Tuple[str, ...] = ("#fabed4", "#dcbeff", "#aaffc3", "#fffac8", "#42d4f4")

PALETTES = {
    "primary": PRIMARY,
    "greyscale": GREYSCALE,
    "pastel": PASTEL,
}


def parse_palette(value: Any) -> List[str]:
    """Turn a loosely typed palette into a list of colour strings.

    Accepts a preset name, JSON text holding an array of strings, or any
    sequence of strings. Colours themselves are not checked.
    """
    if isinstance(value, str):
        if value in PALETTES:
            return list(PALETTES[value])
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError(f"palette is neither a preset nor JSON: {value!r}") from exc

    if isinstance(value, (str, bytes)) or not isinstance(value, SequenceABC):
        raise ValueError("palette must be a sequence of colour strings")
    colors = list(value)
    if not all(isinstance(c, str) for c in colors):
        raise ValueError("palette entries must be strings")
    return colors


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


@dataclass
class PolygonConfig:
    """Inputs of one impossible-polygon image.

    Attributes
    ----------
    n : int
        Number of edges, at least 3.
    debug : bool
        Draw the construction lines instead of filled faces.
    thickness_modifier : float
        Position inside the valid outer side length range, ``0`` to ``1``.
    perspective_modifier : float
        Extra displacement of the offset lines; larger values deepen the
        illusion.
    color_palette : sequence of str
        Fill colours, used round-robin per face.
    """

    n: int = 3
    debug: bool = False
    thickness_modifier: float = 0.0
    perspective_modifier: float = 0.5
    color_palette: Sequence[str] = field(default_factory=lambda: list(PRIMARY))

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.n < 3:
            errors.append(f"n must be >= 3, got {self.n}")
        if not 0.0 <= self.thickness_modifier <= 1.0:
            errors.append(
                f"thickness_modifier must be within [0, 1], got {self.thickness_modifier}"
            )
        if not self.color_palette:
            errors.append("color_palette must not be empty")
        elif not all(isinstance(c, str) for c in self.color_palette):
            errors.append("color_palette entries must be strings")
        return errors

    def check(self) -> None:
        """Raise ``ValueError`` listing every problem found by :meth:`validate`."""
        errors = self.validate()
        if errors:
            raise ValueError("; ".join(errors))
