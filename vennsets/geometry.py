"""
Fixed two- and three-circle layouts in canvas pixels (origin top-left,
y growing downward).

Nothing here depends on the set contents: circles never rescale to fit
their labels, and long label text may run into neighbouring regions.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple
import logging

import numpy as np

from .defaults import (
    FILL_ALPHA,
    SUPPORTED_N,
    _default_geometry_for_n,
    _default_palette_for_n,
)
from .colors import _rgba
from .regions import region_name
from .sets import set_name

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class Circle(NamedTuple):
    name: str
    center: Point
    radius: float
    fill: Tuple[float, float, float, float]
    outline: str
    label_pos: Point


class DiagramGeometry(NamedTuple):
    center: Point
    circles: List[Circle]
    anchors: Dict[str, Point]


def _circle_centers(N: int, cx: float, cy: float) -> List[Point]:
    cfg = _default_geometry_for_n(N)
    r, off = cfg.radius, cfg.pair_offset
    centers = [
        (cx - off, cy),
        (cx + off + r, cy),
    ]
    if N == 3:
        dx, dy = cfg.c_offset
        centers.append((cx + dx, cy + dy))
    return centers


def layout(n: int, width: float, height: float) -> DiagramGeometry:
    """
    Circles and per-region text anchors for an `n`-set diagram on a
    `width` x `height` canvas.

    Any `n` other than 2 or 3 gives an empty geometry (nothing to draw).
    """
    cx = width / 2.0
    cy = height / 2.0
    if n not in SUPPORTED_N:
        logger.debug("No diagram for N=%r", n)
        return DiagramGeometry((cx, cy), [], {})

    cfg = _default_geometry_for_n(n)
    cx += cfg.diagram_x_offset
    fills, outlines = _default_palette_for_n(n)

    circles: List[Circle] = []
    for i, center in enumerate(_circle_centers(n, cx, cy)):
        ldx, ldy = cfg.label_deltas[i]
        circles.append(
            Circle(
                name=set_name(i),
                center=(float(center[0]), float(center[1])),
                radius=float(cfg.radius),
                fill=_rgba(fills[i], FILL_ALPHA),
                outline=outlines[i],
                label_pos=(cx + ldx, cy + ldy),
            )
        )

    anchors: Dict[str, Point] = {}
    for name, (dx, dy) in cfg.anchor_deltas.items():
        anchors[name] = (cx + dx + cfg.value_x_offset, cy + dy)

    return DiagramGeometry((cx, cy), circles, anchors)


def region_at(geometry: DiagramGeometry, point: Point) -> Optional[str]:
    """Name of the region containing `point`, or None outside every circle."""
    if not geometry.circles:
        return None
    centers = np.array([c.center for c in geometry.circles], float)  # (N, 2)
    radii = np.array([c.radius for c in geometry.circles], float)
    dist = np.hypot(*(np.asarray(point, float)[None, :] - centers).T)
    key = tuple(int(b) for b in dist < radii)
    if not any(key):
        return None
    return region_name(key)
