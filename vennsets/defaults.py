from typing import Dict, List, NamedTuple, Tuple

# ---------------------------------------------------------------------------
# Supported diagram sizes
# ---------------------------------------------------------------------------

SUPPORTED_N: Tuple[int, ...] = (2, 3)

CANVAS_SIZE: Tuple[int, int] = (1000, 300)
WRAP_CHUNK: int = 5
SAVE_DPI: int = 100


class GeometryConfig(NamedTuple):
    """
    Fixed pixel constants for one canonical arrangement.

    Circle A is drawn at ``center.x - pair_offset``, circle B at
    ``center.x + pair_offset + radius``; circle C (N=3 only) is placed
    by ``c_offset`` relative to the diagram center. All deltas are in
    canvas pixels with y growing downward.
    """
    radius: float
    pair_offset: float
    diagram_x_offset: float
    value_x_offset: float
    c_offset: Tuple[float, float]
    label_deltas: Tuple[Tuple[float, float], ...]
    anchor_deltas: Dict[str, Tuple[float, float]]


GEOMETRY: Dict[int, GeometryConfig] = {
    2: GeometryConfig(
        radius=100,
        pair_offset=10,
        diagram_x_offset=-40,
        value_x_offset=55,
        c_offset=(0, 0),
        label_deltas=((-23, -115), (105, -115)),
        anchor_deltas={
            "onlyA": (-90, -10),
            "onlyB": (80, -10),
            "intersectionAB": (-5, -10),
        },
    ),
    3: GeometryConfig(
        radius=100,
        pair_offset=10,
        diagram_x_offset=-40,
        value_x_offset=0,
        c_offset=(50, 110),
        label_deltas=((-18, -115), (102, -115), (45, 230)),
        anchor_deltas={
            "onlyA": (-50, -20),
            "onlyB": (130, -20),
            "onlyC": (45, 145),
            "intersectionAB": (50, -30),
            "intersectionAC": (-10, 70),
            "intersectionBC": (100, 70),
            "intersectionABC": (50, 40),
        },
    ),
}

# ---------------------------------------------------------------------------
# Per-N color palettes
# ---------------------------------------------------------------------------

FILL_COLORS: Dict[int, List[str]] = {
    2: ["#ff0000", "#0000ff"],
    3: ["#ff0000", "#0000ff", "#009600"],
}

OUTLINE_COLORS: Dict[int, List[str]] = {
    2: ["#000000", "#000000"],
    3: ["#000000", "#000000", "#000000"],
}

FILL_ALPHA: float = 0.5


def _check_n(N: int) -> None:
    if N not in SUPPORTED_N:
        raise ValueError(f"Only N in {set(SUPPORTED_N)} are supported, got {N!r}.")


def _default_geometry_for_n(N: int) -> GeometryConfig:
    _check_n(N)
    return GEOMETRY[N]


def _default_palette_for_n(N: int) -> Tuple[List[str], List[str]]:
    """
    Return (fill_colors, outline_colors) for a given N, using explicit
    per-N lists.
    """
    _check_n(N)

    fills = FILL_COLORS[N]
    outlines = OUTLINE_COLORS[N]

    if len(fills) != N or len(outlines) != N:
        raise RuntimeError(f"Palette length mismatch for N={N}.")

    return list(fills), list(outlines)


def _default_fontsize(N: int) -> Tuple[float, float]:
    """(region_fontsize, class_fontsize) in pixels."""
    class_fontsizes = {
        2: 16,
        3: 16,
    }
    region_fontsizes = {
        2: 12,
        3: 12,
    }
    _check_n(N)
    return (region_fontsizes[N], class_fontsizes[N])


def _default_line_height(fontsize: float) -> float:
    # Ascent + descent + leading of a plain sans-serif face.
    return round(fontsize * 1.25)


def _default_linewidth(N: int) -> float:
    linewidths = {
        2: 1.0,
        3: 1.0,
    }
    _check_n(N)
    return linewidths[N]
