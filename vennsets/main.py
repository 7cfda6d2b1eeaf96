#!/usr/bin/env python3
"""
Two- and three-set Venn diagrams of labeled elements.

- `compute(...)` turns raw comma-separated text into sets, their disjoint
  regions, the selected operation's result, and the fixed diagram layout.
- `format_report(...)` gives the human-readable summary of a calculation.
- `render(...)` draws a calculation with Matplotlib, in canvas pixels.
- `calculate(...)` wraps all of the above and never raises: a failure is
  returned as a single "Error in input: ..." message.
"""

from typing import Callable, Dict, FrozenSet, List, NamedTuple, Optional, Sequence
import logging
import os

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch

from .colors import _auto_text_color_from_rgb, _color_mix_alpha_stack
from .defaults import (
    CANVAS_SIZE,
    FILL_ALPHA,
    SAVE_DPI,
    _default_fontsize,
    _default_line_height,
    _default_linewidth,
)
from .geometry import DiagramGeometry, layout
from .labels import LabelLine, wrap
from .operations import OPERATIONS, evaluate
from .regions import RegionMap, _region_keys, partition, region_name
from .sets import NamedSet, parse_sets, set_name

logger = logging.getLogger(__name__)

# Layout happens at 72 dpi so that one point of font size, one canvas
# pixel and one data unit are the same length.
_LAYOUT_DPI = 72


class Calculation(NamedTuple):
    n: int
    operation: str
    sets: List[Optional[NamedSet]]
    regions: RegionMap
    result: FrozenSet[str]
    geometry: DiagramGeometry


class Outcome(NamedTuple):
    report: Optional[str]
    figure: Optional[Figure]
    error: Optional[str]


# ---------------------------------------------------------------------------
# Pure computation
# ---------------------------------------------------------------------------

def compute(
    texts: Sequence[Optional[str]],
    n: int,
    operation: str,
    width: float = CANVAS_SIZE[0],
    height: float = CANVAS_SIZE[1],
) -> Calculation:
    """
    Everything derived from one "calculate" action. No state is kept
    between calls; the same input always gives the same Calculation.
    """
    sets = parse_sets(texts, n)
    regions = partition(sets, n)
    result = evaluate(sets, n, operation)
    geometry = layout(n, width, height)
    logger.debug(
        "N=%d %s: %d region(s) non-empty, %d result element(s)",
        n, operation, sum(1 for v in regions.values() if v), len(result),
    )
    return Calculation(n, operation, sets, regions, result, geometry)


def _format_set(elements: Optional[FrozenSet[str]]) -> str:
    if elements is None:
        return "None"
    return "{" + ", ".join(sorted(elements)) + "}"


def format_report(calc: Calculation) -> str:
    lines = [f"Operation: {calc.operation}", ""]
    for i, named in enumerate(calc.sets):
        elements = None if named is None else named.elements
        lines.append(f"Set {set_name(i)}: {_format_set(elements)}")
    lines.append("")
    lines.append(f"Result: {_format_set(calc.result) if calc.result else 'None'}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _text_measurer(fig: Figure, ax, fontsize: float) -> Callable[[str], float]:
    """Width in canvas pixels of `text` drawn at `fontsize`."""
    renderer = fig.canvas.get_renderer()
    inv_trans = ax.transData.inverted()

    def measure(text: str) -> float:
        t = ax.text(0.0, 0.0, text, fontsize=fontsize, ha="left", va="baseline")
        t.draw(renderer)
        bbox_disp = t.get_window_extent(renderer=renderer)
        t.remove()
        bbox_data = bbox_disp.transformed(inv_trans)
        return float(abs(bbox_data.x1 - bbox_data.x0))

    return measure


def _region_text_colors(calc: Calculation, text_color: Optional[str]) -> Dict[str, str]:
    """Per-region label color: fixed, or chosen against the blended fill."""
    names = [region_name(k) for k in _region_keys(calc.n)]
    if text_color is not None:
        return {name: text_color for name in names}

    fills = [np.array(c.fill[:3], float) for c in calc.geometry.circles]
    out: Dict[str, str] = {}
    for key in _region_keys(calc.n):
        layers = [fills[i] for i, bit in enumerate(key) if bit]
        mixed = _color_mix_alpha_stack(layers, alpha=FILL_ALPHA)
        out[region_name(key)] = _auto_text_color_from_rgb(mixed)
    return out


def layout_labels(
    calc: Calculation,
    measure_width: Callable[[str], float],
    line_height: float,
) -> Dict[str, List[LabelLine]]:
    """Wrapped, centered lines for every non-empty region."""
    out: Dict[str, List[LabelLine]] = {}
    for name, anchor in calc.geometry.anchors.items():
        members = calc.regions.get(name, frozenset())
        if not members:
            continue
        out[name] = wrap(members, anchor, measure_width, line_height)
    return out


def _draw_diagram(
    fig: Figure,
    ax,
    calc: Calculation,
    text_color: Optional[str],
    region_label_fontsize: Optional[float],
    class_label_fontsize: Optional[float],
    line_height: Optional[float],
    linewidth: Optional[float],
) -> None:
    N = calc.n
    if not calc.geometry.circles:
        logger.debug("Nothing to draw for N=%r", N)
    else:
        if region_label_fontsize is None or class_label_fontsize is None:
            base_fs_region, base_fs_class = _default_fontsize(N)
            if region_label_fontsize is None:
                region_label_fontsize = base_fs_region
            if class_label_fontsize is None:
                class_label_fontsize = base_fs_class
        if line_height is None:
            line_height = _default_line_height(region_label_fontsize)
        if linewidth is None:
            linewidth = _default_linewidth(N)

        # ---- Circles: translucent fills first, outlines on top ------------
        for c in calc.geometry.circles:
            ax.add_patch(CirclePatch(c.center, c.radius, facecolor=c.fill,
                                     edgecolor="none", zorder=1))
        for c in calc.geometry.circles:
            ax.add_patch(CirclePatch(c.center, c.radius, fill=False,
                                     edgecolor=c.outline, linewidth=linewidth, zorder=4))
            ax.text(
                c.label_pos[0],
                c.label_pos[1],
                c.name,
                ha="left",
                va="baseline",
                fontsize=class_label_fontsize,
                fontweight="bold",
                color="black",
                zorder=6,
            )

        # Ensure renderer exists for text extent calculations
        fig.canvas.draw()
        measure = _text_measurer(fig, ax, region_label_fontsize)
        colors = _region_text_colors(calc, text_color)

        # ---- Region labels ------------------------------------------------
        for name, lines in layout_labels(calc, measure, line_height).items():
            for line in lines:
                ax.text(
                    line.position[0],
                    line.position[1],
                    line.text,
                    ha="left",
                    va="baseline",
                    fontsize=region_label_fontsize,
                    color=colors[name],
                    zorder=5,
                )


def render(
    calc: Calculation,
    width: float = CANVAS_SIZE[0],
    height: float = CANVAS_SIZE[1],
    title: Optional[str] = None,
    outfile: Optional[str] = None,
    dpi: Optional[int] = None,
    text_color: Optional[str] = "black",
    region_label_fontsize: Optional[float] = None,
    class_label_fontsize: Optional[float] = None,
    line_height: Optional[float] = None,
    linewidth: Optional[float] = None,
) -> Optional[Figure]:
    """
    Draw `calc` on a white `width` x `height` canvas.

    text_color:
        * "black" (default) → every region label in black
        * None              → black or white per region, whichever reads
                              better on the blended circle fills

    If `outfile` is given the figure is saved there, closed, and None is
    returned; otherwise the Figure is returned.
    """
    if dpi is None:
        dpi = SAVE_DPI

    fig = plt.figure(figsize=(width / _LAYOUT_DPI, height / _LAYOUT_DPI), dpi=_LAYOUT_DPI)
    try:
        fig.patch.set_facecolor("white")
        ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

        _draw_diagram(
            fig,
            ax,
            calc,
            text_color,
            region_label_fontsize,
            class_label_fontsize,
            line_height,
            linewidth,
        )

        if title:
            fig.suptitle(title)

        if outfile:
            fig.savefig(outfile, dpi=dpi, facecolor="white")
    except BaseException:
        # A half-drawn figure must not stay in pyplot's registry.
        plt.close(fig)
        raise

    if outfile:
        plt.close(fig)
        return None

    return fig


# ---------------------------------------------------------------------------
# Boundary
# ---------------------------------------------------------------------------

def calculate(
    texts: Sequence[Optional[str]],
    n: int,
    operation: str,
    width: float = CANVAS_SIZE[0],
    height: float = CANVAS_SIZE[1],
    draw: bool = True,
    **render_kwargs,
) -> Outcome:
    """
    One user "calculate" action: compute, report and (optionally) draw.

    Never raises. On failure `report` and `figure` are None and `error`
    holds the message to show, so whatever was displayed before can stay.
    """
    try:
        calc = compute(texts, n, operation, width, height)
        report = format_report(calc)
        figure: Optional[Figure] = None
        if draw:
            figure = render(calc, width, height, **render_kwargs)
    except Exception as exc:
        logger.warning("Calculation failed: %s", exc)
        return Outcome(None, None, f"Error in input: {exc}")
    return Outcome(report, figure, None)


if __name__ == "__main__":
    os.makedirs("vennsets_img", exist_ok=True)
    demos = {
        2: ["1, 2, 3", "2, 3, 4"],
        3: ["a, b", "b, c", "c, a"],
    }

    for N, texts in demos.items():
        for operation in OPERATIONS:
            print(f"Generating Venn diagram for N={N} operation={operation} ...")
            slug = operation.lower().replace(" ", "_")
            outcome = calculate(
                texts,
                N,
                operation,
                title=f"{operation} of {N} sets",
                outfile=f"vennsets_img/venn_N{N}_{slug}.png",
            )
            print(outcome.report if outcome.error is None else outcome.error)
