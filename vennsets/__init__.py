"""Two- and three-set Venn diagrams of labeled elements."""

from .sets import NamedSet, parse_elements, parse_sets, set_input_labels, set_name
from .regions import check_partition, partition, region_name, region_names
from .operations import (
    DIFFERENCE,
    INTERSECTION,
    OPERATIONS,
    SYMMETRIC_DIFFERENCE,
    UNION,
    evaluate,
)
from .geometry import Circle, DiagramGeometry, layout, region_at
from .labels import LabelLine, wrap, wrap_tokens
from .main import Calculation, Outcome, calculate, compute, format_report, layout_labels, render

__all__ = [
    "NamedSet", "parse_elements", "parse_sets", "set_input_labels", "set_name",
    "check_partition", "partition", "region_name", "region_names",
    "UNION", "INTERSECTION", "DIFFERENCE", "SYMMETRIC_DIFFERENCE", "OPERATIONS", "evaluate",
    "Circle", "DiagramGeometry", "layout", "region_at",
    "LabelLine", "wrap", "wrap_tokens",
    "Calculation", "Outcome", "calculate", "compute", "format_report", "layout_labels", "render",
]
