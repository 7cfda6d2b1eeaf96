"""
Set operations over the input sets.

Union and Intersection range over every present set among the first N.
Difference and Symmetric Difference are binary: they only ever look at
sets A and B, so set C never changes their result.
"""

from typing import FrozenSet, List, Optional, Sequence, Tuple
import logging

from .defaults import _check_n
from .sets import NamedSet

logger = logging.getLogger(__name__)

UNION = "Union"
INTERSECTION = "Intersection"
DIFFERENCE = "Difference"
SYMMETRIC_DIFFERENCE = "Symmetric Difference"

OPERATIONS = (UNION, INTERSECTION, DIFFERENCE, SYMMETRIC_DIFFERENCE)


def _present(sets: Sequence[Optional[NamedSet]], n: int) -> List[FrozenSet[str]]:
    return [sets[i].elements for i in range(min(n, len(sets))) if sets[i] is not None]


def _first_two(
    sets: Sequence[Optional[NamedSet]],
) -> Tuple[Optional[NamedSet], Optional[NamedSet]]:
    a = sets[0] if len(sets) > 0 else None
    b = sets[1] if len(sets) > 1 else None
    return a, b


def evaluate(sets: Sequence[Optional[NamedSet]], n: int, operation: str) -> FrozenSet[str]:
    """Result of `operation` over the first `n` sets, computed from scratch."""
    _check_n(n)

    if operation == UNION:
        return frozenset().union(*_present(sets, n))

    if operation == INTERSECTION:
        present = _present(sets, n)
        if not present:
            return frozenset()
        return frozenset.intersection(*present)

    if operation in (DIFFERENCE, SYMMETRIC_DIFFERENCE):
        a, b = _first_two(sets)
        if n > 2 and len(sets) > 2 and sets[2] is not None:
            logger.debug("%s ignores set %s", operation, sets[2].name)
        if a is None:
            return frozenset()
        if b is None:
            return a.elements
        if operation == DIFFERENCE:
            return a.elements - b.elements
        return (a.elements | b.elements) - (a.elements & b.elements)

    raise ValueError(
        f"Unrecognized operation: {operation!r}; use one of {', '.join(OPERATIONS)}."
    )
