"""
Element sets built from raw comma-separated text.

A label is a trimmed, non-empty token; equality is exact (case-sensitive)
string equality. Sets are identified by position, 0 → "A", 1 → "B", 2 → "C".
"""

from typing import FrozenSet, List, NamedTuple, Optional, Sequence
import logging

from .defaults import _check_n

logger = logging.getLogger(__name__)


class NamedSet(NamedTuple):
    name: str
    elements: FrozenSet[str]


def set_name(i: int) -> str:
    """Display name of the i-th set: 'A', 'B' or 'C'."""
    if not 0 <= i < 3:
        raise ValueError(f"Set index must be in [0, 3), got {i!r}.")
    return chr(ord("A") + i)


def parse_elements(text: Optional[str]) -> FrozenSet[str]:
    """Split on ',', trim every token, drop the empty ones, dedupe."""
    if text is None:
        return frozenset()
    return frozenset(tok.strip() for tok in text.split(",") if tok.strip())


def parse_sets(texts: Sequence[Optional[str]], n: int) -> List[Optional[NamedSet]]:
    """
    One slot per index in [0, n).

    A slot whose text is None (or missing from `texts`) stays absent;
    empty or whitespace-only text gives a present, empty set.
    """
    _check_n(n)
    if len(texts) > n:
        logger.debug("Ignoring %d input(s) beyond N=%d", len(texts) - n, n)

    out: List[Optional[NamedSet]] = []
    for i in range(n):
        text = texts[i] if i < len(texts) else None
        if text is None:
            out.append(None)
        else:
            out.append(NamedSet(set_name(i), parse_elements(text)))
    return out


def set_input_labels(n: int) -> List[str]:
    """Prompts shown next to each input field."""
    _check_n(n)
    return [f"Set {set_name(i)} (comma separated):" for i in range(n)]


def _members(named: Optional[NamedSet]) -> FrozenSet[str]:
    return frozenset() if named is None else named.elements
