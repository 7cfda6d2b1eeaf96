"""
Disjoint Venn regions of up to three label sets.

Regions are keyed internally by membership tuples of length N, e.g.
(1, 0, 1) is "in A and C but not B", and exposed by name
("onlyA", "intersectionAC", ...).
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple
import itertools

import numpy as np

from .defaults import _check_n
from .sets import NamedSet, _members, set_name

RegionMap = Mapping[str, FrozenSet[str]]


def _region_keys(N: int) -> List[Tuple[int, ...]]:
    """
    All non-empty membership tuples for N sets, singles first, then pairs,
    then the full intersection.
    """
    keys = [k for k in itertools.product((0, 1), repeat=N) if any(k)]
    return sorted(keys, key=lambda k: (sum(k), [-b for b in k]))


def region_name(key: Sequence[int]) -> str:
    """(1, 0) → 'onlyA', (1, 1, 0) → 'intersectionAB'."""
    members = "".join(set_name(i) for i, bit in enumerate(key) if bit)
    if not members:
        raise ValueError("The complement region has no name.")
    if len(members) == 1:
        return f"only{members}"
    return f"intersection{members}"


def region_names(n: int) -> List[str]:
    _check_n(n)
    return [region_name(k) for k in _region_keys(n)]


def _disjoint_regions(
    labels: Sequence[str],
    membership: np.ndarray,
    keys: Sequence[Tuple[int, ...]],
) -> Dict[Tuple[int, ...], FrozenSet[str]]:
    """
    Given the (M, N) boolean membership matrix of M labels over N sets,
    return a dict mapping every key to the labels whose membership row
    equals that key exactly.
    """
    if not len(labels):
        return {k: frozenset() for k in keys}

    key_arr = np.array(keys, dtype=bool)                                  # (K, N)
    match = (membership[:, None, :] == key_arr[None, :, :]).all(axis=-1)  # (M, K)
    return {
        k: frozenset(labels[j] for j in np.flatnonzero(match[:, i]))
        for i, k in enumerate(keys)
    }


def partition(sets: Sequence[Optional[NamedSet]], n: int) -> RegionMap:
    """
    Split the labels of `sets` into the 2^n - 1 exact-membership regions.

    Absent sets (None, or missing past the end of `sets`) are empty, so
    every region that requires them is empty too. The returned mapping
    is read-only and every region is its own frozenset.
    """
    _check_n(n)
    slots = [_members(sets[i]) if i < len(sets) else frozenset() for i in range(n)]

    labels = sorted(frozenset().union(*slots))
    membership = np.array(
        [[label in s for s in slots] for label in labels], dtype=bool
    ).reshape(len(labels), n)

    by_key = _disjoint_regions(labels, membership, _region_keys(n))
    return MappingProxyType({region_name(k): v for k, v in by_key.items()})


def check_partition(region_map: RegionMap, sets: Sequence[Optional[NamedSet]]) -> None:
    """
    Raise ValueError unless the regions are pairwise disjoint and together
    hold exactly the union of `sets`.
    """
    seen: Dict[str, str] = {}
    for name, members in region_map.items():
        for label in members:
            if label in seen:
                raise ValueError(f"{label!r} is in both {seen[label]} and {name}.")
            seen[label] = name

    everything = frozenset().union(*(_members(s) for s in sets))
    missing = everything - set(seen)
    if missing:
        raise ValueError(f"{sorted(missing)[0]!r} is in no region.")
    extra = set(seen) - everything
    if extra:
        raise ValueError(f"{sorted(extra)[0]!r} is in no input set.")
