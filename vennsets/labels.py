from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple
import re

from .defaults import WRAP_CHUNK

_SPLIT_RE = re.compile(r",\s*")


class LabelLine(NamedTuple):
    text: str
    position: Tuple[float, float]


def wrap_tokens(elements: Iterable[str], chunk: int = WRAP_CHUNK) -> List[str]:
    """
    Join elements with ', ', re-split on a comma plus optional whitespace,
    and regroup into lines of at most `chunk` tokens joined by a bare ','.
    """
    text = ", ".join(sorted(elements))
    if not text:
        return []
    words = _SPLIT_RE.split(text)
    return [",".join(words[i:i + chunk]) for i in range(0, len(words), chunk)]


def wrap(
    elements: Iterable[str],
    anchor: Tuple[float, float],
    measure_width: Callable[[str], float],
    line_height: float,
    chunk: Optional[int] = None,
) -> List[LabelLine]:
    """
    Lay out a region's elements as lines centered on `anchor[0]`, the first
    line at `anchor[1]` and each following one `line_height` further down.
    An empty region gives no lines.
    """
    x, y = anchor
    lines = wrap_tokens(elements, WRAP_CHUNK if chunk is None else chunk)
    return [
        LabelLine(line, (x - measure_width(line) / 2.0, y + i * line_height))
        for i, line in enumerate(lines)
    ]
