import numpy as np
from typing import Sequence, Tuple, Union
from matplotlib.colors import to_rgb

_WHITE = np.ones(3, float)


def _rgba(color: Union[str, tuple], alpha: float) -> Tuple[float, float, float, float]:
    """Matplotlib color plus an explicit alpha, as a plain 4-tuple."""
    a = max(0.0, min(1.0, float(alpha)))
    r, g, b = to_rgb(color)
    return (float(r), float(g), float(b), a)


def _auto_text_color_from_rgb(rgb: np.ndarray) -> str:
    """'black' on light backgrounds, 'white' on dark ones (Rec. 601 luma)."""
    luma = float(np.dot([0.299, 0.587, 0.114], rgb))
    return "black" if luma >= 0.5 else "white"


def _color_mix_alpha_stack(
    fills: Sequence[np.ndarray],
    alpha: float = 0.5,
    backdrop: np.ndarray = _WHITE,
) -> np.ndarray:
    """
    Color seen where translucent circle fills overlap on the canvas.

    Each fill in `fills` is painted over `backdrop` in order at `alpha`;
    no fills leaves the backdrop itself.
    """
    a = max(0.0, min(1.0, float(alpha)))
    seen = np.array(backdrop, float)
    for fill in fills:
        seen = (1.0 - a) * seen + a * np.asarray(fill, float)
    return seen
