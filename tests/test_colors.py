import numpy as np

from vennsets.colors import _auto_text_color_from_rgb, _color_mix_alpha_stack, _rgba


def test_no_fills_leaves_white_backdrop():
    assert np.allclose(_color_mix_alpha_stack([]), [1.0, 1.0, 1.0])


def test_fills_stack_over_white():
    red = np.array([1.0, 0.0, 0.0])
    blue = np.array([0.0, 0.0, 1.0])
    assert np.allclose(_color_mix_alpha_stack([red]), [1.0, 0.5, 0.5])
    assert np.allclose(_color_mix_alpha_stack([red, blue]), [0.5, 0.25, 0.75])


def test_custom_backdrop():
    black = np.zeros(3)
    assert np.allclose(_color_mix_alpha_stack([np.ones(3)], 0.25, backdrop=black), [0.25] * 3)


def test_text_color_by_luminance():
    assert _auto_text_color_from_rgb(np.array([1.0, 1.0, 1.0])) == "black"
    assert _auto_text_color_from_rgb(np.array([0.5, 0.25, 0.75])) == "white"


def test_rgba_clamps_alpha():
    assert _rgba("#00ff00", 1.5) == (0.0, 1.0, 0.0, 1.0)
