import pytest

from vennsets.geometry import layout, region_at
from vennsets.regions import region_names


def test_two_circle_layout():
    geom = layout(2, 1000, 300)
    assert geom.center == (460.0, 150.0)
    assert [c.name for c in geom.circles] == ["A", "B"]
    assert [c.center for c in geom.circles] == [(450.0, 150.0), (570.0, 150.0)]
    assert all(c.radius == 100 for c in geom.circles)
    assert geom.circles[0].fill == (1.0, 0.0, 0.0, 0.5)
    assert geom.circles[1].fill == (0.0, 0.0, 1.0, 0.5)
    assert geom.circles[0].label_pos == (437.0, 35.0)
    assert geom.anchors == {
        "onlyA": (425.0, 140.0),
        "onlyB": (595.0, 140.0),
        "intersectionAB": (510.0, 140.0),
    }


def test_three_circle_layout():
    geom = layout(3, 1000, 300)
    assert [c.center for c in geom.circles] == [
        (450.0, 150.0), (570.0, 150.0), (510.0, 260.0)
    ]
    assert geom.circles[2].fill[3] == 0.5
    assert set(geom.anchors) == set(region_names(3))


@pytest.mark.parametrize("n", [2, 3])
@pytest.mark.parametrize("size", [(1000, 300), (640, 480), (1920, 1080)])
def test_every_anchor_lies_in_its_region(n, size):
    geom = layout(n, *size)
    for name, anchor in geom.anchors.items():
        assert region_at(geom, anchor) == name


def test_constants_do_not_scale_with_canvas():
    small = layout(3, 400, 400)
    large = layout(3, 2000, 1000)
    assert [c.radius for c in small.circles] == [c.radius for c in large.circles]
    dx = large.center[0] - small.center[0]
    dy = large.center[1] - small.center[1]
    for name, (x, y) in small.anchors.items():
        assert large.anchors[name] == (x + dx, y + dy)


@pytest.mark.parametrize("n", [0, 1, 4])
def test_unsupported_n_draws_nothing(n):
    geom = layout(n, 1000, 300)
    assert geom.circles == []
    assert geom.anchors == {}
    assert region_at(geom, (500, 150)) is None


def test_point_outside_all_circles():
    assert region_at(layout(2, 1000, 300), (5, 5)) is None
