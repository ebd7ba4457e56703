"""Tests for region hit-testing and color animation."""

import pytest

from region import Region, RegionId, build_regions


@pytest.fixture
def regions():
    return build_regions(800, 400)


def _claimants(regions, x, y):
    return [r.id for r in regions if r.contains(x, y)]


def test_regions_indexed_by_id(regions):
    assert [r.id for r in regions] == list(RegionId)
    assert regions[RegionId.LOWER_RIGHT].bounds == (200, 400, 400, 800)


@pytest.mark.parametrize("x", [0, 1, 399, 400, 401, 799, 800])
@pytest.mark.parametrize("y", [0, 1, 199, 200, 201, 399, 400])
def test_every_canvas_point_has_one_region(regions, x, y):
    assert len(_claimants(regions, x, y)) == 1


def test_partition_on_coarse_grid(regions):
    for x in range(0, 801, 25):
        for y in range(0, 401, 25):
            assert len(_claimants(regions, x, y)) == 1, (x, y)


@pytest.mark.parametrize("point", [(-1, 10), (10, -1), (801, 10), (10, 401), (-5, -5), (900, 500)])
def test_points_outside_canvas_have_no_region(regions, point):
    assert _claimants(regions, *point) == []


def test_shared_border_goes_to_lower_right(regions):
    assert _claimants(regions, 400, 200) == [RegionId.LOWER_RIGHT]
    assert _claimants(regions, 399, 199) == [RegionId.UPPER_LEFT]
    assert _claimants(regions, 400, 199) == [RegionId.UPPER_RIGHT]
    assert _claimants(regions, 399, 200) == [RegionId.LOWER_LEFT]


def test_scenario_points(regions):
    assert _claimants(regions, 10, 10) == [RegionId.UPPER_LEFT]
    assert _claimants(regions, 790, 10) == [RegionId.UPPER_RIGHT]


def test_update_converges_without_overshoot():
    r = Region(RegionId.LOWER_LEFT, 0, 10, 0, 10, (200, 0, 0), (0, 200, 0))
    previous = r.current_color
    for _ in range(1000):
        r.update()
        # Each channel moves monotonically toward the target.
        assert r.current_color[0] <= previous[0]
        assert r.current_color[1] >= previous[1]
        assert r.current_color[2] == 0
        previous = r.current_color
        if r.current_color == r.active_color:
            break
    assert r.current_color == (0, 200, 0)
    r.update()
    r.update()
    assert r.current_color == (0, 200, 0)


def test_update_with_full_rate_jumps_to_target():
    r = Region(RegionId.UPPER_LEFT, 0, 10, 0, 10, (0, 0, 0), (255, 255, 255), rate=1.0)
    r.update()
    assert r.current_color == (255, 255, 255)


def test_reset_color_is_instant():
    r = Region(RegionId.UPPER_LEFT, 0, 10, 0, 10, (0, 0, 0), (255, 255, 255))
    for _ in range(5):
        r.update()
    assert r.current_color != r.idle_color
    r.reset_color()
    assert r.current_color == (0, 0, 0)
    r.reset_color()
    assert r.current_color == (0, 0, 0)


def test_draw_fills_bounds_with_current_color(canvas):
    r = Region(RegionId.UPPER_RIGHT, 0, 200, 400, 800, (255, 255, 255), (0, 0, 0))
    r.draw(canvas)
    assert canvas.calls == [("fill_rect", (0, 200, 400, 800), (255, 255, 255))]


def test_str_uses_label():
    assert RegionId.LOWER_RIGHT.label == "LowerRight"
    assert str(Region(RegionId.UPPER_LEFT, 0, 1, 0, 1, (0, 0, 0), (1, 1, 1))) == "UpperLeft"
