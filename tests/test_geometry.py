"""Tests for wheel/slider coordinate mapping and layout."""

import math

import pytest

from harmonypicker.geometry import PickerLayout, ValueGeometry, WheelGeometry


@pytest.fixture
def wheel():
    return WheelGeometry(cx=100.0, cy=120.0, radius=80.0)


@pytest.fixture
def slider():
    return ValueGeometry(left=300.0, top=20.0, right=340.0, bottom=220.0)


class TestWheelGeometry:
    """Point <-> (hue, saturation)."""

    def test_center_is_hue_zero(self, wheel):
        assert wheel.point_to_hue_saturation(100.0, 120.0) == (0.0, 0.0)

    def test_rim_east(self, wheel):
        hue, sat = wheel.point_to_hue_saturation(180.0, 120.0)
        assert hue == pytest.approx(0.0)
        assert sat == pytest.approx(1.0)

    def test_screen_down_is_ninety_degrees(self, wheel):
        hue, sat = wheel.point_to_hue_saturation(100.0, 160.0)
        assert hue == pytest.approx(90.0)
        assert sat == pytest.approx(0.5)

    def test_upper_half_wraps_to_positive(self, wheel):
        hue, _ = wheel.point_to_hue_saturation(100.0, 80.0)
        assert hue == pytest.approx(270.0)

    def test_rim_is_inside(self, wheel):
        assert wheel.point_to_hue_saturation(100.0, 200.0) is not None
        assert wheel.contains(100.0, 200.0)

    def test_just_outside(self, wheel):
        assert wheel.point_to_hue_saturation(180.0 + 1e-9, 120.0) is None
        assert not wheel.contains(180.0 + 1e-9, 120.0)

    @pytest.mark.parametrize("hue", [0.0, 15.0, 90.0, 179.0, 181.0, 270.0, 359.0])
    @pytest.mark.parametrize("sat", [0.01, 0.5, 0.999, 1.0])
    def test_roundtrip(self, wheel, hue, sat):
        x, y = wheel.hue_saturation_to_point(hue, sat)
        h2, s2 = wheel.point_to_hue_saturation(x, y)
        assert s2 == pytest.approx(sat, abs=1e-9)
        # compare on the circle
        diff = (h2 - hue + 180.0) % 360.0 - 180.0
        assert diff == pytest.approx(0.0, abs=1e-7)

    def test_rim_points_stay_inside(self, wheel):
        """Markers placed at saturation 1 classify as inside for every whole-degree hue."""
        for hue in range(360):
            x, y = wheel.hue_saturation_to_point(float(hue), 1.0)
            result = wheel.point_to_hue_saturation(x, y)
            assert result is not None, hue
            assert result[1] == pytest.approx(1.0)
            assert wheel.contains(x, y)

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            WheelGeometry(0.0, 0.0, 0.0)


class TestValueGeometry:
    """Vertical axis <-> value channel."""

    def test_edges_and_middle(self, slider):
        assert slider.y_to_value(20.0) == 1.0
        assert slider.y_to_value(220.0) == 0.0
        assert slider.y_to_value(120.0) == pytest.approx(0.5)

    def test_quarter(self, slider):
        assert slider.y_to_value(20.0 + 0.25 * 200.0) == pytest.approx(0.75)

    def test_clamped_outside(self, slider):
        assert slider.y_to_value(-50.0) == 1.0
        assert slider.y_to_value(1000.0) == 0.0

    def test_monotonic(self, slider):
        values = [slider.y_to_value(y) for y in range(20, 221, 10)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_inverse(self, slider):
        for v in (0.0, 0.3, 0.5, 1.0):
            assert slider.y_to_value(slider.value_to_y(v)) == pytest.approx(v)

    def test_band(self, slider):
        assert slider.contains(300.0)
        assert slider.contains(340.0)
        assert not slider.contains(299.9)

    def test_band_open_to_the_right(self, slider):
        # drags that overshoot the view keep reaching the slider
        assert slider.contains(340.1)
        assert slider.contains(10000.0)

    def test_invalid_extent(self):
        with pytest.raises(ValueError):
            ValueGeometry(left=0.0, top=10.0, right=5.0, bottom=10.0)


class TestPickerLayout:
    """Layout derived from the view size."""

    def test_from_view_size(self):
        layout = PickerLayout.from_view_size(500, 400)
        assert (layout.wheel.cx, layout.wheel.cy, layout.wheel.radius) == (200.0, 200.0, 200.0)
        assert layout.slider.left == pytest.approx(450.0)
        assert (layout.slider.top, layout.slider.right, layout.slider.bottom) == (0.0, 500.0, 400.0)
        assert layout.pointer_size == pytest.approx(15.0)

    def test_preferred_height(self):
        assert PickerLayout.preferred_height(500) == pytest.approx(400.0)

    def test_regions_do_not_overlap(self):
        layout = PickerLayout.from_view_size(500, 400)
        assert layout.wheel.cx + layout.wheel.radius < layout.slider.left

    def test_empty_view(self):
        with pytest.raises(ValueError):
            PickerLayout.from_view_size(0, 400)

    def test_pointer_placement_at_rim(self):
        layout = PickerLayout.from_view_size(500, 400)
        x, y = layout.wheel.hue_saturation_to_point(90.0, 1.0)
        assert x == pytest.approx(200.0)
        assert y == pytest.approx(400.0)
        assert math.isclose(layout.slider.value_to_y(1.0), 0.0)
