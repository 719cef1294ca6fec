"""
Unit tests for viewport scaling, zoom and coordinate mapping.
"""

import pytest

from SB_Libs.RegionEditLib.coordinate_mapper import (
    CoordinateMapper,
    to_display_space,
    to_image_space,
)
from SB_Libs.RegionEditLib.region_models import Point
from SB_Libs.RegionEditLib.viewport_controller import (
    ViewportController,
    clamp_zoom,
    fit_scale,
)


class TestFitScale:
    """Tests for aspect-ratio fitting."""

    def test_wide_image_fits_width(self):
        """An image wider than the container fits its width."""
        assert fit_scale((200, 100), (100, 100)) == pytest.approx(0.5)

    def test_tall_image_fits_height(self):
        """An image taller than the container fits its height."""
        assert fit_scale((100, 200), (100, 100)) == pytest.approx(0.5)

    def test_small_image_scales_up(self):
        """A small square image in a wide container fits its height."""
        assert fit_scale((100, 100), (400, 200)) == pytest.approx(2.0)

    def test_invalid_sizes(self):
        """Zero dimensions are rejected."""
        with pytest.raises(ValueError):
            fit_scale((0, 100), (100, 100))
        with pytest.raises(ValueError):
            fit_scale((100, 100), (100, 0))


class TestZoom:
    """Tests for zoom stepping and clamping."""

    def test_zoom_in_saturates_at_max(self):
        """Repeated zoom in stops at exactly 3.0."""
        viewport = ViewportController()
        for _ in range(40):
            viewport.zoom_in()
            assert viewport.zoom_factor <= 3.0

        assert viewport.zoom_factor == 3.0

    def test_zoom_out_saturates_at_min(self):
        """Repeated zoom out stops at exactly 0.1."""
        viewport = ViewportController()
        for _ in range(40):
            viewport.zoom_out()
            assert viewport.zoom_factor >= 0.1

        assert viewport.zoom_factor == 0.1

    def test_steps_land_on_tenths(self):
        """Three steps in from 1.0 give 1.3, not a float approximation."""
        viewport = ViewportController()
        viewport.zoom_in()
        viewport.zoom_in()
        viewport.zoom_in()

        assert viewport.zoom_factor == 1.3
        assert viewport.zoom_percent == 130

    def test_reset_zoom(self):
        viewport = ViewportController()
        viewport.set_zoom(2.4)
        viewport.reset_zoom()

        assert viewport.zoom_factor == 1.0

    def test_absolute_zoom_clamped(self):
        """Absolute values outside the range are clamped."""
        assert clamp_zoom(10) == 3.0
        assert clamp_zoom(0) == 0.1
        assert clamp_zoom(1.25) in (1.2, 1.3)


class TestViewportController:
    """Tests for scale and display size."""

    def test_unknown_sizes_give_unit_scale(self):
        """Before image or container are known the scale is 1."""
        viewport = ViewportController()
        assert viewport.display_scale == 1.0
        assert viewport.display_size() == (0, 0)

    def test_display_size_applies_zoom(self):
        """Display size is the fitted size times zoom; raster size is untouched."""
        viewport = ViewportController(container_size=(100, 100))
        viewport.set_image_size(200, 100)
        viewport.set_zoom(2.0)

        assert viewport.display_scale == pytest.approx(0.5)
        assert viewport.effective_scale == pytest.approx(1.0)
        assert viewport.display_size() == (200, 100)
        assert viewport.image_size == (200, 100)

    def test_changes_before_image_apply_later(self):
        """Zoom and container set before the image is known take effect once it is."""
        viewport = ViewportController()
        viewport.set_zoom(2.0)
        viewport.set_container_size(100, 100)
        viewport.set_image_size(200, 100)

        assert viewport.effective_scale == pytest.approx(1.0)

    def test_container_resize_recomputes_scale(self):
        viewport = ViewportController(container_size=(100, 100))
        viewport.set_image_size(100, 100)
        viewport.set_container_size(300, 300)

        assert viewport.display_scale == pytest.approx(3.0)

    def test_invalid_image_size(self):
        with pytest.raises(ValueError):
            ViewportController().set_image_size(0, 10)


class TestCoordinateMapping:
    """Tests for display <-> image conversion."""

    def test_divides_by_effective_scale(self):
        """Display point is divided by display_scale * zoom."""
        point = to_image_space(Point(50, 30), 0.5, 2.0)
        assert point == Point(50, 30)

        point = to_image_space(Point(50, 30), 0.5, 1.0)
        assert point == Point(100, 60)

    @pytest.mark.parametrize("scale,zoom", [(0.37, 1.0), (1.6, 0.3), (0.5, 2.9)])
    def test_round_trip(self, scale, zoom):
        """Image space and back reproduces the display point."""
        original = Point(123.4, 56.7)
        back = to_display_space(to_image_space(original, scale, zoom), scale, zoom)

        assert back.x == pytest.approx(original.x)
        assert back.y == pytest.approx(original.y)

    def test_no_clamping(self):
        """Points outside the canvas stay outside."""
        point = to_image_space(Point(-20, 500), 1.0, 1.0)
        assert point == Point(-20, 500)

    def test_zero_scale_rejected(self):
        with pytest.raises(ValueError):
            to_image_space(Point(1, 1), 0.0, 1.0)

    def test_mapper_follows_viewport(self):
        """CoordinateMapper uses the viewport's current scale."""
        viewport = ViewportController(container_size=(50, 50))
        viewport.set_image_size(100, 100)
        mapper = CoordinateMapper(viewport)

        assert mapper.to_image_space(Point(10, 20)) == Point(20, 40)

        viewport.set_zoom(2.0)
        assert mapper.to_image_space(Point(10, 20)) == Point(10, 20)
        assert mapper.to_display_space(Point(10, 20)) == Point(10, 20)
