from __future__ import annotations

import pytest

from neatpic.state.view import ViewState
from neatpic.view_math import (
    available_size, compute_fit_width_zoom, compute_fit_zoom, compute_max_fit_size,
    display_size, draw_offset, percent_to_slider, slider_to_percent, wheel_zoom_factor,
)

IMG = (800.0, 600.0)
AVAIL = (400.0, 600.0)


def test_fit_zoom_and_display_size():
    zoom = compute_fit_zoom(IMG, AVAIL)
    assert zoom == pytest.approx(0.5)
    assert display_size(IMG, zoom) == pytest.approx((400.0, 300.0))


def test_fit_box_never_exceeds_native_size():
    assert compute_max_fit_size(IMG, (2000.0, 2000.0)) == (800.0, 600.0)
    assert compute_fit_zoom(IMG, (2000.0, 2000.0)) == pytest.approx(1.0)


def test_fit_box_clamps_negative_width():
    assert compute_max_fit_size(IMG, (-50.0, 100.0))[0] == 0.0


def test_zero_dimension_image_uses_unit_zoom():
    assert compute_fit_zoom((0.0, 600.0), AVAIL) == 1.0
    assert compute_fit_width_zoom((800.0, 0.0), AVAIL) == 1.0


def test_collapsed_viewport_keeps_zoom_positive():
    assert compute_fit_zoom(IMG, (0.0, 0.0)) > 0


def test_fit_width_zoom():
    assert compute_fit_width_zoom(IMG, (1000.0, 300.0)) == pytest.approx(1.0)
    assert compute_fit_width_zoom(IMG, (200.0, 300.0)) == pytest.approx(0.25)


def test_wheel_factor_is_exponential():
    assert wheel_zoom_factor(120) == pytest.approx(1.1)
    assert wheel_zoom_factor(-120) == pytest.approx(1 / 1.1)
    assert wheel_zoom_factor(240) == pytest.approx(1.21)
    assert wheel_zoom_factor(0) == 1.0


def test_draw_offset_centers_then_pans():
    assert draw_offset(AVAIL, (400.0, 300.0), (0.0, 0.0)) == (0.0, 150.0)
    assert draw_offset(AVAIL, (400.0, 300.0), (10.0, -5.0)) == (10.0, 145.0)


def test_available_size_reserves_side_panel():
    assert available_size(1280, 720, 270) == (1010.0, 720.0)
    assert available_size(100, 720, 270) == (0.0, 720.0)


def test_slider_mapping_is_logarithmic():
    assert percent_to_slider(1.0, 1.0, 1000.0) == pytest.approx(0.0)
    assert percent_to_slider(1000.0, 1.0, 1000.0) == pytest.approx(1.0)
    assert percent_to_slider(31.6227766, 1.0, 1000.0) == pytest.approx(0.5)
    assert slider_to_percent(0.5, 1.0, 1000.0) == pytest.approx(31.6227766)
    assert slider_to_percent(percent_to_slider(250.0, 1.0, 1000.0), 1.0, 1000.0) == pytest.approx(250.0)


def test_slider_position_clamps_out_of_range_zoom():
    assert percent_to_slider(5000.0, 1.0, 1000.0) == 1.0
    assert percent_to_slider(0.0, 1.0, 1000.0) == 0.0


class TestViewState:

    def test_automatic_mode_tracks_window(self):
        view = ViewState()
        assert view.update_fit(IMG, AVAIL) == pytest.approx((400.0, 300.0))
        assert view.zoom == pytest.approx(0.5)
        # resize re-tracks live
        view.update_fit(IMG, (200.0, 600.0))
        assert view.zoom == pytest.approx(0.25)
        assert view.dynamic_zoom

    def test_manual_zoom_survives_resize(self):
        view = ViewState(zoom=2.0, dynamic_zoom=False)
        assert view.update_fit(IMG, AVAIL) == pytest.approx((1600.0, 1200.0))
        assert view.zoom == 2.0

    def test_wheel_up_from_manual(self):
        view = ViewState(zoom=0.5, dynamic_zoom=False)
        assert view.apply_wheel(120, IMG, AVAIL)
        assert view.zoom == pytest.approx(0.55)

    def test_wheel_down_from_manual(self):
        view = ViewState(zoom=0.5, dynamic_zoom=False)
        view.apply_wheel(-120, IMG, AVAIL)
        assert view.zoom == pytest.approx(0.4545, abs=1e-4)

    def test_wheel_in_automatic_mode_snaps_to_fit_width(self):
        view = ViewState()
        view.update_fit(IMG, (1000.0, 300.0))
        assert view.zoom == pytest.approx(0.5)

        view.apply_wheel(120, IMG, (1000.0, 300.0))

        assert not view.dynamic_zoom
        assert view.zoom == pytest.approx(1.1)

    def test_zero_wheel_is_ignored(self):
        view = ViewState()
        assert not view.apply_wheel(0, IMG, AVAIL)
        assert view.dynamic_zoom

    @pytest.mark.parametrize("zoom", [0.1, 1.0, 7.5])
    def test_drag_is_independent_of_zoom(self, zoom):
        view = ViewState(zoom=zoom, dynamic_zoom=False, offset=(3.0, 4.0))
        view.apply_drag((10.0, -5.0))
        assert view.offset == (13.0, -1.0)

    def test_set_zoom_percent_leaves_fit_mode(self):
        view = ViewState()
        assert view.set_zoom_percent(250.0)
        assert view.zoom == pytest.approx(2.5)
        assert not view.dynamic_zoom
        assert view.zoom_percent == pytest.approx(250.0)

    def test_set_zoom_percent_beyond_slider_range_is_kept(self):
        view = ViewState()
        view.set_zoom_percent(5000.0)
        assert view.zoom == pytest.approx(50.0)

    def test_non_positive_percent_is_rejected(self):
        view = ViewState(zoom=0.7, dynamic_zoom=False)
        assert not view.set_zoom_percent(0.0)
        assert view.zoom == 0.7

    def test_reset(self):
        view = ViewState(zoom=3.0, dynamic_zoom=False, offset=(5.0, 5.0))
        view.reset()
        assert view.dynamic_zoom
        assert view.offset == (0.0, 0.0)
