from __future__ import annotations

import pytest

from neatpic.commands import (
    CloseApp, FitToWindow, NavigateNext, NavigatePrev, NavigateToIndex,
    Pan, SetZoomPercent, WheelZoom,
)
from neatpic.state import AppState, ImageListState, ViewState, WindowState


@pytest.fixture
def state(entries, codec):
    return AppState(
        window=WindowState(screen_w=400, screen_h=600, side_panel_w=0),
        images=ImageListState(entries=entries, index=0),
        textures=codec.cache(),
    )


def test_navigate_next_and_prev(state):
    assert NavigateNext().execute(state)
    assert state.images.index == 1
    assert NavigatePrev().execute(state)
    assert state.images.index == 0


def test_navigation_stops_at_the_ends(state):
    assert not NavigatePrev().execute(state)
    state.images.index = 2
    assert not NavigateNext().execute(state)
    assert state.images.index == 2


def test_navigation_resets_view(state):
    state.view = ViewState(zoom=3.0, dynamic_zoom=False, offset=(40.0, 2.0))
    NavigateNext().execute(state)
    assert state.view.dynamic_zoom
    assert state.view.offset == (0.0, 0.0)


def test_navigate_to_index_guards(state):
    assert not NavigateToIndex(0).execute(state)
    assert not NavigateToIndex(3).execute(state)
    assert not NavigateToIndex(-1).execute(state)
    assert NavigateToIndex(2).execute(state)
    assert state.images.current_path == "c.png"


def test_navigation_without_selection(codec):
    state = AppState(textures=codec.cache())
    assert not NavigateNext().execute(state)
    assert not NavigatePrev().execute(state)


def test_wheel_zoom_needs_decoded_image(state):
    assert not WheelZoom(120).execute(state)
    state.current_texture()
    assert WheelZoom(120).execute(state)
    # fit-width of 800px image in 400px viewport is 0.5
    assert state.view.zoom == pytest.approx(0.55)
    assert not state.view.dynamic_zoom


def test_set_zoom_percent(state):
    assert SetZoomPercent(150.0).execute(state)
    assert state.view.zoom == pytest.approx(1.5)
    assert not state.view.dynamic_zoom


def test_set_zoom_percent_without_selection():
    state = AppState()
    assert not SetZoomPercent(150.0).execute(state)
    assert state.view.dynamic_zoom


def test_pan(state):
    assert Pan(10, -5).execute(state)
    assert state.view.offset == (10.0, -5.0)


def test_fit_to_window(state):
    SetZoomPercent(400.0).execute(state)
    Pan(3, 3).execute(state)
    assert FitToWindow().execute(state)
    assert state.view.dynamic_zoom
    assert state.view.offset == (0.0, 0.0)


def test_close_app_always_executes():
    assert CloseApp().execute(AppState())
