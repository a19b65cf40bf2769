import pytest

from foxescape.constants import RENDERER_HEIGHT_IN_PIXELS, RENDERER_WIDTH_IN_PIXELS
from foxescape.game import letterbox


def test_exact_size_fills_window():
    assert letterbox(RENDERER_WIDTH_IN_PIXELS, RENDERER_HEIGHT_IN_PIXELS) == (
        0,
        0,
        RENDERER_WIDTH_IN_PIXELS,
        RENDERER_HEIGHT_IN_PIXELS,
    )


def test_double_size_scales_without_offset():
    assert letterbox(RENDERER_WIDTH_IN_PIXELS * 2, RENDERER_HEIGHT_IN_PIXELS * 2) == (
        0,
        0,
        RENDERER_WIDTH_IN_PIXELS * 2,
        RENDERER_HEIGHT_IN_PIXELS * 2,
    )


def test_wide_window_gets_side_bars():
    ox, oy, w, h = letterbox(RENDERER_WIDTH_IN_PIXELS * 2, RENDERER_HEIGHT_IN_PIXELS)
    assert oy == 0
    assert h == RENDERER_HEIGHT_IN_PIXELS
    assert ox == RENDERER_WIDTH_IN_PIXELS // 2


@pytest.mark.parametrize(
    "size", [(1920, 1080), (1280, 1024), (800, 600), (3840, 1600), (640, 480)]
)
def test_destination_fits_and_is_centred(size):
    win_w, win_h = size
    ox, oy, w, h = letterbox(win_w, win_h)
    assert 0 <= ox and 0 <= oy
    assert ox + w <= win_w and oy + h <= win_h
    assert abs((win_w - w - ox) - ox) <= 1
    assert abs((win_h - h - oy) - oy) <= 1
    assert w == win_w or h == win_h or abs(w - win_w) <= 1 or abs(h - win_h) <= 1


@pytest.mark.parametrize("size", [(1920, 1080), (1280, 1024), (3000, 500)])
def test_aspect_ratio_is_kept(size):
    _, _, w, h = letterbox(*size)
    expected = RENDERER_WIDTH_IN_PIXELS / RENDERER_HEIGHT_IN_PIXELS
    assert abs(w / h - expected) < 0.01