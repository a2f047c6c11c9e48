import numpy as np
import pytest

from xkcd_wall.errors import ForegroundTooLarge
from xkcd_wall.services.compositing_service import CompositingService

from conftest import solid

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)

svc = CompositingService()


def test_foreground_is_centered():
    bg = solid(200, 200, RED)
    fg = solid(100, 100, BLUE)
    assert svc.center_offset(fg, bg) == (50, 50)

    out = svc.composite_center(fg, bg)
    assert out.pixels.shape == (200, 200, 4)
    assert (out.pixels[50:150, 50:150] == BLUE).all()
    assert (out.pixels[:50] == RED).all()
    assert (out.pixels[150:] == RED).all()
    assert (out.pixels[:, :50] == RED).all()
    assert (out.pixels[:, 150:] == RED).all()


def test_odd_difference_truncates():
    assert svc.center_offset(solid(2, 3, BLUE), solid(5, 6, RED)) == (1, 1)


def test_same_size_covers_background():
    out = svc.composite_center(solid(4, 4, BLUE), solid(4, 4, RED))
    assert (out.pixels == BLUE).all()


@pytest.mark.parametrize("fg_size", [(250, 100), (100, 250), (201, 201)])
def test_foreground_too_large(fg_size):
    with pytest.raises(ForegroundTooLarge):
        svc.composite_center(solid(*fg_size, BLUE), solid(200, 200, RED))


def test_one_pixel_overshoot_is_rejected_not_clipped():
    with pytest.raises(ForegroundTooLarge):
        svc.center_offset(solid(201, 100, BLUE), solid(200, 200, RED))


def test_transparent_foreground_shows_background():
    out = svc.composite_center(solid(2, 2, (0, 255, 0, 0)), solid(4, 4, RED))
    assert (out.pixels == RED).all()


def test_half_transparent_foreground_blends():
    out = svc.composite_center(solid(1, 1, (0, 0, 255, 128)), solid(1, 1, (255, 0, 0, 255)))
    r, g, b, a = out.pixels[0, 0]
    assert a == 255
    assert r == round(255 * (1 - 128 / 255))
    assert b == round(255 * 128 / 255)
    assert g == 0


def test_inputs_are_not_modified():
    bg = solid(3, 3, RED)
    fg = solid(1, 1, BLUE)
    svc.composite_center(fg, bg)
    assert (bg.pixels == RED).all()
