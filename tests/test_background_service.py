import numpy as np
import pytest

from xkcd_wall.errors import InvalidDimension
from xkcd_wall.models.color import Color
from xkcd_wall.models.dimension import Dimension
from xkcd_wall.services.background_service import BackgroundService
from xkcd_wall.services.color_service import ColorService


def test_parse_dimension():
    assert BackgroundService.parse_dimension("1920x1080") == Dimension(1920, 1080)
    assert BackgroundService.parse_dimension("1x1") == Dimension(1, 1)


@pytest.mark.parametrize("text", [
    "", "1920", "1920x", "x1080", "0x10", "10x0", "-5x10", "10x-5",
    "1920x1080x2", "1920X1080", "19.5x10", " 10x10", "10 x10", "+10x10", "axb",
])
def test_parse_dimension_rejects(text):
    with pytest.raises(InvalidDimension):
        BackgroundService.parse_dimension(text)


def test_error_names_the_bad_part():
    with pytest.raises(InvalidDimension, match="invalid height: 0"):
        BackgroundService.parse_dimension("10x0")
    with pytest.raises(InvalidDimension, match="invalid width: abc"):
        BackgroundService.parse_dimension("abcx10")


def test_make_background_fills_every_pixel():
    dim = BackgroundService.parse_dimension("100x50")
    img = BackgroundService.make_background(dim, ColorService.parse_hex("#FF0000"))
    assert img.pixels.shape == (50, 100, 4)
    assert img.width == 100 and img.height == 50
    assert (img.pixels == np.array([255, 0, 0, 255], dtype=np.uint8)).all()


def test_make_background_rejects_non_positive_dimension():
    with pytest.raises(InvalidDimension):
        BackgroundService.make_background(Dimension(0, 10), Color(1, 2, 3))
