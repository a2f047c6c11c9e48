import re

import numpy as np

from ..errors import InvalidDimension
from ..models.color import Color
from ..models.dimension import Dimension
from ..models.image import Image

_INT_RE = re.compile(r"[0-9]+")


class BackgroundService:
    """Solid-color canvases for the final wallpaper."""

    @staticmethod
    def parse_dimension(text: str) -> Dimension:
        """
        Parse "<width>x<height>" into a Dimension.

        Raises:
            InvalidDimension: not exactly two 'x'-separated parts, or either
                part is not a positive integer.
        """
        if not isinstance(text, str):
            raise InvalidDimension(f"invalid dimension: {text!r}")
        parts = text.split("x")
        if len(parts) != 2:
            raise InvalidDimension(f"invalid dimension: {text}")

        width_s, height_s = parts
        if not _INT_RE.fullmatch(width_s) or int(width_s) <= 0:
            raise InvalidDimension(f"invalid width: {width_s}")
        if not _INT_RE.fullmatch(height_s) or int(height_s) <= 0:
            raise InvalidDimension(f"invalid height: {height_s}")

        return Dimension(int(width_s), int(height_s))

    @staticmethod
    def make_background(dimension: Dimension, color: Color) -> Image:
        if dimension.width <= 0 or dimension.height <= 0:
            raise InvalidDimension(f"invalid dimension: {dimension}")
        pixels = np.empty((dimension.height, dimension.width, 4), dtype=np.uint8)
        pixels[...] = color.rgba()
        return Image(pixels=pixels)
