from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from xkcd_wall.models.image import Image


def rgba(rows):
    """Build an Image from nested lists of (r, g, b, a) tuples."""
    return Image(pixels=np.array(rows, dtype=np.uint8))


def solid(width, height, color):
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = color
    return Image(pixels=pixels)


def write_png(path: Path, rows) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    PILImage.fromarray(np.array(rows, dtype=np.uint8)).save(path, format="PNG")
    return path


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, content=b"", reason="OK"):
        self.status_code = status_code
        self._json = json_data
        self.content = content
        self.reason = reason

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


class FakeSession:
    """Stands in for requests.Session; maps URL -> FakeResponse."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if url not in self.routes:
            return FakeResponse(status_code=404, reason="Not Found")
        return self.routes[url]


@pytest.fixture
def checker_png_bytes(tmp_path):
    """PNG bytes of a 2x2 comic: black, white, and two transparent pixels."""
    path = write_png(tmp_path / "src.png", [
        [(0, 0, 0, 255), (255, 255, 255, 255)],
        [(12, 34, 56, 0), (255, 255, 255, 0)],
    ])
    return path.read_bytes()
