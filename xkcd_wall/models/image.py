from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: RGBA pixels (+ optional path for bookkeeping).
    No Pillow logic outside the repository layer.
    """
    pixels: np.ndarray  # Shape (H, W, 4), dtype uint8, RGBA order, straight alpha.
    path: Path | None = None  # Where the image was read from / will be written to.

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])
