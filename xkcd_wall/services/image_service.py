from pathlib import Path
from typing import Union

import numpy as np

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No pixel math here."""

    def __init__(self, image_repository: ImageRepository = None):
        self.image_repository = image_repository or ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Decode a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image) -> Path:
        return self.image_repository.save(image)

    def save_as(self, image: Image, path: Union[str, Path]) -> Image:
        """Write *image* to *path* and return a copy that remembers where it lives."""
        stored = self.create_image(image.pixels, path)
        self.image_repository.save(stored)
        return stored

    def copy_file(self, src: Union[str, Path], dst: Union[str, Path]) -> Path:
        return self.image_repository.copy_file(src, dst)
