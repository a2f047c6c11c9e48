# pipeline/make_background.py
from pathlib import Path
from typing import Union
import logging

from ..models.image import Image
from ..services.background_service import BackgroundService
from ..services.color_service import ColorService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

BACKGROUND_FILENAME = "background.png"


def make_background(
    dimension: str,
    background_hex: str,
    cache_dir: Union[str, Path, None] = None,
    *,
    background_service: BackgroundService = BackgroundService(),
    color_service: ColorService = ColorService(),
    image_service: ImageService = ImageService(),
) -> Image:
    """Solid *background_hex* canvas of size "<w>x<h>", optionally cached as background.png."""
    dim = background_service.parse_dimension(dimension)
    color = color_service.parse_hex(background_hex)

    background = background_service.make_background(dim, color)

    if cache_dir is not None:
        background = image_service.save_as(background, Path(cache_dir) / BACKGROUND_FILENAME)
        logger.info(f"Created {dim} background -> {background.path}")
    return background
