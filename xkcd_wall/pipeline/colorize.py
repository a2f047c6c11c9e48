# pipeline/colorize.py
from pathlib import Path
from typing import Union
import logging

from ..models.image import Image
from ..services.color_service import ColorService
from ..services.duotone_service import DuotoneService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

COLORED_FILENAME = "colored.png"


def colorize(
    source: Union[Image, str, Path],
    background_hex: str,
    foreground_hex: str,
    cache_dir: Union[str, Path, None] = None,
    *,
    color_service: ColorService = ColorService(),
    duotone_service: DuotoneService = DuotoneService(),
    image_service: ImageService = ImageService(),
) -> Image:
    """
    Recolor *source* (an Image or a path to decode) into the two-color palette.
    Colors are validated before the source is read. If *cache_dir* is given
    the result is also written to <cache_dir>/colored.png.
    """
    bg = color_service.parse_hex(background_hex)
    fg = color_service.parse_hex(foreground_hex)

    img = source if isinstance(source, Image) else image_service.load(source)
    colored = duotone_service.recolor(img, bg, fg)

    if cache_dir is not None:
        colored = image_service.save_as(colored, Path(cache_dir) / COLORED_FILENAME)
        logger.info(f"Colorized comic -> {colored.path}")
    return colored
