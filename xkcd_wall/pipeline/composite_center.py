# pipeline/composite_center.py
from pathlib import Path
from typing import Union
import logging

from ..models.image import Image
from ..services.compositing_service import CompositingService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

FINAL_FILENAME = "final.png"


def composite_center(
    foreground: Union[Image, str, Path],
    background: Union[Image, str, Path],
    cache_dir: Union[str, Path, None] = None,
    *,
    compositing_service: CompositingService = CompositingService(),
    image_service: ImageService = ImageService(),
) -> Image:
    """
    Center *foreground* on *background*. Either may be an Image or a path.
    Raises ForegroundTooLarge instead of clipping.
    """
    bg = background if isinstance(background, Image) else image_service.load(background)
    fg = foreground if isinstance(foreground, Image) else image_service.load(foreground)

    final = compositing_service.composite_center(fg, bg)

    if cache_dir is not None:
        final = image_service.save_as(final, Path(cache_dir) / FINAL_FILENAME)
        logger.info(f"Composited final image -> {final.path}")
    return final
