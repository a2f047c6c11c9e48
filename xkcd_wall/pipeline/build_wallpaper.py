"""
Wallpaper Pipeline
fetch -> colorize -> background -> composite -> copy to target.
Images travel in memory between stages; each stage also leaves its result
in the cache directory under a fixed name, overwritten on every run.
"""

from pathlib import Path
from typing import Callable, Optional
import logging
import random

from ..errors import WallpaperError
from ..models.wallpaper_config import WallpaperConfig
from ..services.comic_service import ComicService
from ..services.image_service import ImageService
from ..services.palette_service import PaletteService
from .colorize import colorize
from .composite_center import composite_center
from .make_background import make_background

logger = logging.getLogger(__name__)


def _run(stage: str, fn: Callable, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except WallpaperError as err:
        if err.stage is None:
            err.stage = stage
        raise


def build_wallpaper(
    config: WallpaperConfig,
    kind: str = "today",
    *,
    rng: Optional[random.Random] = None,
    comic_service: Optional[ComicService] = None,
    image_service: ImageService = ImageService(),
) -> Path:
    """
    Produce the wallpaper described by *config* and return config.target.

    Raises:
        WallpaperError: the first failure, unchanged except that its
            ``stage`` names the step that raised it. Nothing after that
            step runs and the target is left untouched.
    """
    rng = rng or random.Random()
    comic_service = comic_service or _run("fetch comic", ComicService, rng=rng)
    cache = Path(config.cache)

    comic_path = _run("fetch comic", comic_service.fetch, kind, cache)

    bg_hex, fg_hex = PaletteService(rng).pick(config)
    logger.info(f"Palette: background={bg_hex} foreground={fg_hex}")

    colored = _run("colorize comic", colorize, comic_path, bg_hex, fg_hex, cache,
                   image_service=image_service)
    background = _run("create background", make_background, config.dimensions, bg_hex, cache,
                      image_service=image_service)
    final = _run("create final image", composite_center, colored, background, cache,
                 image_service=image_service)
    target = _run("copy image to target", image_service.copy_file, final.path, config.target)

    logger.info(f"Wallpaper written to {target}")
    return target
