from typing import Tuple
import logging

import numpy as np

from ..errors import ForegroundTooLarge
from ..models.image import Image

logger = logging.getLogger(__name__)


class CompositingService:
    """
    Centers one image over another with source-over alpha blending.
    Returns a new Image sized like the background; inputs are never modified.
    """

    @staticmethod
    def center_offset(fg: Image, bg: Image) -> Tuple[int, int]:
        """
        (x, y) of the foreground's top-left corner inside the background.
        Odd leftovers put the extra pixel on the right / bottom.
        """
        if fg.width > bg.width or fg.height > bg.height:
            raise ForegroundTooLarge(
                f"foreground larger than background "
                f"({fg.width}x{fg.height} > {bg.width}x{bg.height})"
            )
        return (bg.width - fg.width) // 2, (bg.height - fg.height) // 2

    @staticmethod
    def _over(fg: np.ndarray, bg: np.ndarray) -> np.ndarray:
        """
        Porter-Duff source-over on straight (non-premultiplied) RGBA uint8.
        """
        fa = fg[..., 3:4].astype(np.float64) / 255.0
        ba = bg[..., 3:4].astype(np.float64) / 255.0
        out_a = fa + ba * (1.0 - fa)

        premul = fg[..., :3] * fa + bg[..., :3] * ba * (1.0 - fa)
        rgb = np.divide(premul, out_a, out=np.zeros_like(premul), where=out_a > 0)

        out = np.empty(fg.shape, dtype=np.uint8)
        out[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
        out[..., 3] = np.clip(np.rint(out_a[..., 0] * 255.0), 0, 255).astype(np.uint8)
        return out

    def composite_center(self, foreground: Image, background: Image) -> Image:
        off_x, off_y = self.center_offset(foreground, background)

        out = np.array(background.pixels, dtype=np.uint8, copy=True)
        region = (slice(off_y, off_y + foreground.height), slice(off_x, off_x + foreground.width))
        out[region] = self._over(np.asarray(foreground.pixels), out[region])

        logger.debug(f"Composited {foreground.width}x{foreground.height} onto "
                     f"{background.width}x{background.height} at ({off_x}, {off_y})")
        return Image(pixels=out)
