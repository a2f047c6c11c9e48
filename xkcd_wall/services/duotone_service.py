import logging

import numpy as np

from ..errors import DecodeFailure
from ..models.color import Color
from ..models.image import Image

logger = logging.getLogger(__name__)

GAMMA = 1.8

# ITU-R 601 luma weights, per mille
_LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)


class DuotoneService:
    """
    Two-color recoloring driven by perceptual luminance.
    Works only with Image objects; no I/O here.
    """

    @staticmethod
    def to_8bit(pixels: np.ndarray) -> np.ndarray:
        """Reduce wider sample depths to 8 bits by keeping the high byte."""
        if pixels.dtype == np.uint8:
            return pixels
        if pixels.dtype == np.uint16:
            return (pixels >> 8).astype(np.uint8)
        raise DecodeFailure(f"unsupported pixel dtype: {pixels.dtype}")

    @staticmethod
    def luminance(rgb: np.ndarray) -> np.ndarray:
        """
        (H, W, 3) uint8 -> (H, W) float64 in [0, 1].
        Exactly 0.0 for black and 1.0 for white.
        """
        weighted = rgb.astype(np.int64) @ _LUMA_WEIGHTS
        return weighted / 255000.0

    def recolor(self, image: Image, background: Color, foreground: Color) -> Image:
        """
        Map every pixel to a blend of *foreground* (dark) and *background* (light).

        - alpha == 0        -> background, whatever the RGB payload is
        - otherwise         -> fg + (bg - fg) * L**GAMMA, truncated
        Partially transparent pixels are blended as if opaque; the output is
        always fully opaque.
        """
        pixels = self.to_8bit(np.asarray(image.pixels))
        rgb, alpha = pixels[..., :3], pixels[..., 3]

        weight = self.luminance(rgb) ** GAMMA

        fg = np.array(foreground.rgb(), dtype=np.float64)
        bg = np.array(background.rgb(), dtype=np.float64)
        mixed = fg + (bg - fg) * weight[..., None]

        out = np.empty(pixels.shape[:2] + (4,), dtype=np.uint8)
        out[..., :3] = np.clip(np.trunc(mixed), 0, 255).astype(np.uint8)
        out[..., 3] = 255
        out[alpha == 0] = background.rgba()

        logger.debug(f"Recolored {image.width}x{image.height} image "
                     f"(fg={foreground.to_hex()}, bg={background.to_hex()})")
        return Image(pixels=out)
