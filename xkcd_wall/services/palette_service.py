from typing import Tuple
import random

from ..models.wallpaper_config import WallpaperConfig


class PaletteService:
    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()

    def pick(self, config: WallpaperConfig) -> Tuple[str, str]:
        """Return (background_hex, foreground_hex), each drawn uniformly from its list."""
        bg = self.rng.choice(config.background_colors)
        fg = self.rng.choice(config.foreground_colors)
        return bg, fg
