from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class WallpaperConfig:
    """
    Settings read from config.json.
    Colors stay as hex strings here; they are parsed when the palette is picked.
    """
    background_colors: List[str] = field(default_factory=list)
    foreground_colors: List[str] = field(default_factory=list)
    dimensions: str = "1920x1080"
    target: Path = Path("wallpaper.png")
    cache: Path = Path(".cache")
