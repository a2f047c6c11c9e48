from pathlib import Path
from typing import Union
import json
import logging
import os
import shutil

from dotenv import load_dotenv

from ..errors import ConfigError
from ..models.wallpaper_config import WallpaperConfig

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_ASSET = Path(__file__).resolve().parent.parent / "assets" / "default.json"


def default_config_path() -> Path:
    """$XKCD_WALL_CONFIG, else ~/.config/xkcd-wall/config.json."""
    env_path = os.getenv("XKCD_WALL_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "xkcd-wall" / "config.json"


class ConfigRepository:
    """
    Loads config.json, writing the bundled default first if the file is missing.
    """

    def __init__(self, config_path: Union[str, Path] = None,
                 default_asset: Union[str, Path] = DEFAULT_CONFIG_ASSET):
        self.config_path = Path(config_path).expanduser() if config_path else default_config_path()
        self.default_asset = Path(default_asset)

    def bootstrap(self) -> bool:
        """Copy the default config into place. Returns True if a file was written."""
        if self.config_path.exists():
            return False
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.default_asset, self.config_path)
        except OSError as err:
            raise ConfigError(f"default config not writable at {self.config_path}: {err}") from err
        logger.info(f"Wrote default configuration to {self.config_path}")
        return True

    def load(self) -> WallpaperConfig:
        self.bootstrap()
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as err:
            raise ConfigError(f"malformed json in {self.config_path}: {err}") from err
        except OSError as err:
            raise ConfigError(f"{self.config_path}: {err}") from err

        config = self.from_dict(data)
        logger.debug(f"Loaded configuration from {self.config_path}")
        return config

    @staticmethod
    def from_dict(data: dict) -> WallpaperConfig:
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a JSON object")

        missing = [k for k in ("background-colors", "foreground-colors", "dimensions", "target", "cache")
                   if k not in data]
        if missing:
            raise ConfigError(f"missing configuration keys: {', '.join(missing)}")

        colors = {}
        for key in ("background-colors", "foreground-colors"):
            value = data[key]
            if not isinstance(value, list) or not value or not all(isinstance(c, str) for c in value):
                raise ConfigError(f"'{key}' must be a non-empty list of hex strings")
            colors[key] = list(value)

        for key in ("dimensions", "target", "cache"):
            if not isinstance(data[key], str) or not data[key]:
                raise ConfigError(f"'{key}' must be a non-empty string")

        return WallpaperConfig(
            background_colors=colors["background-colors"],
            foreground_colors=colors["foreground-colors"],
            dimensions=data["dimensions"],
            target=Path(data["target"]).expanduser(),
            cache=Path(data["cache"]).expanduser(),
        )
