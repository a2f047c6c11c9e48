"""
Error hierarchy for the wallpaper pipeline.

Every stage raises one of these and lets it propagate; the CLI is the only
place that turns them into user-facing messages.
"""


class WallpaperError(Exception):
    """Base class for everything the pipeline raises on purpose."""

    # set by the pipeline driver, e.g. "colorize comic"
    stage = None


class InvalidColorFormat(WallpaperError, ValueError):
    pass


class InvalidDimension(WallpaperError, ValueError):
    pass


class InvalidComicSelection(WallpaperError, ValueError):
    pass


class ForegroundTooLarge(WallpaperError, ValueError):
    pass


class DecodeFailure(WallpaperError):
    pass


class IOFailure(WallpaperError, OSError):
    pass


class EncodeFailure(IOFailure):
    pass


class FetchFailure(WallpaperError):
    pass


class ConfigError(WallpaperError):
    pass
