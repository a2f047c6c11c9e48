"""xkcd-wall: turn an xkcd comic into a two-color desktop wallpaper."""

__version__ = "1.0.0"
