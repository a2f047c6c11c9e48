from pathlib import Path
from typing import Union
import logging
import os

import requests
from dotenv import load_dotenv

from ..errors import ConfigError, FetchFailure
from ..models.comic import Comic
from .image_repository import atomic_write

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ComicRepository:
    """
    Thin HTTP access layer for the xkcd JSON API.
    No image decoding here; bytes go straight to disk.
    """

    def __init__(self, session: requests.Session = None, base_url: str = None, timeout: float = None):
        self.session = session or requests.Session()
        self.base_url = (base_url or os.getenv("XKCD_WALL_API_BASE", "https://xkcd.com")).rstrip("/")
        self.timeout = timeout if timeout is not None else _env_timeout()

    def _get(self, url: str) -> requests.Response:
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as err:
            raise FetchFailure(f"request to {url} failed: {err}") from err
        if resp.status_code != 200:
            raise FetchFailure(f"http error: {resp.status_code} {resp.reason} ({url})")
        return resp

    def _get_comic(self, url: str) -> Comic:
        resp = self._get(url)
        try:
            return Comic.from_json(resp.json())
        except (ValueError, TypeError, AttributeError) as err:
            raise FetchFailure(f"invalid JSON from {url}: {err}") from err

    def latest(self) -> Comic:
        return self._get_comic(f"{self.base_url}/info.0.json")

    def by_number(self, num: int) -> Comic:
        return self._get_comic(f"{self.base_url}/{num}/info.0.json")

    def download(self, url: str, path: Union[str, Path]) -> Path:
        path = Path(path)
        resp = self._get(url)
        logger.debug(f"Downloaded {len(resp.content)} bytes from {url}")
        atomic_write(path, lambda fh: fh.write(resp.content))
        return path


def _env_timeout() -> float:
    raw = os.getenv("XKCD_WALL_HTTP_TIMEOUT", "30")
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"XKCD_WALL_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if not timeout > 0:
        raise ConfigError(f"XKCD_WALL_HTTP_TIMEOUT must be positive, got {raw!r}")
    return timeout
