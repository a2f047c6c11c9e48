from pathlib import Path
from typing import Union
import logging
import random

from ..errors import FetchFailure, InvalidComicSelection
from ..repositories.comic_repository import ComicRepository

logger = logging.getLogger(__name__)

COMIC_FILENAME = "comic.png"


class ComicService:
    """
    Picks a comic ("today", "random" or a number) and downloads its image
    into the cache directory.
    """

    def __init__(self, comic_repository: ComicRepository = None, rng: random.Random = None):
        self.comic_repository = comic_repository or ComicRepository()
        self.rng = rng or random.Random()

    def resolve_comic_number(self, kind: str) -> int:
        if kind == "today":
            return self.comic_repository.latest().num
        if kind == "random":
            latest = self.comic_repository.latest().num
            if latest < 1:
                raise FetchFailure(f"latest comic number is {latest}")
            return self.rng.randint(1, latest)

        if not isinstance(kind, str) or not kind.isdecimal() or int(kind) <= 0:
            raise InvalidComicSelection(f"invalid comic type: {kind}")
        return int(kind)

    def fetch(self, kind: str, cache_dir: Union[str, Path]) -> Path:
        """Download the selected comic to <cache_dir>/comic.png and return that path."""
        cache_dir = Path(cache_dir)
        num = self.resolve_comic_number(kind)

        comic = self.comic_repository.by_number(num)
        if not comic.img:
            raise FetchFailure(f"no image found for comic {num}")

        logger.info(f"Fetching comic #{num} {comic.title!r}")
        return self.comic_repository.download(comic.img, cache_dir / COMIC_FILENAME)
