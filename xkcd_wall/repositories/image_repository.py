from pathlib import Path
from typing import BinaryIO, Callable, Union
import logging
import os
import shutil
import stat
import tempfile

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from ..errors import DecodeFailure, EncodeFailure, IOFailure
from ..models.image import Image

logger = logging.getLogger(__name__)

# Pillow modes that carry more than 8 bits per sample
_WIDE_GRAY_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


class ImageRepository:
    """
    Handles file I/O for Image entities.
    Everything that touches Pillow or the filesystem lives here.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def to_rgba8(pil_img: PILImage.Image) -> np.ndarray:
        """
        Convert any decoded Pillow image to an (H, W, 4) uint8 RGBA array.
        16-bit grayscale is reduced by dropping the low byte.
        """
        if pil_img.mode in _WIDE_GRAY_MODES:
            wide = np.asarray(pil_img).astype(np.int64)
            gray = (np.clip(wide, 0, 0xFFFF) >> 8).astype(np.uint8)
            alpha = np.full(gray.shape, 255, dtype=np.uint8)
            return np.dstack([gray, gray, gray, alpha])
        return np.array(pil_img.convert("RGBA"), dtype=np.uint8)

    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        try:
            with PILImage.open(path) as pil_img:
                pil_img.load()
                pixels = self.to_rgba8(pil_img)
        except FileNotFoundError as err:
            raise IOFailure(f"image not found: {path}") from err
        except (UnidentifiedImageError, OSError, ValueError) as err:
            raise DecodeFailure(f"could not decode {path}: {err}") from err

        logger.debug(f"Loaded {path} ({pixels.shape[1]}x{pixels.shape[0]})")
        return Image(pixels=pixels, path=path)

    @staticmethod
    def save(image: Image, fmt: str = "PNG") -> Path:
        """
        Encode *image* to image.path.
        Raises EncodeFailure if Pillow rejects the pixels and IOFailure for
        filesystem errors; the destination is left untouched in both cases.
        """
        if image.path is None:
            raise IOFailure("image has no destination path")
        dest = Path(image.path)
        pixels = np.ascontiguousarray(image.pixels, dtype=np.uint8)

        def _encode(fh: BinaryIO) -> None:
            try:
                PILImage.fromarray(pixels).save(fh, format=fmt)
            except (ValueError, KeyError, TypeError, OSError) as err:
                raise EncodeFailure(f"could not encode {dest}: {err}") from err

        atomic_write(dest, _encode)
        logger.debug(f"Saved {dest}")
        return dest

    @staticmethod
    def copy_file(src: Union[str, Path], dst: Union[str, Path]) -> Path:
        """Copy *src* to *dst*, synced to disk before returning."""
        src, dst = Path(src), Path(dst)
        try:
            fin = open(src, "rb")
        except OSError as err:
            raise IOFailure(f"could not open {src}: {err}") from err
        with fin:
            atomic_write(dst, lambda fout: shutil.copyfileobj(fin, fout))
        logger.debug(f"Copied {src} -> {dst}")
        return dst


def atomic_write(dest: Path, write: Callable[[BinaryIO], None]) -> None:
    """
    Run *write* against a temp file beside *dest*, fsync it and rename it
    over *dest*. A failure never leaves a partial file under the final name.

    Symlinks are followed, so the link's target is updated and the link
    survives. The result keeps the mode of the file it replaces, or gets
    the umask default (0o666 & ~umask) when *dest* is new.
    """
    dest = Path(os.path.realpath(dest))
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        mode = _target_mode(dest)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent)
    except OSError as err:
        raise IOFailure(f"could not prepare {dest}: {err}") from err

    done = False
    try:
        with os.fdopen(fd, "wb") as fh:
            write(fh)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, dest)
        done = True
    except IOFailure:
        raise
    except OSError as err:
        raise IOFailure(f"could not write {dest}: {err}") from err
    finally:
        if not done and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def _target_mode(dest: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(dest).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
