from typing import Iterator

import numpy as np
from PIL import Image, UnidentifiedImageError

from .color import Color
from .errors import DecodeError


def open_image(path) -> Image.Image:
    """Decode an image file into RGBA.

    Raises DecodeError if Pillow can't make sense of the file. Failing to
    open the file at all is left as an OSError.
    """
    try:
        im = Image.open(path)
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(path, e) from e
    with im:
        try:
            im.load()
        except (OSError, SyntaxError, Image.DecompressionBombError) as e:
            # Truncated or corrupt image data
            raise DecodeError(path, e) from e
        return im.convert("RGBA")


def pixels(im: Image.Image) -> Iterator[Color]:
    """Yield each pixel's color, left to right, then top to bottom"""
    if im.mode != "RGBA":
        im = im.convert("RGBA")
    data = np.asarray(im, dtype=np.uint8)
    for r, g, b, a in data.reshape(-1, 4).tolist():
        yield Color(r, g, b, a)
