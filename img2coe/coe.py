from typing import Iterable, Iterator, TextIO

from .assets import render_template
from .color import Color
from .errors import UnmappedColor
from .palette import Palette

TEMPLATE = "coe_template.coe"


def encode(pixels: Iterable[Color], palette: Palette) -> Iterator[str]:
    """Yield each pixel's palette code as a lowercase hex token.

    Raises UnmappedColor at the first pixel whose color isn't in the palette.
    """
    for color in pixels:
        code = palette.get(color)
        if code is None:
            raise UnmappedColor(color)
        yield f"{code:x}"


def write_coe(pixels: Iterable[Color], palette: Palette, f: TextIO):
    """Write a COE file: the header, a code per pixel, then ";".

    Tokens are written as they are encoded, so if a pixel can't be mapped
    the output written up to that point stays in f.
    """
    f.write(render_template(TEMPLATE))
    for token in encode(pixels, palette):
        f.write(token + " ")
    f.write(";")
