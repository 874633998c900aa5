import sys
import tomllib
from typing import Dict, Iterable, Iterator, TextIO

from .assets import render_template
from .color import Color, format_color, parse_color
from .errors import (
    InvalidColor, InvalidValueType, MissingPaletteTable, PaletteSyntaxError
)

TEMPLATE = "palette_template.toml"


class Palette:
    """A mapping from colors to the integer codes written into a COE file."""

    def __init__(self, codes: Dict[Color, int]):
        self.codes = dict(codes)

    @classmethod
    def from_pixels(cls, pixels: Iterable[Color]):
        """Build a palette from the distinct colors in a pixel stream.

        Codes count up from 0 in whatever order the set of colors iterates
        in. That order is neither the order colors first appear in the image
        nor guaranteed to be the same between runs, so callers that need
        particular codes should edit the palette file afterwards.
        """
        colors = set(pixels)
        return cls({color: i for i, color in enumerate(colors)})

    @classmethod
    def from_bytes(cls, data: bytes):
        "Read a palette from the raw contents of a UTF-8 palette file"
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PaletteSyntaxError(e) from e
        return cls.from_text(text)

    @classmethod
    def from_text(cls, text: str):
        """Read a palette from the TOML text of a palette file.

        The file must contain a [palette] table whose keys are "#RRGGBBAA"
        colors and whose values are non-negative integers. The first bad
        entry aborts the whole parse.

        Raises PaletteSyntaxError, MissingPaletteTable, InvalidColor or
        InvalidValueType.
        """
        try:
            doc = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise PaletteSyntaxError(e) from e

        table = doc.get("palette")
        if not isinstance(table, dict):
            raise MissingPaletteTable()

        codes = {}
        for key, value in table.items():
            color = parse_color(key)
            if color is None:
                raise InvalidColor(key)
            # bool is a subclass of int, but `true` isn't a code
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidValueType(value)
            if value < 0:
                raise InvalidValueType(value)
            if color in codes:
                # "#FFFFFFFF" and "#ffffffff" are different TOML keys
                print(
                    f"Warning: color {format_color(color)} listed more than "
                    f"once; using code {value}",
                    file=sys.stderr
                )
            codes[color] = value
        return cls(codes)

    def __len__(self):
        return len(self.codes)

    def __getitem__(self, color: Color) -> int:
        return self.codes[color]

    def get(self, color: Color):
        return self.codes.get(color)

    def lines(self) -> Iterator[str]:
        """Yield the palette file's entries, one per color"""
        for color, code in self.codes.items():
            yield f'"{format_color(color)}" = {code}\n'


def write_palette(palette: Palette, f: TextIO):
    """Write a complete palette file: the header, then one entry per color"""
    f.write(render_template(TEMPLATE))
    for line in palette.lines():
        f.write(line)
