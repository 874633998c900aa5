import argparse
import pathlib
import sys

from . import __version__
from .coe import write_coe
from .errors import Img2CoeError
from .image import open_image, pixels
from .palette import Palette, write_palette


def main(argv=None):
    args = parse_args(argv)
    try:
        args.func(args)
    except (Img2CoeError, OSError) as e:
        print(f"img2coe: error: {e}", file=sys.stderr)
        sys.exit(1)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="img2coe",
        description="Image to COE conversion tool"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser(
        "convert", help="write a .coe file mapping each pixel to a code"
    )
    convert.add_argument(
        "image", type=pathlib.Path, metavar="IMAGE",
        help="the image to convert"
    )
    convert.add_argument(
        "-p", "--palette", type=pathlib.Path, required=True,
        help="the palette to use"
    )
    convert.add_argument(
        "-o", "--output", type=pathlib.Path,
        help="where to write the COE file (default: IMAGE with .coe suffix)"
    )
    convert.set_defaults(func=convert_command)

    palette = subparsers.add_parser(
        "palette", help="write a .palette.toml file listing the image's colors"
    )
    palette.add_argument(
        "image", type=pathlib.Path, metavar="IMAGE",
        help="the image to extract the palette from"
    )
    palette.add_argument(
        "-o", "--output", type=pathlib.Path,
        help="""
            where to write the palette (default: IMAGE with .palette.toml
            suffix)
            """
    )
    palette.set_defaults(func=palette_command)

    return parser.parse_args(argv)


def palette_command(args):
    im = open_image(args.image)
    palette = Palette.from_pixels(pixels(im))

    output = args.output or args.image.with_suffix(".palette.toml")
    with open(output, "w", encoding="utf-8") as f:
        write_palette(palette, f)


def convert_command(args):
    # Validate the palette before touching the output file
    with open(args.palette, "rb") as f:
        palette = Palette.from_bytes(f.read())
    im = open_image(args.image)

    output = args.output or args.image.with_suffix(".coe")
    with open(output, "w", encoding="utf-8") as f:
        write_coe(pixels(im), palette, f)


if __name__ == "__main__":
    main()
