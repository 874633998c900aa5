from .color import format_color


class Img2CoeError(ValueError):
    "Base class for every error the conversion pipeline reports"


class DecodeError(Img2CoeError):
    def __init__(self, path, reason):
        super().__init__(f"could not decode image {path}: {reason}")
        self.path = path


class PaletteSyntaxError(Img2CoeError):
    def __init__(self, reason):
        super().__init__(f"palette file is not valid TOML: {reason}")


class MissingPaletteTable(Img2CoeError):
    def __init__(self):
        super().__init__("expected to find 'palette' table on palette file")


class InvalidColor(Img2CoeError):
    def __init__(self, key):
        super().__init__(f"invalid color: {key}")
        self.key = key


class InvalidValueType(Img2CoeError):
    def __init__(self, value):
        super().__init__(f"value must be a non-negative integer: {value!r}")
        self.value = value


class UnmappedColor(Img2CoeError):
    def __init__(self, color):
        super().__init__(
            "could not continue: palette has no mapping for color "
            f'"{format_color(color)}"'
        )
        self.color = color
