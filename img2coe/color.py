import re
from typing import NamedTuple, Optional

COLOR_PATTERN = re.compile(r"#([0-9A-Fa-f]{8})")


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int


def parse_color(text: str) -> Optional[Color]:
    """Parse a "#RRGGBBAA" string into a Color.

    Returns None if the string isn't exactly "#" followed by 8 hex digits.
    """
    match = COLOR_PATTERN.fullmatch(text)
    if not match:
        return None
    hex_str = match[1]
    components = (hex_str[i:i + 2] for i in range(0, 8, 2))
    return Color(*(int(x, base=16) for x in components))


def format_color(color: Color) -> str:
    return "#" + "".join(f"{x:02x}" for x in color)
