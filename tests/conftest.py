import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Save an RGBA image built from rows of (r, g, b, a) tuples"""
    def make(rows, name="image.png"):
        height = len(rows)
        width = len(rows[0])
        im = Image.new("RGBA", (width, height))
        im.putdata([pixel for row in rows for pixel in row])
        path = tmp_path / name
        im.save(path)
        return path
    return make
