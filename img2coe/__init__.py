"""Convert images into COE memory-initialization files via color palettes."""
__version__ = "0.1.0"
