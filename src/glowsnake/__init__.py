"""Grid snake on a toroidal board, drawn with a glow."""

__version__ = "0.1.0"
