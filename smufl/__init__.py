"""SMuFL (Standard Music Font Layout) glyph names and code points."""

from smufl.glyph import Glyph

__all__ = ["Glyph"]
