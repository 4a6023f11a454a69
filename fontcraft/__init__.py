"""Font handles, family names, hinting options, glyph canvases and 2D geometry."""

__version__ = "0.14.2"