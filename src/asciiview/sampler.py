from PIL import Image

from asciiview.engine import CellGrid
from asciiview.mapping import average_levels, glyph_indices, gray_levels, to_rgba16
from asciiview.ramp import GlyphRamp


class RampEngine:
    """Rendering engine that picks one ramp glyph per pixel by luminance."""

    def __init__(self, ramp: GlyphRamp):
        self.ramp = ramp

    def render(self, image: Image.Image) -> CellGrid:
        levels = gray_levels(to_rgba16(image))
        chars = self.ramp.lookup_grid(glyph_indices(levels, len(self.ramp)))
        return CellGrid(chars=chars, colours=None)


class ColourRampEngine(RampEngine):
    """Picks glyphs by channel average and keeps each pixel's 8-bit colour."""

    def render(self, image: Image.Image) -> CellGrid:
        levels, colours = average_levels(to_rgba16(image))
        chars = self.ramp.lookup_grid(glyph_indices(levels, len(self.ramp)))
        return CellGrid(chars=chars, colours=colours)
