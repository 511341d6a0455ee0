from dataclasses import dataclass

import numpy as np

from asciiview.charsets import DEFAULT_RAMP


@dataclass(frozen=True)
class GlyphRamp:
    """Ordered glyph palette, index 0 is the lightest glyph."""

    glyphs: str = DEFAULT_RAMP

    def __post_init__(self):
        if len(self.glyphs) < 2:
            raise ValueError(f"Glyph ramp needs at least 2 glyphs, got {len(self.glyphs)}")

    def __len__(self) -> int:
        return len(self.glyphs)

    def glyph(self, index: int) -> str:
        return self.glyphs[index]

    def lookup_grid(self, indices: np.ndarray) -> list[str]:
        """Turn a (rows, cols) index grid into one string per row."""
        table = np.array(list(self.glyphs))
        return ["".join(row) for row in table[indices]]
