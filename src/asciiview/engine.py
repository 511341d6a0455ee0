from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np
from PIL import Image


@dataclass
class CellGrid:
    chars: list[str]  # one string per pixel row
    colours: np.ndarray | None  # (rows, cols, 3) uint8 foreground, or None


class Engine(Protocol):
    def render(self, image: Image.Image) -> CellGrid:
        """Convert an image to a grid of glyphs with optional colours."""
        ...
