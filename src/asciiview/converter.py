from pathlib import Path

from PIL import Image

from asciiview.engine import CellGrid, Engine
from asciiview.ramp import GlyphRamp
from asciiview.sampler import ColourRampEngine, RampEngine
from asciiview.scaling import DEFAULT_FILTER, resize_image

RESET = "\033[0m"


def _format_plain(grid: CellGrid) -> str:
    return "".join(f"{line}\n" for line in grid.chars)


def _format_colour(grid: CellGrid) -> str:
    """Wrap each character in an ANSI truecolor foreground escape, resetting at every line end."""
    out = []
    for r, line in enumerate(grid.chars):
        parts = []
        for c, char in enumerate(line):
            fr, fg, fb = (int(v) for v in grid.colours[r, c])
            parts.append(f"\033[38;2;{fr};{fg};{fb}m{char}")
        parts.append(RESET + "\n")
        out.append("".join(parts))
    return "".join(out)


def render(image: Image.Image, engine: Engine) -> str:
    grid = engine.render(image)
    if grid.colours is not None:
        return _format_colour(grid)
    return _format_plain(grid)


def image_to_ascii(
    image: Image.Image | str | Path,
    ramp: GlyphRamp | None = None,
    size: tuple[int, int] | None = None,
    colour: bool = False,
    resample: str = DEFAULT_FILTER,
) -> str:
    if not isinstance(image, Image.Image):
        with Image.open(image) as opened:
            image = opened.copy()

    if size is not None:
        image = resize_image(image, *size, resample=resample)

    ramp = ramp or GlyphRamp()
    engine = ColourRampEngine(ramp) if colour else RampEngine(ramp)
    return render(image, engine)
