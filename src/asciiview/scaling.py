import logging

from PIL import Image

logger = logging.getLogger(__name__)

# Keep the prompt line visible below the picture
HEIGHT_MARGIN = 0.95
# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 2.5

RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}
DEFAULT_FILTER = "bicubic"


def autoscale(img_width: int, img_height: int, term_width: int, term_height: int) -> tuple[int, int]:
    """Fit an image into a terminal viewport, returning (columns, rows)."""
    if img_width <= 0 or img_height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {img_width}x{img_height}")

    target_height = int(term_height * HEIGHT_MARGIN)
    ratio = target_height / img_height
    new_width = int(img_width * ratio * CELL_ASPECT)

    if new_width > term_width:
        logger.debug("width %d overshoots terminal width %d, scaling by width", new_width, term_width)
        ratio = term_width / img_width
        target_height = int(img_height * ratio)
        new_width = term_width

    return new_width, target_height


def resize_image(image: Image.Image, width: int, height: int, resample: str = DEFAULT_FILTER) -> Image.Image:
    """Resize to exactly (width, height).

    A zero dimension is derived from the other one so the aspect ratio is kept;
    if both are zero the image is returned as is.
    """
    if width == 0 and height == 0:
        return image
    if width == 0:
        width = max(1, round(image.width * height / image.height))
    elif height == 0:
        height = max(1, round(image.height * width / image.width))
    logger.debug("resizing %dx%d -> %dx%d (%s)", image.width, image.height, width, height, resample)
    return image.resize((width, height), RESAMPLE_FILTERS[resample])
