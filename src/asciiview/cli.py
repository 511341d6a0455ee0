import argparse
import logging
import sys

from PIL import Image, UnidentifiedImageError

from asciiview.charsets import DEFAULT_RAMP
from asciiview.converter import image_to_ascii
from asciiview.ramp import GlyphRamp
from asciiview.remote import DEFAULT_CACHE_DIR, FetchError, fetch_remote
from asciiview.scaling import DEFAULT_FILTER, RESAMPLE_FILTERS, autoscale
from asciiview.terminal import get_terminal_size

logger = logging.getLogger(__name__)


def is_url(path: str) -> bool:
    return path.startswith(("http://", "https://"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiview", description="Render an image as ASCII art in the terminal")
    parser.add_argument("image", nargs="?", help="Path or URL of the input image")
    parser.add_argument("-c", "--colour", action="store_true", default=False, help="Enable truecolor ANSI output")
    parser.add_argument(
        "-s",
        "--scale",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Scale the output to fit the terminal (default: on)",
    )
    parser.add_argument(
        "-r", "--remote", action="store_true", default=False, help="Allow the image to be fetched from a URL"
    )
    parser.add_argument(
        "-f",
        "--filter",
        default=DEFAULT_FILTER,
        choices=sorted(RESAMPLE_FILTERS),
        help=f"Resampling filter used when scaling (default: {DEFAULT_FILTER})",
    )
    parser.add_argument("--ramp", default=DEFAULT_RAMP, help="Glyphs to use, lightest first")
    parser.add_argument(
        "--cache-dir", default=DEFAULT_CACHE_DIR, help=f"Where fetched images are stored (default: {DEFAULT_CACHE_DIR})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.image:
        parser.print_usage(sys.stderr)
        return 2

    try:
        ramp = GlyphRamp(args.ramp)
    except ValueError as e:
        parser.error(str(e))

    image_path = args.image
    if is_url(image_path):
        if not args.remote:
            logger.error("To use a remote resource, please use the `-r` flag")
            return 1
        try:
            image_path = fetch_remote(image_path, directory=args.cache_dir)
        except (FetchError, OSError) as e:
            logger.error("%s", e)
            return 1

    try:
        with Image.open(image_path) as opened:
            image = opened.copy()
    except FileNotFoundError as e:
        logger.error("Failed to open: %s", e)
        return 1
    except (UnidentifiedImageError, OSError) as e:
        logger.error("Failed to decode: %s", e)
        return 1

    size = None
    if args.scale:
        term_width, term_height = get_terminal_size()
        size = autoscale(image.width, image.height, term_width, term_height)
        logger.debug("terminal %dx%d, output %dx%d", term_width, term_height, *size)

    sys.stdout.write(image_to_ascii(image, ramp, size=size, colour=args.colour, resample=args.filter))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
