"""Command-line entry point: upscale a fixed input image by an integer factor.

Usage example:
    bicubic-upscale 4 --input input-image.png --output output-image.png
"""
import argparse
import logging
import sys
import time

from upscale_errors import UpscaleError, UsageError, InvalidArgument
from grid_upscaler import UpscaleConfig, upscale
from image_io import load_pixel_grid, save_pixel_grid
from neighborhood import BorderMode

logger = logging.getLogger("upscale")

DEFAULT_INPUT = "input-image.png"
DEFAULT_OUTPUT = "output-image.png"


class _Parser(argparse.ArgumentParser):
    # argparse exits with status 2 on its own; route through UsageError instead.
    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = _Parser(
        prog="bicubic-upscale",
        description="Upscale an image by an integer factor with bicubic interpolation.",
    )
    parser.add_argument("scale_factor", help="Positive integer scale factor")
    parser.add_argument("--input", default=DEFAULT_INPUT,
                        help="Image to upscale (default: %(default)s)")
    parser.add_argument("--output", default=DEFAULT_OUTPUT,
                        help="Where to write the result; format follows the extension (default: %(default)s)")
    parser.add_argument("--border-mode", default=BorderMode.CLAMP_EDGE.value,
                        choices=[mode.value for mode in BorderMode],
                        help="clamp: interpolate every pixel with clamp-to-edge windows; "
                             "skip: leave the first two rows and columns at the fill value")
    parser.add_argument("--fill-value", type=int, default=0,
                        help="Background sample value for skipped pixels (default: %(default)s)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Threads used for the fill pass (default: %(default)s)")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def parse_scale_factor(text):
    try:
        value = int(text)
    except ValueError:
        raise InvalidArgument("scale factor must be a positive integer, got {!r}".format(text)) from None
    if value < 1:
        raise InvalidArgument("scale factor must be a positive integer, got {}".format(value))
    return value


def run(args):
    scale_factor = parse_scale_factor(args.scale_factor)
    config = UpscaleConfig(border_mode=BorderMode(args.border_mode),
                           fill_value=args.fill_value,
                           workers=args.workers)
    config.validate()

    start_time = time.time()
    source = load_pixel_grid(args.input)
    height, width, channels = source.shape
    logger.info("Input %s: %dx%d, %d channels", args.input, width, height, channels)
    logger.info("Scale factor: %d", scale_factor)

    def report(done, total):
        logger.debug("Filled band %d/%d", done, total)

    result = upscale(source, scale_factor, config=config, progress=report)
    save_pixel_grid(result, args.output)

    logger.info("Output %s: %dx%d", args.output, result.shape[1], result.shape[0])
    logger.info("Processing time: %.4f s.", time.time() - start_time)


def main(argv=None):
    """Runs the CLI and returns the process exit status (0 on success, 1 on any failure)."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print("error: {}".format(e), file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO,
                        format="%(levelname)s:%(name)s: %(message)s")
    try:
        run(args)
    except UpscaleError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
