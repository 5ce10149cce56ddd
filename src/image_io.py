"""Pillow-backed decode/encode of PixelGrids.

The upscaler only ever sees NumPy uint8 arrays of shape (H, W, 3) or (H, W, 4);
these helpers convert between files and such arrays.
"""
import logging

import numpy as np
from PIL import Image

from upscale_errors import DecodeError, EncodeError
from grid_upscaler import validate_pixel_grid

logger = logging.getLogger(__name__)


def _target_mode(img):
    # Keep alpha when the file carries it, everything else becomes RGB.
    if "A" in img.getbands() or "transparency" in img.info:
        return "RGBA"
    return "RGB"


def load_pixel_grid(path):
    """
    Loads an image file into a PixelGrid.
    Args:
        path (str or os.PathLike): Image file in any format Pillow can decode.
    Returns:
        np.ndarray: uint8 array of shape (H, W, 3), or (H, W, 4) if the image
        has an alpha channel.
    Raises:
        DecodeError: The file is missing, unreadable, corrupt or unsupported.
    """
    try:
        with Image.open(path) as img:
            img = img.convert(_target_mode(img))
            grid = np.array(img, dtype=np.uint8)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError("cannot decode {}: {}".format(path, e)) from e
    logger.debug("Decoded %s as %s", path, grid.shape)
    return grid


def save_pixel_grid(grid, path):
    """
    Writes a PixelGrid to an image file; the format follows the extension.
    Raises:
        EncodeError: Unknown extension, unwritable path, or a channel layout
                     the format cannot store (e.g. RGBA as JPEG).
    """
    validate_pixel_grid(grid)
    try:
        Image.fromarray(grid).save(path)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError("cannot encode {}: {}".format(path, e)) from e
    logger.debug("Encoded %s", path)
