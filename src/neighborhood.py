from enum import Enum, IntEnum

import numpy as np

from upscale_errors import InvalidArgument

# Window offsets relative to the enclosing source pixel: one before, two after.
WINDOW_OFFSETS = np.arange(4) - 1


class Channel(IntEnum):
    """Colour channel of a PixelGrid. The value is the index along the last axis."""
    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3

    @classmethod
    def from_name(cls, name):
        """
        Maps a channel identifier to its Channel.
        Accepts the single letters r/g/b/a or the full names, in any case.
        """
        key = str(name).strip().lower()
        for channel in cls:
            if key in (channel.name.lower(), channel.name[0].lower()):
                return channel
        raise InvalidArgument("unknown channel identifier: {!r}".format(name))


class BorderMode(Enum):
    """How the fill pass treats pixels near the top and left border."""
    CLAMP_EDGE = "clamp"
    SKIP = "skip"


def _window(dest_coord, scale_factor, size):
    # Source indices of the 4-sample window, clamped to the nearest valid edge.
    return np.clip(dest_coord // scale_factor + WINDOW_OFFSETS, 0, size - 1)


def extract_neighborhood(source, scale_factor, dest_x, dest_y, channel):
    """
    Extracts the 4x4 source neighborhood for one destination pixel and channel.
    Args:
        source (np.ndarray): Source PixelGrid of shape (H, W, C).
        scale_factor (int): Integer upscaling factor.
        dest_x (int): Column of the destination pixel.
        dest_y (int): Row of the destination pixel.
        channel (Channel or int): Channel to sample.
    Returns:
        np.ndarray: A (4, 4) float64 array indexed [x_offset, y_offset], with
        element [1, 1] equal to source pixel (dest_x // s, dest_y // s).
        Out-of-range indices repeat the edge pixel (clamp-to-edge).
    """
    height, width, channels = source.shape
    channel = int(channel)
    if not 0 <= channel < channels:
        raise InvalidArgument("channel {} not present in a {}-channel grid".format(channel, channels))

    xs = _window(int(dest_x), scale_factor, width)
    ys = _window(int(dest_y), scale_factor, height)
    return source[ys[None, :], xs[:, None], channel].astype(np.float64)


def gather_neighborhoods(source, scale_factor, dest_xs, dest_ys):
    """
    Vectorized extract_neighborhood over a block of destination pixels.
    Args:
        source (np.ndarray): Source PixelGrid of shape (H, W, C).
        scale_factor (int): Integer upscaling factor.
        dest_xs (np.ndarray): 1D array of destination columns.
        dest_ys (np.ndarray): 1D array of destination rows.
    Returns:
        np.ndarray: float64 array of shape (len(dest_ys), len(dest_xs), C, 4, 4),
        the last two axes indexed [x_offset, y_offset] for every channel.
    """
    height, width = source.shape[:2]
    xs = _window(np.asarray(dest_xs)[:, None], scale_factor, width)   # (nx, 4)
    ys = _window(np.asarray(dest_ys)[:, None], scale_factor, height)  # (ny, 4)

    # block[j, i, a, b, c] = source[ys[j, b], xs[i, a], c]
    block = source[ys[:, None, None, :], xs[None, :, :, None]]
    return np.moveaxis(block, -1, 2).astype(np.float64)
