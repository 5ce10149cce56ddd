import logging
import numbers
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from bicubic_kernel import bicubic_interpolate
from upscale_errors import InvalidArgument, UpscaleCancelled
from neighborhood import BorderMode, gather_neighborhoods

logger = logging.getLogger(__name__)

# Rows and columns below this destination index are left at the background
# value in BorderMode.SKIP.
SKIP_BORDER = 2


@dataclass
class UpscaleConfig:
    """Settings for one upscale run.

    fill_value is the background every destination sample starts from; only
    pixels left out by BorderMode.SKIP keep it.
    """
    border_mode: BorderMode = BorderMode.CLAMP_EDGE
    fill_value: int = 0
    workers: int = 1
    band_rows: int = 8

    def validate(self):
        if not isinstance(self.border_mode, BorderMode):
            raise InvalidArgument("border_mode must be a BorderMode, got {!r}".format(self.border_mode))
        for name in ("fill_value", "workers", "band_rows"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidArgument("{} must be an integer, got {!r}".format(name, value))
        if not 0 <= self.fill_value <= 255:
            raise InvalidArgument("fill_value must be in [0, 255], got {}".format(self.fill_value))
        if self.workers < 1:
            raise InvalidArgument("workers must be >= 1, got {}".format(self.workers))
        if self.band_rows < 1:
            raise InvalidArgument("band_rows must be >= 1, got {}".format(self.band_rows))


def validate_scale_factor(scale_factor):
    """Returns scale_factor as an int, raising InvalidArgument unless it is an integer >= 1."""
    if isinstance(scale_factor, bool) or not isinstance(scale_factor, numbers.Integral):
        raise InvalidArgument("scale factor must be an integer, got {!r}".format(scale_factor))
    if scale_factor < 1:
        raise InvalidArgument("scale factor must be >= 1, got {}".format(scale_factor))
    return int(scale_factor)


def validate_pixel_grid(grid):
    if not isinstance(grid, np.ndarray):
        raise InvalidArgument("pixel grid must be a NumPy array")
    if grid.dtype != np.uint8:
        raise InvalidArgument("pixel grid must have dtype uint8, got {}".format(grid.dtype))
    if grid.ndim != 3 or grid.shape[2] not in (3, 4):
        raise InvalidArgument("pixel grid must have shape (H, W, 3) or (H, W, 4), got {}".format(grid.shape))
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise InvalidArgument("pixel grid must not be empty")


def _fill_band(source, dest, scale_factor, row_start, row_stop, border_mode):
    """Interpolates every non-anchor pixel of destination rows [row_start, row_stop)."""
    dest_ys = np.arange(row_start, row_stop)
    dest_xs = np.arange(dest.shape[1])

    fill_mask = (dest_ys[:, None] % scale_factor != 0) | (dest_xs[None, :] % scale_factor != 0)
    if border_mode is BorderMode.SKIP:
        fill_mask &= (dest_ys[:, None] >= SKIP_BORDER) & (dest_xs[None, :] >= SKIP_BORDER)
    if not fill_mask.any():
        return

    fx = (dest_xs % scale_factor) / scale_factor
    fy = (dest_ys % scale_factor) / scale_factor

    grids = gather_neighborhoods(source, scale_factor, dest_xs, dest_ys)
    values = bicubic_interpolate(grids, fx[None, :, None], fy[:, None, None])

    # Clip, then truncate toward zero like an unsigned char cast.
    values = np.clip(values, 0.0, 255.0).astype(np.uint8)

    band = dest[row_start:row_stop]
    band[fill_mask] = values[fill_mask]


def upscale(source, scale_factor, config=None, progress=None, cancel_event=None):
    """
    Upscales a PixelGrid by an integer factor with bicubic interpolation.
    Args:
        source (np.ndarray): uint8 array of shape (H, W, 3) or (H, W, 4). Not modified.
        scale_factor (int): Integer factor >= 1.
        config (UpscaleConfig): Border policy, background and scheduling. Defaults
                                to UpscaleConfig().
        progress (callable): Optional progress(done_bands, total_bands), called
                             after each band of destination rows is filled.
        cancel_event (threading.Event): Optional; checked before each band.
    Returns:
        np.ndarray: uint8 array of shape (H*s, W*s, C). Source pixel (x, y) is
        found unchanged at (x*s, y*s); all other samples are interpolated.
    Raises:
        InvalidArgument: On a bad scale factor, pixel grid or config.
        UpscaleCancelled: If cancel_event was set before the fill pass finished.
    """
    scale_factor = validate_scale_factor(scale_factor)
    validate_pixel_grid(source)
    config = config or UpscaleConfig()
    config.validate()

    in_height, in_width, channels = source.shape
    out_height, out_width = in_height * scale_factor, in_width * scale_factor

    dest = np.full((out_height, out_width, channels), config.fill_value, dtype=np.uint8)

    # Anchor pass
    dest[::scale_factor, ::scale_factor] = source

    if scale_factor == 1:
        return dest

    bands = [(start, min(start + config.band_rows, out_height))
             for start in range(0, out_height, config.band_rows)]
    logger.debug("Filling %dx%d destination in %d bands with %d worker(s), border mode %s",
                 out_width, out_height, len(bands), config.workers, config.border_mode.value)

    def run_band(band):
        if cancel_event is not None and cancel_event.is_set():
            raise UpscaleCancelled("upscale cancelled before rows {}-{}".format(band[0], band[1] - 1))
        _fill_band(source, dest, scale_factor, band[0], band[1], config.border_mode)

    if config.workers == 1:
        for done, band in enumerate(bands, start=1):
            run_band(band)
            if progress is not None:
                progress(done, len(bands))
        return dest

    # Bands write disjoint destination rows, so they need no locking.
    with ThreadPoolExecutor(max_workers=config.workers) as pool:
        futures = [pool.submit(run_band, band) for band in bands]
        try:
            for done, future in enumerate(futures, start=1):
                future.result()
                if progress is not None:
                    progress(done, len(bands))
        except BaseException:
            for future in futures:
                future.cancel()
            raise
    return dest
