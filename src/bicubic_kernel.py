import numpy as np

def cubic_interpolate(p0, p1, p2, p3, t):
    """
    Evaluates the Catmull-Rom cubic through four equally spaced samples.
    See https://en.wikipedia.org/wiki/Cubic_Hermite_spline#Catmull%E2%80%93Rom_spline
    Args:
        p0, p1, p2, p3 (float or np.ndarray): Control values at offsets -1, 0, 1, 2.
        t (float or np.ndarray): Fractional position between p1 (t=0) and p2 (t=1).
    Returns:
        float or np.ndarray: The interpolated value. Not clamped, it may
        overshoot the range of the control values.
    """
    return p1 + 0.5 * t * (p2 - p0 + t * (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3
                                          + t * (3.0 * (p1 - p2) + p3 - p0)))

def bicubic_interpolate(grid, x, y):
    """
    Performs bicubic interpolation over a 4x4 control grid.
    Args:
        grid (array-like): 4x4 control values indexed [x_offset][y_offset], so
                           grid[1][1] is the pixel at the top-left of the cell
                           being interpolated and grid[2][2] its opposite corner.
                           A batch of grids with shape (..., 4, 4) is accepted.
        x (float or np.ndarray): Fractional x offset in [0, 1].
        y (float or np.ndarray): Fractional y offset in [0, 1]. Both must
                                 broadcast against grid.shape[:-2].
    Returns:
        float or np.ndarray: The interpolated value(s).
    """
    p = np.asarray(grid, dtype=np.float64)
    if p.shape[-2:] != (4, 4):
        raise ValueError("grid must have shape (..., 4, 4), got {}".format(p.shape))

    # First pass runs along y inside each column grid[i], one value per x offset.
    ty = np.expand_dims(np.asarray(y, dtype=np.float64), -1)
    columns = cubic_interpolate(p[..., 0], p[..., 1], p[..., 2], p[..., 3], ty)

    # Second pass runs across the four column results along x.
    return cubic_interpolate(columns[..., 0], columns[..., 1],
                             columns[..., 2], columns[..., 3], x)
