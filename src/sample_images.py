import numpy as np

def gradient_image(width, height, channels=3):
    """Creates a smooth diagonal gradient, offset per channel, as a uint8 PixelGrid."""
    ys, xs = np.mgrid[0:height, 0:width]
    base = (xs + ys) / float(width + height)
    img = np.zeros((height, width, channels), dtype=np.uint8)
    for c in range(min(channels, 3)):
        img[:, :, c] = ((base * 0.7 + c * 0.15) * 255).astype(np.uint8)
    if channels == 4:
        img[:, :, 3] = 255  # opaque
    return img

def corner_image():
    """The 2x2 RGB image with black, red, green and blue corners (row-major)."""
    return np.array([
        [[0, 0, 0], [255, 0, 0]],
        [[0, 255, 0], [0, 0, 255]],
    ], dtype=np.uint8)
