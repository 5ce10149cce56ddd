import numpy as np
from PIL import Image
from skimage.metrics import peak_signal_noise_ratio

from grid_upscaler import upscale

def calculate_psnr_mse(img1, img2):
    """Calculates PSNR (dB) and MSE between two uint8 images of equal shape."""
    if img1.shape != img2.shape:
        raise ValueError("Images must have the same dimensions.")
    mse = np.mean((img1.astype(np.float64) - img2.astype(np.float64))**2)
    if mse == 0:
        psnr = float('inf')
    else:
        psnr = peak_signal_noise_ratio(img1, img2, data_range=255)
    return psnr, mse

def pillow_bicubic(source, scale_factor):
    """Reference upscale with Pillow's BICUBIC filter to the same output size."""
    height, width = source.shape[:2]
    resized = Image.fromarray(source).resize((width * scale_factor, height * scale_factor),
                                             Image.Resampling.BICUBIC)
    return np.array(resized, dtype=np.uint8)

def compare_with_pillow(source, scale_factor, config=None):
    """
    Upscales source and measures it against Pillow's BICUBIC resize.
    Pillow centres pixels while this upscaler pins source pixels to
    (x*s, y*s), so the two grids are offset by (s-1)/2 destination pixels and
    an exact match is not expected.
    Returns:
        tuple: (psnr, mse)
    """
    ours = upscale(source, scale_factor, config=config)
    return calculate_psnr_mse(ours, pillow_bicubic(source, scale_factor))
