import os
import sys

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'src'))

from image_io import save_pixel_grid
from sample_images import gradient_image

def create_gradient_image(width, height, filename="input-image.png", channels=3):
    """Creates a smooth colour gradient and saves it where the CLI looks by default."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    save_pixel_grid(gradient_image(width, height, channels), filename)
    print(f"Saved test image to {filename}")

if __name__ == '__main__':
    create_gradient_image(64, 64)
