"""PNG output for a finished canvas."""

import os

import numpy as np
from PIL import Image


def to_image(canvas: np.ndarray) -> Image.Image:
    return Image.fromarray(canvas)


def save_png(canvas: np.ndarray, path: str) -> str | None:
    """Write canvas to path as PNG. An empty path writes nothing and returns None."""
    if not path:
        return None
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    to_image(canvas).save(path, 'PNG')
    return path
