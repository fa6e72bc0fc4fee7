#!/usr/bin/env python3
"""
Framebuffer output: per-pixel tone mapping, binary PPM (P6) encoding and
matplotlib-based PNG export / display.
"""

import logging
import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def _check_framebuffer(fb: np.ndarray) -> np.ndarray:
    fb = np.asarray(fb, dtype=np.float64)
    if fb.ndim != 3 or fb.shape[2] != 3:
        raise ValueError(f"framebuffer must have shape (height, width, 3), got {fb.shape}")
    return fb

def tonemap(fb: np.ndarray) -> np.ndarray:
    """
    Bring overbright pixels back into [0, 1] by dividing each pixel by
    max(1, its brightest channel). Hue is preserved.
    """
    fb = _check_framebuffer(fb)
    scale = np.maximum(1.0, fb.max(axis=2, keepdims=True))
    return fb / scale

def to_rgb8(fb: np.ndarray) -> np.ndarray:
    """
    Tone-mapped 8-bit RGB, truncated like a float-to-char cast.
    NaN channels from degenerate rays are written as 0.
    """
    mapped = np.clip(np.nan_to_num(tonemap(fb), nan=0.0), 0.0, 1.0)
    return (255.0 * mapped).astype(np.uint8)

def encode_ppm(fb: np.ndarray) -> bytes:
    """Binary PPM: header, then RGB bytes row-major from the top row."""
    rgb = to_rgb8(fb)
    h, w = rgb.shape[:2]
    header = f"P6\n{w} {h}\n255\n".encode("ascii")
    return header + rgb.tobytes()

def write_ppm(path: PathLike, fb: np.ndarray) -> Path:
    path = Path(path)
    path.write_bytes(encode_ppm(fb))
    logger.info("Wrote %s", path)
    return path

def save_png(path: PathLike, fb: np.ndarray) -> Path:
    """Save the tone-mapped image as PNG with matplotlib."""
    path = Path(path)
    plt.imsave(path, to_rgb8(fb))
    logger.info("Wrote %s", path)
    return path

def show_image(fb: np.ndarray, title: str = "Ray traced scene"):
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.imshow(to_rgb8(fb))
    ax.set_title(title)
    ax.set_axis_off()
    plt.tight_layout()
    plt.show()
