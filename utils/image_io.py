"""
Output utilities for the collinear pipeline.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
    • save_text(path, lines)

Handles all filesystem writes in a consistent, testable way.
"""

import os
from typing import Iterable

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)


# -------------------------------------------------------------------------
#  TEXT SAVING
# -------------------------------------------------------------------------

def save_text(path: str, lines: Iterable[str]):
    """
    Write one entry per line, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(f"{line}\n")
