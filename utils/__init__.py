"""
Utility Functions

Provides point geometry helpers, point-file loading and
output I/O used across the detector and the pipeline.
"""

from .geometry import sort_points, find_repeated_point, all_collinear
from .point_io import parse_points, load_points, load_point_files
from .image_io import ensure_output_dir, save_image, save_text

__all__ = [
    "sort_points",
    "find_repeated_point",
    "all_collinear",
    "parse_points",
    "load_points",
    "load_point_files",
    "ensure_output_dir",
    "save_image",
    "save_text",
]
