"""
Collinear Points Package

Brute-force detection of line segments formed by four collinear
points, including:

- Point model with (y, x) ordering and tagged slopes
- Line segments
- Brute-force 4-point detector
- Point-file loading
- Output visualization utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
