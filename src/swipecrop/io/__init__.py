"""File I/O layer for swipecrop.

This module handles everything that touches the filesystem, keeping the core
pipeline free of side effects.

Key responsibilities:
- Read source image bytes
- Load recorded gesture paths from JSON
- Materialize cropped artifacts as uniquely named files

Key classes:
- GestureRecording: A gesture path plus its stored stroke width
- ArtifactWriter: Save and delete cropped artifacts
"""

from swipecrop.io.reader import (
    GestureRecording,
    parse_gesture,
    read_gesture,
    read_image_bytes,
)
from swipecrop.io.writer import ArtifactWriter

__all__ = [
    "ArtifactWriter",
    "GestureRecording",
    "parse_gesture",
    "read_gesture",
    "read_image_bytes",
]
