"""Domain models for swipecrop.

This module contains the value types passed between pipeline stages. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Free of UI state
- Independent of Pillow except for the decoded ImageBuffer

Key classes:
- Point, GesturePath: What the gesture source records
- Size, Rect, Alignment: Display-space and image-space geometry
- FitPolicy, FittedSizes: How an image is placed in its display area
- ImageBuffer, ImageFormat, CroppedArtifact: Pixel data in and out
- CropFailure: Typed failure returned by the pipeline
"""

from swipecrop.domain.fit import FitPolicy, FittedSizes
from swipecrop.domain.geometry import Alignment, Point, Rect, Size
from swipecrop.domain.image import CroppedArtifact, ImageBuffer, ImageFormat
from swipecrop.domain.path import GesturePath
from swipecrop.domain.result import CropFailure, CropResult
from swipecrop.exceptions import FailureKind

__all__: list[str] = [
    # Enums
    "FailureKind",
    "FitPolicy",
    "ImageFormat",
    # Geometry
    "Alignment",
    "Point",
    "Rect",
    "Size",
    "FittedSizes",
    # Gesture
    "GesturePath",
    # Pixels and results
    "CropFailure",
    "CropResult",
    "CroppedArtifact",
    "ImageBuffer",
]
