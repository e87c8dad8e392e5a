"""Core processing algorithms for swipecrop.

This module contains the core algorithms for:

- Gesture bounds (bounding rectangle of a stroked path)
- Fit transform (how an image is sized inside its display area)
- Screen-to-image mapping (inverting the fit transform)
- Pixel cropping and re-encoding

All services are designed to be:
- Stateless (safe for use in worker threads)
- Pure (no side effects beyond the buffers they return)

Key functions:
- compute_bounds: Bounding rectangle of a gesture path
- apply_fit: Fitted source/destination sizes for a fit policy
- map_to_image_space: Display-space rectangle to image-space rectangle
- run_job: Run one crop job (executor entry point)

Key classes:
- ImageCropEngine: Decodes, crops and encodes images
- CropPipeline: Orchestrates the stages and returns typed results
"""

from swipecrop.core.bounds import DEFAULT_STROKE_WIDTH, compute_bounds
from swipecrop.core.cropper import DEFAULT_JPEG_QUALITY, ImageCropEngine
from swipecrop.core.fit import apply_fit
from swipecrop.core.mapper import map_to_image_space
from swipecrop.core.pipeline import CropJob, CropPipeline, run_job

__all__ = [
    "DEFAULT_JPEG_QUALITY",
    "DEFAULT_STROKE_WIDTH",
    # Pipeline
    "CropJob",
    "CropPipeline",
    # Crop engine
    "ImageCropEngine",
    # Geometry functions
    "apply_fit",
    "compute_bounds",
    "map_to_image_space",
    "run_job",
]
