"""Crop pipeline orchestration.

This module turns a finished gesture into a cropped, re-encoded artifact:
decode → bounds → map to image space → region checks → crop → encode.

Key components:
- CropJob: Inputs of one independent pipeline invocation
- run_job: Top-level function submitted to worker threads
- CropPipeline: Orchestrator returning typed results instead of raising
"""

import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

import structlog

from swipecrop.config import SwipeCropSettings, get_default_settings
from swipecrop.core.bounds import compute_bounds
from swipecrop.core.cropper import ImageCropEngine
from swipecrop.core.mapper import map_to_image_space
from swipecrop.domain import (
    Alignment,
    CropFailure,
    CropResult,
    CroppedArtifact,
    FitPolicy,
    GesturePath,
    ImageFormat,
    Size,
)
from swipecrop.exceptions import InvalidCropRegionError, SwipeCropError, TooSmallError
from swipecrop.utils import CropLogger, CropStats


@dataclass(frozen=True)
class CropJob:
    """Inputs of a single pipeline invocation.

    Attributes:
        raw_image: Encoded source image
        path: Finalized gesture path in display coordinates
        display_size: Size of the area the image was displayed in
        stroke_width: Brush width (None = configured default)
        policy: Fit policy (None = configured default)
        output_format: Output encoding (None = configured default)
    """

    raw_image: bytes
    path: GesturePath
    display_size: Size
    stroke_width: float | None = None
    policy: FitPolicy | None = None
    output_format: ImageFormat | None = None


def run_job(job: CropJob, settings: SwipeCropSettings) -> tuple[CropResult, float]:
    """Run one crop job.

    Top-level function so it can be handed to any executor.

    Args:
        job: Pipeline inputs
        settings: Settings supplying defaults for unset job fields

    Returns:
        Tuple of (result, duration in milliseconds)
    """
    pipeline = CropPipeline(settings)
    start_time = time.perf_counter()
    try:
        result: CropResult = pipeline.execute(
            raw_image=job.raw_image,
            path=job.path,
            stroke_width=job.stroke_width,
            display_size=job.display_size,
            policy=job.policy,
            output_format=job.output_format,
        )
    except SwipeCropError as e:
        result = CropFailure.from_error(e)
    return result, (time.perf_counter() - start_time) * 1000


class CropPipeline:
    """Resolves gestures into cropped image artifacts.

    Every invocation decodes its own buffer. The only state shared between
    calls is the lock-guarded run statistics, so one pipeline may serve
    concurrent calls.

    Example:
        pipeline = CropPipeline()
        result = pipeline.run(
            raw_image=png_bytes,
            path=GesturePath.from_points([(10, 10), (200, 120)]),
            stroke_width=16.0,
            display_size=Size(400, 400),
            policy=FitPolicy.CONTAIN,
        )
        if isinstance(result, CropFailure):
            print(result.kind, result.message)
    """

    def __init__(
        self,
        settings: SwipeCropSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
        alignment: Alignment = Alignment.CENTER,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: SwipeCrop settings (defaults if None)
            logger: Structured logger (the "swipecrop" logger if None)
            alignment: Placement of the image inside the display area
        """
        self.settings = settings or get_default_settings()
        self.logger = logger or structlog.get_logger("swipecrop")
        self.crop_logger = CropLogger(self.logger)
        self.alignment = alignment
        self.engine = ImageCropEngine(jpeg_quality=self.settings.output.jpeg_quality)

    @property
    def stats(self) -> CropStats:
        """Statistics of every run through this pipeline."""
        return self.crop_logger.stats

    def run(
        self,
        raw_image: bytes,
        path: GesturePath,
        stroke_width: float | None,
        display_size: Size,
        policy: FitPolicy | None = None,
        output_format: ImageFormat | str | None = None,
        quality: int | None = None,
    ) -> CropResult:
        """Crop the region a gesture was drawn over.

        Args:
            raw_image: Encoded source image
            path: Gesture path in display coordinates
            stroke_width: Brush width (None = configured default)
            display_size: Size of the display area
            policy: Fit policy (None = configured default)
            output_format: Output encoding (None = configured default)
            quality: JPEG quality override

        Returns:
            CroppedArtifact on success, otherwise the CropFailure of the first
            stage that failed
        """
        start_time = time.perf_counter()
        self.crop_logger.log_crop_start(len(raw_image), len(path))

        try:
            artifact = self.execute(
                raw_image=raw_image,
                path=path,
                stroke_width=stroke_width,
                display_size=display_size,
                policy=policy,
                output_format=output_format,
                quality=quality,
            )
        except SwipeCropError as e:
            failure = CropFailure.from_error(e)
            self.crop_logger.log_crop_failed(failure.kind, failure.message)
            return failure

        self.crop_logger.log_crop_complete(
            width=artifact.width,
            height=artifact.height,
            format=artifact.format.value,
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        return artifact

    def execute(
        self,
        raw_image: bytes,
        path: GesturePath,
        stroke_width: float | None,
        display_size: Size,
        policy: FitPolicy | None = None,
        output_format: ImageFormat | str | None = None,
        quality: int | None = None,
    ) -> CroppedArtifact:
        """Run every stage, raising the first stage error.

        Same inputs as run().

        Raises:
            DecodeError: If the image bytes cannot be decoded
            InvalidGeometryError: If the fit cannot be inverted
            InvalidCropRegionError: If the resolved region has no area
            TooSmallError: If the region is under the minimum size in both dimensions
            EncodeError: If the crop cannot be encoded
        """
        crop_config = self.settings.crop
        if stroke_width is None:
            stroke_width = crop_config.stroke_width
        if policy is None:
            policy = crop_config.fit_policy

        buffer = self.engine.decode(raw_image)

        screen_rect = compute_bounds(path, stroke_width)
        image_rect = map_to_image_space(
            screen_rect,
            image_size=buffer.size,
            display_size=display_size,
            policy=policy,
            alignment=self.alignment,
        )
        self.crop_logger.log_geometry(screen_rect, image_rect, buffer.size)

        if image_rect.is_empty:
            raise InvalidCropRegionError(image_rect)

        min_size = crop_config.min_size
        if image_rect.width < min_size and image_rect.height < min_size:
            raise TooSmallError(image_rect.width, image_rect.height, min_size)

        cropped = self.engine.crop(buffer, image_rect)
        image_format = ImageFormat.parse(output_format or self.settings.output.format)
        data = self.engine.encode(cropped, image_format, quality=quality)

        return CroppedArtifact(
            data=data,
            format=image_format,
            width=cropped.width,
            height=cropped.height,
        )

    def run_many(
        self,
        jobs: Sequence[CropJob],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, bool], None] | None = None,
    ) -> list[CropResult]:
        """Run independent crop jobs on a thread pool.

        Args:
            jobs: Jobs to run
            max_workers: Maximum worker threads (None = configured default)
            progress_callback: Optional callback(completed, total, success)

        Returns:
            Results in the same order as ``jobs``

        Raises:
            KeyboardInterrupt: If cancelled by the user; pending jobs are dropped
        """
        stats = self.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        self.logger.info(
            "Starting batch crop",
            job_count=len(jobs),
            max_workers=max_workers,
        )

        results: list[CropResult | None] = [None] * len(jobs)
        total = len(jobs)
        completed = 0
        pending_futures: dict = {}

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            for index, job in enumerate(jobs):
                future = executor.submit(run_job, job, self.settings)
                pending_futures[future] = index

            try:
                for future in as_completed(pending_futures):
                    index = pending_futures.pop(future)
                    result, duration_ms = future.result()
                    results[index] = result

                    success = isinstance(result, CroppedArtifact)
                    if success:
                        self.crop_logger.log_crop_complete(
                            width=result.width,
                            height=result.height,
                            format=result.format.value,
                            duration_ms=duration_ms,
                        )
                    else:
                        self.crop_logger.log_crop_failed(result.kind, result.message)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()
                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        stats.end_time = time.time()
        self.logger.info(
            "Batch crop complete",
            completed=stats.completed_count,
            failed=stats.failed_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return [result for result in results if result is not None]
