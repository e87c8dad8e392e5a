"""Configuration settings for SwipeCrop."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from swipecrop.domain import FitPolicy, ImageFormat
from swipecrop.exceptions import EncodeError


class CropConfig(BaseModel):
    """Configuration for resolving a gesture into a crop region."""

    stroke_width: float = Field(
        default=16.0,
        ge=0.0,
        description="Brush width in display pixels, used to pad the gesture bounds",
    )
    fit_policy: FitPolicy = Field(
        default=FitPolicy.CONTAIN,
        description="How the image is fitted into the display area",
    )
    min_size: int = Field(
        default=32,
        ge=1,
        description="Crops smaller than this in both dimensions are rejected",
    )


class OutputConfig(BaseModel):
    """Configuration for encoding and storing artifacts."""

    format: ImageFormat = Field(
        default=ImageFormat.JPEG,
        description="Output encoding (png, jpg or jpeg)",
    )
    jpeg_quality: int = Field(
        default=85,
        ge=1,
        le=100,
        description="JPEG quality",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Directory for materialized artifacts (None = system temp dir)",
    )

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value: object) -> ImageFormat:
        if isinstance(value, str | ImageFormat):
            try:
                return ImageFormat.parse(value)
            except EncodeError as e:
                raise ValueError(e.reason) from e
        raise ValueError(f"unsupported output format {value!r}")


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker threads (None = auto)",
    )


class OcrConfig(BaseModel):
    """Configuration for the Tesseract text recognizer."""

    language: str = Field(
        default="eng",
        description="Tesseract language code(s), e.g. 'eng' or 'eng+ind'",
    )
    tesseract_cmd: str | None = Field(
        default=None,
        description="Path to the tesseract executable (None = search PATH)",
    )
    config: str = Field(
        default="",
        description="Extra Tesseract command-line options",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SwipeCropSettings(BaseModel):
    """Main application settings."""

    crop: CropConfig = Field(default_factory=CropConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    ocr: OcrConfig = Field(default_factory=OcrConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SwipeCropSettings:
    """Get default application settings."""
    return SwipeCropSettings()
