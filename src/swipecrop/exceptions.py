"""Exception hierarchy for SwipeCrop."""

from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from swipecrop.domain.geometry import Rect


class FailureKind(str, Enum):
    """Terminal failure categories reported by the crop pipeline."""

    DECODE_ERROR = "decode_error"
    INVALID_GEOMETRY = "invalid_geometry"
    INVALID_CROP_REGION = "invalid_crop_region"
    TOO_SMALL = "too_small"
    ENCODE_ERROR = "encode_error"


class SwipeCropError(Exception):
    """Base exception for all SwipeCrop errors."""

    failure_kind: ClassVar[FailureKind | None] = None


class ImageError(SwipeCropError):
    """Errors related to decoding or encoding pixel data."""

    pass


class DecodeError(ImageError):
    """Input bytes are not a valid or supported image."""

    failure_kind = FailureKind.DECODE_ERROR

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode image: {reason}")


class EncodeError(ImageError):
    """Output format unsupported or encoder failure."""

    failure_kind = FailureKind.ENCODE_ERROR

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to encode image: {reason}")


class GeometryError(SwipeCropError):
    """Errors in geometric calculations."""

    pass


class InvalidGeometryError(GeometryError):
    """Degenerate fit computation or invalid size combination."""

    failure_kind = FailureKind.INVALID_GEOMETRY

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid geometry: {reason}")


class CropError(SwipeCropError):
    """Errors related to the resolved crop region."""

    pass


class InvalidCropRegionError(CropError):
    """Resolved rectangle has no area after clamping."""

    failure_kind = FailureKind.INVALID_CROP_REGION

    def __init__(self, rect: "Rect") -> None:
        self.rect = rect
        super().__init__(
            f"Crop region has no area: {rect.width:g}x{rect.height:g} at "
            f"({rect.left:g}, {rect.top:g})"
        )


class TooSmallError(CropError):
    """Resolved crop region is under the minimum size in both dimensions."""

    failure_kind = FailureKind.TOO_SMALL

    def __init__(self, width: float, height: float, min_size: int) -> None:
        self.width = width
        self.height = height
        self.min_size = min_size
        super().__init__(
            f"Selection too small: {width:g}x{height:g} px "
            f"(at least one side must be {min_size} px or more)"
        )


class GestureError(SwipeCropError):
    """Invalid use of a gesture path."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ArtifactWriteError(SwipeCropError):
    """Error materializing an artifact on disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write artifact '{path}': {reason}")


class RecognitionError(SwipeCropError):
    """The OCR engine failed to read an artifact."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Text recognition failed: {reason}")
