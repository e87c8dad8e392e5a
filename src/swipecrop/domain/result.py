"""Typed outcomes returned by the crop pipeline."""

from dataclasses import dataclass
from typing import TypeAlias

from swipecrop.domain.image import CroppedArtifact
from swipecrop.exceptions import FailureKind, SwipeCropError


@dataclass(frozen=True)
class CropFailure:
    """A terminal failure of one pipeline invocation.

    Attributes:
        kind: Failure category
        message: Human-readable description
        error: The exception raised by the failing stage
    """

    kind: FailureKind
    message: str
    error: SwipeCropError

    @classmethod
    def from_error(cls, error: SwipeCropError) -> "CropFailure":
        """Build a failure from a stage exception.

        Raises:
            ValueError: If the error is not a pipeline-stage error
        """
        if error.failure_kind is None:
            raise ValueError(f"{type(error).__name__} is not a pipeline failure")
        return cls(kind=error.failure_kind, message=str(error), error=error)

    @property
    def is_user_correctable(self) -> bool:
        """True for conditions the user can fix by drawing again."""
        return self.kind in (FailureKind.TOO_SMALL, FailureKind.INVALID_CROP_REGION)


CropResult: TypeAlias = CroppedArtifact | CropFailure
