"""Core geometric types for display-space and image-space coordinates.

This module defines the value types shared by every stage of the crop pipeline:
- Point: A 2D point recorded by the gesture source
- Size: A width/height pair for images and display areas
- Rect: An axis-aligned rectangle in either coordinate space
- Alignment: Where a fitted image sits inside its display area
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from swipecrop.exceptions import InvalidGeometryError


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


@dataclass(frozen=True, slots=True)
class Point:
    """A point in display space.

    Immutable and hashable so recorded gesture points cannot drift.

    Attributes:
        x: X coordinate in display pixels
        y: Y coordinate in display pixels
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair.

    Attributes:
        width: Width in pixels, never negative
        height: Height in pixels, never negative

    Raises:
        InvalidGeometryError: If either dimension is negative
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidGeometryError(
                f"size dimensions must be non-negative, got {self.width:g}x{self.height:g}"
            )

    @property
    def has_area(self) -> bool:
        """True when both dimensions are positive."""
        return self.width > 0 and self.height > 0

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height.

        Raises:
            InvalidGeometryError: If height is zero
        """
        if self.height == 0:
            raise InvalidGeometryError("aspect ratio of a zero-height size")
        return self.width / self.height

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def parse(cls, text: str) -> "Size":
        """Parse a size written as ``WIDTHxHEIGHT`` (e.g. ``400x300``).

        Args:
            text: Size text, case-insensitive separator

        Returns:
            Size instance

        Raises:
            InvalidGeometryError: If the text is not a valid size
        """
        parts = text.lower().replace(" ", "").split("x")
        if len(parts) != 2:
            raise InvalidGeometryError(f"expected WIDTHxHEIGHT, got '{text}'")
        try:
            width, height = float(parts[0]), float(parts[1])
        except ValueError:
            raise InvalidGeometryError(f"expected WIDTHxHEIGHT, got '{text}'") from None
        return cls(width, height)


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its edges.

    May be degenerate (zero width or height), never inverted.

    Attributes:
        left: Left edge
        top: Top edge
        right: Right edge, at least ``left``
        bottom: Bottom edge, at least ``top``

    Raises:
        InvalidGeometryError: If right < left or bottom < top
    """

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        if self.right < self.left or self.bottom < self.top:
            raise InvalidGeometryError(
                f"inverted rectangle ({self.left:g}, {self.top:g}, "
                f"{self.right:g}, {self.bottom:g})"
            )

    @classmethod
    def zero(cls) -> "Rect":
        """The empty rectangle at the origin."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> "Rect":
        """Build a rectangle from its origin and extent."""
        return cls(left, top, left + width, top + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """True when the rectangle has no area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point, tolerance: float = 0.0) -> bool:
        """Check whether a point lies inside the rectangle (edges included).

        Args:
            point: Point to test
            tolerance: Distance the rectangle is grown by on every side

        Returns:
            True if the point is inside the grown rectangle
        """
        return (
            self.left - tolerance <= point.x <= self.right + tolerance
            and self.top - tolerance <= point.y <= self.bottom + tolerance
        )

    def translate(self, dx: float, dy: float) -> "Rect":
        """Return the rectangle shifted by (dx, dy)."""
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def scale(self, sx: float, sy: float) -> "Rect":
        """Return the rectangle with every coordinate multiplied by (sx, sy).

        Scale factors must be non-negative so edge order is preserved.
        """
        return Rect(self.left * sx, self.top * sy, self.right * sx, self.bottom * sy)

    def clamp_to(self, size: Size) -> "Rect":
        """Clamp all four edges into ``[0, size.width] x [0, size.height]``."""
        return Rect(
            _clamp(self.left, 0.0, size.width),
            _clamp(self.top, 0.0, size.height),
            _clamp(self.right, 0.0, size.width),
            _clamp(self.bottom, 0.0, size.height),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (left, top, right, bottom) tuple."""
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True, slots=True)
class Alignment:
    """Alignment of a child box inside a parent box.

    ``(-1, -1)`` is the top-left corner, ``(0, 0)`` the center and ``(1, 1)``
    the bottom-right corner.

    Attributes:
        x: Horizontal alignment in [-1, 1]
        y: Vertical alignment in [-1, 1]
    """

    x: float = 0.0
    y: float = 0.0

    CENTER: ClassVar["Alignment"]
    TOP_LEFT: ClassVar["Alignment"]
    BOTTOM_RIGHT: ClassVar["Alignment"]

    def __post_init__(self) -> None:
        if not (-1.0 <= self.x <= 1.0 and -1.0 <= self.y <= 1.0):
            raise InvalidGeometryError(
                f"alignment must lie within [-1, 1], got ({self.x:g}, {self.y:g})"
            )

    def along_size(self, size: Size) -> tuple[float, float]:
        """Offset of the alignment point inside a box of the given size.

        Args:
            size: Box size

        Returns:
            (dx, dy) measured from the box's top-left corner
        """
        half_width = size.width / 2.0
        half_height = size.height / 2.0
        return (half_width + self.x * half_width, half_height + self.y * half_height)


Alignment.CENTER = Alignment(0.0, 0.0)
Alignment.TOP_LEFT = Alignment(-1.0, -1.0)
Alignment.BOTTOM_RIGHT = Alignment(1.0, 1.0)
