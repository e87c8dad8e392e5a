"""Bounding rectangle of a drawn gesture.

Reduces a gesture path plus the brush width to the axis-aligned rectangle that
covers the visual footprint of the stroke.
"""

from collections.abc import Iterable

from swipecrop.domain import GesturePath, Point, Rect
from swipecrop.exceptions import InvalidGeometryError

DEFAULT_STROKE_WIDTH = 16.0


def compute_bounds(
    path: GesturePath | Iterable[Point],
    stroke_width: float = DEFAULT_STROKE_WIDTH,
) -> Rect:
    """Calculate the bounding rectangle of a gesture path.

    The right and bottom edges are seeded at the first point plus the stroke
    width, so the rectangle always covers at least one brush footprint at the
    start of the gesture. Every point then widens the rectangle as needed.

    Args:
        path: Points in drawing order
        stroke_width: Brush width in display pixels

    Returns:
        Bounding rectangle in display space; ``Rect.zero()`` for an empty path

    Raises:
        InvalidGeometryError: If stroke_width is negative

    Examples:
        >>> compute_bounds([Point(10, 10)], stroke_width=16)
        Rect(left=10, top=10, right=26, bottom=26)
    """
    if stroke_width < 0:
        raise InvalidGeometryError(f"stroke width must be non-negative, got {stroke_width:g}")

    points = iter(path)
    first = next(points, None)
    if first is None:
        return Rect.zero()

    min_x = first.x
    max_x = first.x + stroke_width
    min_y = first.y
    max_y = first.y + stroke_width

    for point in points:
        min_x = min(min_x, point.x)
        max_x = max(max_x, point.x)
        min_y = min(min_y, point.y)
        max_y = max(max_y, point.y)

    return Rect(min_x, min_y, max_x, max_y)
