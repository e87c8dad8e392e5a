"""Gesture path representation.

A gesture path is the ordered list of points a user's finger or pointer
passed through while drawing a selection. It is built incrementally while the
gesture is in progress and becomes read-only once the gesture is committed.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from swipecrop.domain.geometry import Point
from swipecrop.exceptions import GestureError


@dataclass
class GesturePath:
    """Append-only sequence of display-space points in drawing order.

    Example:
        path = GesturePath()
        path.append(Point(10, 10))
        path.append(Point(50, 10))
        path.finalize()

    Attributes:
        points: Recorded points, oldest first
    """

    points: list[Point] = field(default_factory=list)
    _finalized: bool = field(default=False, repr=False)

    @classmethod
    def from_points(cls, points: Iterable[Point | tuple[float, float]]) -> "GesturePath":
        """Build a finalized path from points or (x, y) pairs.

        Args:
            points: Points in drawing order

        Returns:
            Finalized GesturePath
        """
        path = cls()
        for point in points:
            if not isinstance(point, Point):
                x, y = point
                point = Point(float(x), float(y))
            path.append(point)
        return path.finalize()

    @property
    def is_finalized(self) -> bool:
        """True once the gesture has been committed."""
        return self._finalized

    def append(self, point: Point) -> None:
        """Record the next point of an in-progress gesture.

        Raises:
            GestureError: If the path has already been finalized
        """
        if self._finalized:
            raise GestureError("Cannot append to a finalized gesture path")
        self.points.append(point)

    def finalize(self) -> "GesturePath":
        """Mark the gesture as committed and return the path."""
        self._finalized = True
        return self

    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the list of point dictionaries
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GesturePath":
        """Deserialize from dictionary into a finalized path.

        Args:
            data: Dictionary with a ``points`` list

        Returns:
            Finalized GesturePath
        """
        return cls.from_points(Point.from_dict(p) for p in data["points"])
