"""Readers for source images and recorded gesture paths.

Gesture files are JSON, in either of two shapes:

    [[10, 10], [50, 10], [50, 50]]

    {"points": [{"x": 10, "y": 10}, ...], "stroke_width": 16}
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from swipecrop.domain import GesturePath, Point
from swipecrop.exceptions import GestureError


@dataclass(frozen=True)
class GestureRecording:
    """A gesture path loaded from disk.

    Attributes:
        path: Finalized gesture path
        stroke_width: Brush width stored with the gesture, if any
    """

    path: GesturePath
    stroke_width: float | None = None


def read_image_bytes(image_path: Path) -> bytes:
    """Read an encoded image file.

    Args:
        image_path: Path to the image

    Returns:
        Raw file bytes (decoding happens in the crop engine)

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not image_path.exists():
        raise FileNotFoundError(f"Image file not found: {image_path}")
    return image_path.read_bytes()


def _parse_point(raw: Any) -> Point:
    if isinstance(raw, dict):
        return Point.from_dict(raw)
    if isinstance(raw, list | tuple) and len(raw) == 2:
        return Point(float(raw[0]), float(raw[1]))
    raise GestureError(f"Invalid gesture point: {raw!r}")


def parse_gesture(data: Any) -> GestureRecording:
    """Build a gesture recording from decoded JSON.

    Args:
        data: A list of points, or a dict with ``points`` and optional
            ``stroke_width``

    Returns:
        GestureRecording with a finalized path

    Raises:
        GestureError: If the data does not describe a gesture
    """
    stroke_width: float | None = None
    if isinstance(data, dict):
        if "points" not in data:
            raise GestureError("Gesture data has no 'points' list")
        if data.get("stroke_width") is not None:
            stroke_width = float(data["stroke_width"])
        raw_points = data["points"]
    else:
        raw_points = data

    if not isinstance(raw_points, list):
        raise GestureError("Gesture points must be a list")

    try:
        points = [_parse_point(p) for p in raw_points]
    except (KeyError, TypeError, ValueError) as e:
        raise GestureError(f"Invalid gesture point: {e}") from e

    return GestureRecording(path=GesturePath.from_points(points), stroke_width=stroke_width)


def read_gesture(gesture_path: Path) -> GestureRecording:
    """Load a gesture recording from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        GestureError: If the file is not valid gesture JSON
    """
    if not gesture_path.exists():
        raise FileNotFoundError(f"Gesture file not found: {gesture_path}")

    try:
        data = json.loads(gesture_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GestureError(f"Gesture file is not valid JSON: {e}") from e

    return parse_gesture(data)
