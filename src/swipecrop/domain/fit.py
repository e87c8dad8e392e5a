"""Fit policies for placing an image inside a display area."""

from dataclasses import dataclass
from enum import Enum

from swipecrop.domain.geometry import Size


class FitPolicy(str, Enum):
    """How a source size is scaled into a destination size.

    - FILL: Stretch to the destination, ignoring aspect ratio
    - CONTAIN: As large as possible while staying fully inside the destination
    - COVER: As small as possible while covering the whole destination
    - FIT_WIDTH: Match the destination width
    - FIT_HEIGHT: Match the destination height
    - NONE: Take the destination as-is
    - SCALE_DOWN: Like CONTAIN, but never enlarge the source
    """

    FILL = "fill"
    CONTAIN = "contain"
    COVER = "cover"
    FIT_WIDTH = "fit_width"
    FIT_HEIGHT = "fit_height"
    NONE = "none"
    SCALE_DOWN = "scale_down"


@dataclass(frozen=True, slots=True)
class FittedSizes:
    """Sizes resolved by applying a fit policy.

    Attributes:
        source: Portion of the source that is shown
        destination: Footprint the shown portion occupies in the display area
    """

    source: Size
    destination: Size
