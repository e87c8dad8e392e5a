"""Fit transform: how an image is sized inside its display area.

``apply_fit`` is a pure function of its inputs. Results are memoized, since the
same (policy, image size, display size) triple is resolved for every gesture
drawn over one image.
"""

from functools import lru_cache

from swipecrop.domain import FitPolicy, FittedSizes, Size
from swipecrop.exceptions import InvalidGeometryError

_RATIO_POLICIES = frozenset({FitPolicy.CONTAIN, FitPolicy.COVER, FitPolicy.SCALE_DOWN})


def _contain(source: Size, destination: Size) -> Size:
    if destination.aspect_ratio > source.aspect_ratio:
        return Size(source.width * destination.height / source.height, destination.height)
    return Size(destination.width, source.height * destination.width / source.width)


@lru_cache(maxsize=256)
def apply_fit(policy: FitPolicy, source: Size, destination: Size) -> FittedSizes:
    """Resolve the source and destination sizes for a fit policy.

    Args:
        policy: Fit policy used to display the image
        source: Original image size
        destination: Display area size

    Returns:
        FittedSizes where ``source`` is the visible part of the image and
        ``destination`` is the footprint it occupies in the display area

    Raises:
        InvalidGeometryError: If the source has no area, or the destination has
            no area under a policy that needs its aspect ratio

    Examples:
        >>> apply_fit(FitPolicy.CONTAIN, Size(1000, 500), Size(400, 400)).destination
        Size(width=400, height=200.0)
    """
    if not source.has_area:
        raise InvalidGeometryError(
            f"source size {source.width:g}x{source.height:g} has no area"
        )
    if policy in _RATIO_POLICIES and not destination.has_area:
        raise InvalidGeometryError(
            f"destination size {destination.width:g}x{destination.height:g} "
            f"has no area for '{policy.value}'"
        )

    if policy is FitPolicy.FILL or policy is FitPolicy.NONE:
        return FittedSizes(source, destination)

    if policy is FitPolicy.CONTAIN:
        return FittedSizes(source, _contain(source, destination))

    if policy is FitPolicy.COVER:
        if destination.aspect_ratio > source.aspect_ratio:
            visible = Size(source.width, source.width * destination.height / destination.width)
        else:
            visible = Size(source.height * destination.width / destination.height, source.height)
        return FittedSizes(visible, destination)

    if policy is FitPolicy.FIT_WIDTH:
        return FittedSizes(
            source,
            Size(destination.width, source.height * destination.width / source.width),
        )

    if policy is FitPolicy.FIT_HEIGHT:
        return FittedSizes(
            source,
            Size(source.width * destination.height / source.height, destination.height),
        )

    if policy is FitPolicy.SCALE_DOWN:
        fitted = _contain(source, destination)
        if source.width < fitted.width:
            fitted = source
        return FittedSizes(source, fitted)

    raise InvalidGeometryError(f"unknown fit policy {policy!r}")
