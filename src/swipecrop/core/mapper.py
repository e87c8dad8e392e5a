"""Display-space to image-space mapping.

Inverts the fit transform used to show an image so that a rectangle drawn over
the display area can be expressed in the original image's pixel coordinates.
"""

from swipecrop.core.fit import apply_fit
from swipecrop.domain import Alignment, FitPolicy, Rect, Size
from swipecrop.exceptions import InvalidGeometryError


def map_to_image_space(
    screen_rect: Rect,
    image_size: Size,
    display_size: Size,
    policy: FitPolicy = FitPolicy.CONTAIN,
    alignment: Alignment = Alignment.CENTER,
) -> Rect:
    """Convert a display-space rectangle into image pixel coordinates.

    The fitted image is placed inside the display area according to
    ``alignment``. The rectangle is translated into the fitted image's frame
    and scaled by the ratio between the image and its on-screen footprint.

    Args:
        screen_rect: Rectangle in display coordinates
        image_size: Original image size
        display_size: Size of the display area
        policy: Fit policy used to display the image
        alignment: Placement of the image inside the display area

    Returns:
        Rectangle in image coordinates, clamped to ``[0, w] x [0, h]``. May
        have zero area when the rectangle lies outside the image.

    Raises:
        InvalidGeometryError: If the fitted footprint has zero width or height
    """
    fitted = apply_fit(policy, image_size, display_size)
    if not fitted.destination.has_area:
        raise InvalidGeometryError(
            f"fitted image {fitted.destination.width:g}x{fitted.destination.height:g} "
            "has no area"
        )

    display_x, display_y = alignment.along_size(display_size)
    footprint_x, footprint_y = alignment.along_size(fitted.destination)
    offset_x, offset_y = display_x - footprint_x, display_y - footprint_y

    scale_x = image_size.width / fitted.destination.width
    scale_y = image_size.height / fitted.destination.height

    image_rect = screen_rect.translate(-offset_x, -offset_y).scale(scale_x, scale_y)
    return image_rect.clamp_to(image_size)
