"""Image crop engine.

Decodes raw bytes into an owned pixel buffer, cuts an image-space rectangle
out of it and re-encodes the result. Each call works on its own buffers, so
the engine is safe to use from any worker thread.
"""

import io

from PIL import Image, UnidentifiedImageError

from swipecrop.domain import ImageBuffer, ImageFormat, Rect
from swipecrop.exceptions import DecodeError, EncodeError, InvalidCropRegionError

DEFAULT_JPEG_QUALITY = 85

# Modes JPEG can store directly; everything else is flattened to RGB first.
_JPEG_MODES = frozenset({"L", "RGB", "CMYK"})


def _clamp_int(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


class ImageCropEngine:
    """Decodes, crops and encodes images with Pillow.

    Example:
        engine = ImageCropEngine()
        buffer = engine.decode(raw_bytes)
        cropped = engine.crop(buffer, Rect(10, 10, 110, 60))
        data = engine.encode(cropped, ImageFormat.PNG)
    """

    def __init__(self, jpeg_quality: int = DEFAULT_JPEG_QUALITY) -> None:
        """Initialize the crop engine.

        Args:
            jpeg_quality: Default JPEG quality used when encode() gets none
        """
        self.jpeg_quality = jpeg_quality

    def decode(self, data: bytes) -> ImageBuffer:
        """Decode an encoded image into a fully loaded buffer.

        Args:
            data: Encoded image bytes (any format Pillow can read)

        Returns:
            ImageBuffer owning the decoded pixels

        Raises:
            DecodeError: If the bytes are empty, corrupt or unsupported
        """
        if not data:
            raise DecodeError("no image data")

        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                # Detach from the BytesIO so the buffer owns its pixels.
                decoded = image.copy()
                source_format = image.format
        except UnidentifiedImageError as e:
            raise DecodeError("unrecognized image format") from e
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError(str(e)) from e

        if decoded.width == 0 or decoded.height == 0:
            raise DecodeError("decoded image is empty")

        return ImageBuffer(decoded, source_format=source_format)

    def crop(self, buffer: ImageBuffer, rect: Rect) -> ImageBuffer:
        """Cut a rectangle out of a buffer.

        The origin is clamped into the buffer and the extent is shrunk so the
        crop never reads outside it. Coordinates are truncated to whole pixels.

        Args:
            buffer: Source pixels (left untouched)
            rect: Crop rectangle in image coordinates

        Returns:
            New buffer holding the cropped pixels

        Raises:
            InvalidCropRegionError: If the rectangle has no area
        """
        if rect.width <= 0 or rect.height <= 0:
            raise InvalidCropRegionError(rect)

        left = _clamp_int(int(rect.left), 0, buffer.width - 1)
        top = _clamp_int(int(rect.top), 0, buffer.height - 1)
        width = _clamp_int(int(rect.width), 1, buffer.width - left)
        height = _clamp_int(int(rect.height), 1, buffer.height - top)

        cropped = buffer.image.crop((left, top, left + width, top + height))
        return ImageBuffer(cropped)

    def encode(
        self,
        buffer: ImageBuffer,
        format: ImageFormat | str = ImageFormat.PNG,
        quality: int | None = None,
    ) -> bytes:
        """Encode a buffer.

        Args:
            buffer: Pixels to encode
            format: PNG (lossless) or JPEG
            quality: JPEG quality 1-100 (default: engine's jpeg_quality)

        Returns:
            Encoded bytes

        Raises:
            EncodeError: If the format or quality is unsupported, or encoding fails
        """
        image_format = ImageFormat.parse(format)
        image = buffer.image
        save_kwargs: dict[str, object] = {}

        if image_format is ImageFormat.JPEG:
            quality = self.jpeg_quality if quality is None else quality
            if not 1 <= quality <= 100:
                raise EncodeError(f"JPEG quality must be between 1 and 100, got {quality}")
            save_kwargs["quality"] = quality

        output = io.BytesIO()
        try:
            if image_format is ImageFormat.JPEG and image.mode not in _JPEG_MODES:
                image = image.convert("RGB")
            image.save(output, format=image_format.pil_format, **save_kwargs)
        except (OSError, ValueError, KeyError) as e:
            raise EncodeError(str(e)) from e

        return output.getvalue()
