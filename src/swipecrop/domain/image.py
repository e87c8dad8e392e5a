"""Pixel buffers and encoded crop artifacts."""

from dataclasses import dataclass
from enum import Enum

from PIL import Image

from swipecrop.domain.geometry import Size
from swipecrop.exceptions import EncodeError


class ImageFormat(str, Enum):
    """Encoded output formats."""

    PNG = "png"
    JPEG = "jpeg"

    @classmethod
    def parse(cls, value: "str | ImageFormat") -> "ImageFormat":
        """Resolve a format name (``png``, ``jpg`` or ``jpeg``).

        Raises:
            EncodeError: If the format is not supported
        """
        if isinstance(value, ImageFormat):
            return value
        name = value.strip().lower().lstrip(".")
        if name == "png":
            return cls.PNG
        if name in ("jpg", "jpeg"):
            return cls.JPEG
        raise EncodeError(f"unsupported output format '{value}'")

    @property
    def extension(self) -> str:
        """File extension without the dot."""
        return "jpg" if self is ImageFormat.JPEG else "png"

    @property
    def pil_format(self) -> str:
        """Format name understood by Pillow."""
        return self.name


@dataclass
class ImageBuffer:
    """Decoded pixels owned by a single crop invocation.

    Attributes:
        image: Fully loaded Pillow image
        source_format: Format the pixels were decoded from (e.g. "PNG")
    """

    image: Image.Image
    source_format: str | None = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Size:
        return Size(float(self.image.width), float(self.image.height))


@dataclass(frozen=True)
class CroppedArtifact:
    """Encoded crop handed back to the caller.

    Attributes:
        data: Encoded bytes
        format: Encoding of ``data``
        width: Pixel width of the crop
        height: Pixel height of the crop
    """

    data: bytes
    format: ImageFormat
    width: int
    height: int

    @property
    def extension(self) -> str:
        return self.format.extension

    def __repr__(self) -> str:
        return (
            f"CroppedArtifact(format={self.format.value}, "
            f"width={self.width}, height={self.height}, bytes={len(self.data)})"
        )
