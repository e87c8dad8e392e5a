"""End-to-end test that crops a drawn-over image and verifies the written file."""

import io
from pathlib import Path

import pytest
from PIL import Image

from swipecrop.core import CropPipeline
from swipecrop.domain import CroppedArtifact, FitPolicy, ImageFormat, Size
from swipecrop.io import ArtifactWriter, parse_gesture

RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def two_tone_image() -> bytes:
    """A 1000x500 image: left half red, right half blue."""
    image = Image.new("RGB", (1000, 500), RED)
    image.paste(BLUE, (500, 0, 1000, 500))
    output = io.BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()


class TestCropEndToEnd:
    """Tests running gesture → pipeline → writer → decode."""

    def test_swipe_over_right_half(self, two_tone_image: bytes, tmp_path: Path) -> None:
        """Test that a swipe over the blue half of a letterboxed image crops blue pixels."""
        # 1000x500 shown CONTAIN in 400x400: footprint y 100..300, scale 2.5
        recording = parse_gesture(
            {"points": [[220, 120], [380, 120], [380, 280]], "stroke_width": 16}
        )
        result = CropPipeline().run(
            raw_image=two_tone_image,
            path=recording.path,
            stroke_width=recording.stroke_width,
            display_size=Size(400, 400),
            policy=FitPolicy.CONTAIN,
            output_format=ImageFormat.PNG,
        )
        assert isinstance(result, CroppedArtifact)
        assert (result.width, result.height) == (400, 400)

        path = ArtifactWriter(tmp_path).write(result)
        assert path.name.startswith("cropped_image_")
        assert path.suffix == ".png"

        with Image.open(path) as written:
            assert written.size == (400, 400)
            colors = written.convert("RGB").getcolors()
        assert colors == [(400 * 400, BLUE)]

    def test_cover_selection_scales_per_axis(
        self, two_tone_image: bytes, tmp_path: Path
    ) -> None:
        """Test that COVER crops scale by image size over the display footprint."""
        # 1000x500 shown COVER in 400x400: scale 2.5 across, 1.25 down
        recording = parse_gesture([[0, 0], [240, 400]])
        result = CropPipeline().run(
            raw_image=two_tone_image,
            path=recording.path,
            stroke_width=0,
            display_size=Size(400, 400),
            policy=FitPolicy.COVER,
            output_format=ImageFormat.PNG,
        )
        assert isinstance(result, CroppedArtifact)
        assert (result.width, result.height) == (600, 500)

        with Image.open(ArtifactWriter(tmp_path).write(result)) as written:
            assert written.getpixel((0, 0)) == RED
            assert written.getpixel((599, 499)) == BLUE

    def test_jpeg_round_trip(self, two_tone_image: bytes, tmp_path: Path) -> None:
        """Test JPEG output written with the default naming scheme."""
        recording = parse_gesture([[0, 100], [400, 300]])
        result = CropPipeline().run(
            raw_image=two_tone_image,
            path=recording.path,
            stroke_width=0,
            display_size=Size(400, 400),
        )
        assert isinstance(result, CroppedArtifact)
        assert result.format is ImageFormat.JPEG

        path = ArtifactWriter(tmp_path).write(result)
        assert path.suffix == ".jpg"
        with Image.open(path) as written:
            assert written.format == "JPEG"
            assert written.size == (1000, 500)
