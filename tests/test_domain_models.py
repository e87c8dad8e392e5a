"""Tests for domain models to verify they work correctly."""

import pytest
from PIL import Image

from swipecrop.domain import (
    Alignment,
    CropFailure,
    CroppedArtifact,
    FailureKind,
    FitPolicy,
    FittedSizes,
    GesturePath,
    ImageBuffer,
    ImageFormat,
    Point,
    Rect,
    Size,
)
from swipecrop.exceptions import (
    EncodeError,
    GestureError,
    InvalidCropRegionError,
    InvalidGeometryError,
    TooSmallError,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(10.0, 20.0)
        assert p.x == 10.0
        assert p.y == 20.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(10.0, 20.0).to_tuple() == (10.0, 20.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(12.5, 40.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(10.0, 20.0)
        with pytest.raises(AttributeError):
            p.x = 30.0  # type: ignore


class TestSize:
    """Tests for Size class."""

    def test_negative_size_rejected(self) -> None:
        """Test that negative dimensions raise InvalidGeometryError."""
        with pytest.raises(InvalidGeometryError):
            Size(-1.0, 10.0)

    def test_has_area(self) -> None:
        """Test has_area for zero and positive sizes."""
        assert Size(10, 10).has_area
        assert not Size(0, 10).has_area
        assert not Size(10, 0).has_area

    def test_parse(self) -> None:
        """Test parsing WIDTHxHEIGHT text."""
        assert Size.parse("400x300") == Size(400.0, 300.0)
        assert Size.parse("1280X720") == Size(1280.0, 720.0)

    @pytest.mark.parametrize("text", ["400", "400x", "axb", "1x2x3"])
    def test_parse_invalid(self, text: str) -> None:
        """Test that malformed size text raises InvalidGeometryError."""
        with pytest.raises(InvalidGeometryError):
            Size.parse(text)

    def test_sizes_are_hashable(self) -> None:
        """Test that equal sizes hash alike (required for fit caching)."""
        assert hash(Size(400, 400)) == hash(Size(400.0, 400.0))


class TestRect:
    """Tests for Rect class."""

    def test_dimensions(self) -> None:
        """Test width and height."""
        r = Rect(10, 20, 110, 70)
        assert r.width == 100
        assert r.height == 50
        assert not r.is_empty

    def test_inverted_rect_rejected(self) -> None:
        """Test that right < left raises InvalidGeometryError."""
        with pytest.raises(InvalidGeometryError):
            Rect(100, 0, 10, 10)

    def test_zero(self) -> None:
        """Test the zero rectangle."""
        r = Rect.zero()
        assert r.to_tuple() == (0.0, 0.0, 0.0, 0.0)
        assert r.is_empty

    def test_from_ltwh(self) -> None:
        """Test building from origin and extent."""
        assert Rect.from_ltwh(5, 5, 10, 20) == Rect(5, 5, 15, 25)

    def test_translate_and_scale(self) -> None:
        """Test translate and scale transformations."""
        r = Rect(10, 10, 20, 30).translate(-10, -10).scale(2, 3)
        assert r == Rect(0, 0, 20, 60)

    def test_clamp_to(self) -> None:
        """Test clamping into image bounds."""
        r = Rect(-50, 20, 500, 900).clamp_to(Size(400, 300))
        assert r == Rect(0, 20, 400, 300)

    def test_contains_with_tolerance(self) -> None:
        """Test point containment with tolerance."""
        r = Rect(0, 0, 10, 10)
        assert r.contains(Point(10, 10))
        assert not r.contains(Point(12, 5))
        assert r.contains(Point(12, 5), tolerance=2)


class TestAlignment:
    """Tests for Alignment class."""

    def test_center_along_size(self) -> None:
        """Test that CENTER sits at the middle of a box."""
        assert Alignment.CENTER.along_size(Size(400, 200)) == (200.0, 100.0)

    def test_corners_along_size(self) -> None:
        """Test corner alignments."""
        assert Alignment.TOP_LEFT.along_size(Size(400, 200)) == (0.0, 0.0)
        assert Alignment.BOTTOM_RIGHT.along_size(Size(400, 200)) == (400.0, 200.0)

    def test_out_of_range_rejected(self) -> None:
        """Test that alignments outside [-1, 1] are rejected."""
        with pytest.raises(InvalidGeometryError):
            Alignment(1.5, 0.0)


class TestGesturePath:
    """Tests for GesturePath class."""

    def test_empty_path(self) -> None:
        """Test a freshly started gesture."""
        path = GesturePath()
        assert path.is_empty()
        assert len(path) == 0
        assert not path.is_finalized

    def test_append_preserves_order(self) -> None:
        """Test that points keep drawing order."""
        path = GesturePath()
        path.append(Point(5, 5))
        path.append(Point(1, 1))
        path.append(Point(3, 3))
        assert [p.x for p in path] == [5, 1, 3]

    def test_append_after_finalize_rejected(self) -> None:
        """Test that a committed gesture is read-only."""
        path = GesturePath()
        path.append(Point(1, 1))
        path.finalize()
        with pytest.raises(GestureError):
            path.append(Point(2, 2))

    def test_from_points_accepts_tuples(self) -> None:
        """Test building a finalized path from (x, y) pairs."""
        path = GesturePath.from_points([(1, 2), Point(3, 4)])
        assert path.is_finalized
        assert path.points == [Point(1.0, 2.0), Point(3.0, 4.0)]

    def test_serialization(self) -> None:
        """Test path serialization and deserialization."""
        path = GesturePath.from_points([(10, 10), (50, 10), (50, 50)])
        restored = GesturePath.from_dict(path.to_dict())
        assert restored.points == path.points
        assert restored.is_finalized


class TestFitTypes:
    """Tests for FitPolicy and FittedSizes."""

    def test_policy_values(self) -> None:
        """Test that every policy is reachable from its string value."""
        names = {"fill", "contain", "cover", "fit_width", "fit_height", "none", "scale_down"}
        assert {p.value for p in FitPolicy} == names
        assert FitPolicy("scale_down") is FitPolicy.SCALE_DOWN

    def test_fitted_sizes_equality(self) -> None:
        """Test FittedSizes value semantics."""
        a = FittedSizes(Size(10, 10), Size(5, 5))
        b = FittedSizes(Size(10.0, 10.0), Size(5.0, 5.0))
        assert a == b


class TestImageTypes:
    """Tests for ImageFormat, ImageBuffer and CroppedArtifact."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("png", ImageFormat.PNG),
            ("PNG", ImageFormat.PNG),
            ("jpg", ImageFormat.JPEG),
            ("jpeg", ImageFormat.JPEG),
            (".JPG", ImageFormat.JPEG),
        ],
    )
    def test_format_parse(self, name: str, expected: ImageFormat) -> None:
        """Test format name parsing."""
        assert ImageFormat.parse(name) is expected

    def test_format_parse_unsupported(self) -> None:
        """Test that unknown formats raise EncodeError."""
        with pytest.raises(EncodeError):
            ImageFormat.parse("gif")

    def test_format_extension(self) -> None:
        """Test file extensions."""
        assert ImageFormat.PNG.extension == "png"
        assert ImageFormat.JPEG.extension == "jpg"

    def test_image_buffer_size(self) -> None:
        """Test buffer dimensions."""
        buffer = ImageBuffer(Image.new("RGB", (64, 48)))
        assert (buffer.width, buffer.height) == (64, 48)
        assert buffer.size == Size(64.0, 48.0)

    def test_artifact_repr_hides_bytes(self) -> None:
        """Test that the artifact repr does not dump encoded data."""
        artifact = CroppedArtifact(b"\x89PNG" * 100, ImageFormat.PNG, 40, 10)
        assert "bytes=400" in repr(artifact)
        assert artifact.extension == "png"


class TestCropFailure:
    """Tests for CropFailure."""

    def test_from_too_small_error(self) -> None:
        """Test building a failure from a stage exception."""
        failure = CropFailure.from_error(TooSmallError(20, 20, 32))
        assert failure.kind is FailureKind.TOO_SMALL
        assert "too small" in failure.message
        assert failure.is_user_correctable

    def test_invalid_region_is_user_correctable(self) -> None:
        """Test that an empty selection is a user-correctable failure."""
        failure = CropFailure.from_error(InvalidCropRegionError(Rect.zero()))
        assert failure.kind is FailureKind.INVALID_CROP_REGION
        assert failure.is_user_correctable

    def test_non_pipeline_error_rejected(self) -> None:
        """Test that errors without a failure kind cannot become failures."""
        with pytest.raises(ValueError):
            CropFailure.from_error(GestureError("nope"))
