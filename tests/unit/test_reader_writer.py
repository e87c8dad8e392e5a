"""Unit tests for the I/O layer.

Tests for the gesture/image readers and the ArtifactWriter.
"""

import json
import threading
from pathlib import Path
from unittest.mock import patch

import pytest

from swipecrop.domain import CroppedArtifact, ImageFormat, Point
from swipecrop.exceptions import ArtifactWriteError, GestureError
from swipecrop.io import ArtifactWriter, parse_gesture, read_gesture, read_image_bytes


def _artifact(fmt: ImageFormat = ImageFormat.PNG) -> CroppedArtifact:
    return CroppedArtifact(data=b"encoded-bytes", format=fmt, width=4, height=4)


class TestReaders:
    """Tests for read_image_bytes, parse_gesture and read_gesture."""

    def test_read_image_bytes(self, tmp_path: Path) -> None:
        """Test reading raw image bytes."""
        image_path = tmp_path / "photo.png"
        image_path.write_bytes(b"\x89PNG data")
        assert read_image_bytes(image_path) == b"\x89PNG data"

    def test_read_missing_image(self, tmp_path: Path) -> None:
        """Test that a missing image raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_image_bytes(tmp_path / "missing.png")

    def test_parse_pair_list(self) -> None:
        """Test the plain list-of-pairs format."""
        recording = parse_gesture([[10, 10], [50, 10], [50, 50]])
        assert recording.path.points == [Point(10, 10), Point(50, 10), Point(50, 50)]
        assert recording.path.is_finalized
        assert recording.stroke_width is None

    def test_parse_object_format(self) -> None:
        """Test the object format with dict points and a stroke width."""
        recording = parse_gesture(
            {"points": [{"x": 1, "y": 2}, {"x": 3.5, "y": 4}], "stroke_width": 12}
        )
        assert recording.path.points == [Point(1, 2), Point(3.5, 4)]
        assert recording.stroke_width == 12.0

    def test_parse_empty_points(self) -> None:
        """Test that an empty gesture is allowed."""
        assert parse_gesture([]).path.is_empty()

    @pytest.mark.parametrize(
        "data",
        [
            {"stroke_width": 16},
            {"points": "10,10"},
            [[1, 2, 3]],
            [{"x": 1}],
            [["a", "b"]],
            "points",
        ],
    )
    def test_parse_invalid(self, data: object) -> None:
        """Test that malformed gesture data raises GestureError."""
        with pytest.raises(GestureError):
            parse_gesture(data)

    def test_read_gesture_file(self, tmp_path: Path) -> None:
        """Test loading a gesture from a JSON file."""
        gesture_path = tmp_path / "swipe.json"
        gesture_path.write_text(json.dumps({"points": [[0, 0], [64, 64]], "stroke_width": 8}))
        recording = read_gesture(gesture_path)
        assert len(recording.path) == 2
        assert recording.stroke_width == 8.0

    def test_read_gesture_invalid_json(self, tmp_path: Path) -> None:
        """Test that invalid JSON raises GestureError."""
        gesture_path = tmp_path / "swipe.json"
        gesture_path.write_text("{not json")
        with pytest.raises(GestureError, match="not valid JSON"):
            read_gesture(gesture_path)

    def test_read_gesture_missing(self, tmp_path: Path) -> None:
        """Test that a missing gesture file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_gesture(tmp_path / "missing.json")


class TestArtifactWriter:
    """Tests for ArtifactWriter class."""

    def test_get_artifact_name(self) -> None:
        """Test filename construction."""
        assert (
            ArtifactWriter.get_artifact_name(1700000000000, "png")
            == "cropped_image_1700000000000.png"
        )
        assert (
            ArtifactWriter.get_artifact_name(1700000000000, "jpg", 2)
            == "cropped_image_1700000000000_2.jpg"
        )

    def test_default_output_dir_is_temp(self) -> None:
        """Test that the system temp directory is used by default."""
        with patch("swipecrop.io.writer.tempfile.gettempdir", return_value="/tmp/swipecrop"):
            writer = ArtifactWriter()
        assert writer.output_dir == Path("/tmp/swipecrop")

    def test_write_uses_timestamp_name(self, tmp_path: Path) -> None:
        """Test writing with a generated name."""
        writer = ArtifactWriter(tmp_path, clock=lambda: 1234)
        path = writer.write(_artifact(ImageFormat.JPEG))
        assert path == tmp_path / "cropped_image_1234.jpg"
        assert path.read_bytes() == b"encoded-bytes"

    def test_same_millisecond_gets_suffix(self, tmp_path: Path) -> None:
        """Test that rapid writes never overwrite each other."""
        writer = ArtifactWriter(tmp_path, clock=lambda: 1234)
        first = writer.write(_artifact())
        second = writer.write(_artifact())
        third = writer.write(_artifact())
        assert [p.name for p in (first, second, third)] == [
            "cropped_image_1234.png",
            "cropped_image_1234_1.png",
            "cropped_image_1234_2.png",
        ]

    def test_clock_going_backwards(self, tmp_path: Path) -> None:
        """Test that timestamps never decrease."""
        ticks = iter([2000, 1500])
        writer = ArtifactWriter(tmp_path, clock=lambda: next(ticks))
        first = writer.next_path("png")
        second = writer.next_path("png")
        assert first.name == "cropped_image_2000.png"
        assert second.name == "cropped_image_2000_1.png"

    def test_existing_file_is_skipped(self, tmp_path: Path) -> None:
        """Test that files left from an earlier run are not overwritten."""
        (tmp_path / "cropped_image_1234.png").write_bytes(b"old")
        writer = ArtifactWriter(tmp_path, clock=lambda: 1234)
        path = writer.write(_artifact())
        assert path.name == "cropped_image_1234_1.png"
        assert (tmp_path / "cropped_image_1234.png").read_bytes() == b"old"

    def test_concurrent_writes_are_unique(self, tmp_path: Path) -> None:
        """Test that writes from many threads get distinct paths."""
        writer = ArtifactWriter(tmp_path, clock=lambda: 42)
        paths: list[Path] = []
        lock = threading.Lock()

        def worker() -> None:
            path = writer.write(_artifact())
            with lock:
                paths.append(path)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(paths)) == 16

    def test_explicit_path_creates_parents(self, tmp_path: Path) -> None:
        """Test writing to an explicit path in a new directory."""
        target = tmp_path / "nested" / "out.png"
        path = ArtifactWriter(tmp_path).write(_artifact(), path=target)
        assert path == target
        assert target.exists()

    def test_write_failure(self, tmp_path: Path) -> None:
        """Test that I/O errors raise ArtifactWriteError."""
        blocker = tmp_path / "file"
        blocker.write_bytes(b"")
        with pytest.raises(ArtifactWriteError):
            ArtifactWriter(tmp_path).write(_artifact(), path=blocker / "out.png")

    def test_delete(self, tmp_path: Path) -> None:
        """Test removing written artifacts, including missing ones."""
        writer = ArtifactWriter(tmp_path)
        path = writer.write(_artifact())
        writer.delete(path)
        assert not path.exists()
        writer.delete(path)
