"""Artifact writer for materializing crops on disk.

The OCR engine and most callers want a file path rather than bytes, so crops
are written as ``cropped_image_<timestamp_ms>.<ext>`` files, by default in the
system temp directory.
"""

import tempfile
import threading
import time
from collections.abc import Callable
from pathlib import Path

from swipecrop.domain import CroppedArtifact
from swipecrop.exceptions import ArtifactWriteError

FILENAME_PREFIX = "cropped_image"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ArtifactWriter:
    """Writes cropped artifacts to uniquely named files.

    Timestamps handed out by one writer never go backwards, and a second
    artifact within the same millisecond gets a ``_<n>`` suffix, so rapid
    repeated crops never overwrite each other.

    Example:
        writer = ArtifactWriter()
        path = writer.write(artifact)
        ...
        writer.delete(path)
    """

    def __init__(
        self,
        output_dir: Path | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        """Initialize the artifact writer.

        Args:
            output_dir: Directory to write into (system temp dir if None)
            clock: Millisecond clock, replaceable for testing
        """
        self._output_dir = output_dir or Path(tempfile.gettempdir())
        self._clock = clock
        self._lock = threading.Lock()
        self._last_timestamp = -1
        self._sequence = 0

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    @staticmethod
    def get_artifact_name(timestamp_ms: int, extension: str, sequence: int = 0) -> str:
        """Build an artifact filename.

        Converts: (1700000000000, "png")    -> cropped_image_1700000000000.png
                  (1700000000000, "jpg", 2) -> cropped_image_1700000000000_2.jpg

        Args:
            timestamp_ms: Millisecond timestamp
            extension: File extension without the dot
            sequence: Disambiguator for names within the same millisecond

        Returns:
            Filename
        """
        suffix = f"_{sequence}" if sequence else ""
        return f"{FILENAME_PREFIX}_{timestamp_ms}{suffix}.{extension}"

    def next_path(self, extension: str) -> Path:
        """Reserve the next unique artifact path.

        Args:
            extension: File extension without the dot

        Returns:
            Path that no earlier call returned and that does not exist yet
        """
        with self._lock:
            timestamp = max(self._clock(), self._last_timestamp)
            if timestamp == self._last_timestamp:
                self._sequence += 1
            else:
                self._last_timestamp = timestamp
                self._sequence = 0

            path = self._output_dir / self.get_artifact_name(timestamp, extension, self._sequence)
            while path.exists():
                self._sequence += 1
                path = self._output_dir / self.get_artifact_name(
                    timestamp, extension, self._sequence
                )
            return path

    def write(self, artifact: CroppedArtifact, path: Path | None = None) -> Path:
        """Write an artifact to disk.

        Args:
            artifact: Encoded crop
            path: Explicit destination (a fresh unique path if None)

        Returns:
            Path the artifact was written to

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        if path is None:
            path = self.next_path(artifact.extension)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(artifact.data)
                f.flush()
        except OSError as e:
            raise ArtifactWriteError(str(path), str(e)) from e

        return path

    def delete(self, path: Path) -> None:
        """Remove a materialized artifact; missing files are ignored."""
        path.unlink(missing_ok=True)
