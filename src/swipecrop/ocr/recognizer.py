"""Text recognition hand-off for cropped artifacts.

The crop pipeline never runs OCR itself. This module is the glue a caller uses
after a successful crop: materialize the artifact, hand the file to an OCR
engine, and clean the file up again.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import pytesseract
import structlog
from PIL import Image

from swipecrop.config import OcrConfig
from swipecrop.domain import CroppedArtifact
from swipecrop.exceptions import ArtifactWriteError, RecognitionError
from swipecrop.io import ArtifactWriter

logger = structlog.get_logger("swipecrop.ocr")


class TextRecognizer(Protocol):
    """An OCR engine that reads text from an image file."""

    def recognize(self, image_path: Path) -> str:
        """Return the text found in the image (empty if none).

        Raises:
            RecognitionError: If the engine fails
        """
        ...


class TesseractRecognizer:
    """Text recognizer backed by the Tesseract engine via pytesseract."""

    def __init__(
        self,
        language: str = "eng",
        config: str = "",
        tesseract_cmd: str | None = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            language: Tesseract language code(s)
            config: Extra Tesseract command-line options
            tesseract_cmd: Path to the tesseract executable (None = PATH)
        """
        self.language = language
        self.config = config
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @classmethod
    def from_config(cls, config: OcrConfig) -> "TesseractRecognizer":
        return cls(
            language=config.language,
            config=config.config,
            tesseract_cmd=config.tesseract_cmd,
        )

    def recognize(self, image_path: Path) -> str:
        try:
            with Image.open(image_path) as image:
                text = pytesseract.image_to_string(
                    image, lang=self.language, config=self.config
                )
        except pytesseract.TesseractNotFoundError as e:
            raise RecognitionError("tesseract is not installed or not on PATH") from e
        except (pytesseract.TesseractError, OSError, RuntimeError) as e:
            raise RecognitionError(str(e)) from e
        return text.strip()


@dataclass(frozen=True)
class RecognitionResult:
    """Outcome of reading text from an artifact.

    Attributes:
        text: Recognized text (empty when nothing was found or on failure)
        error: The failure, if recognition did not complete
    """

    text: str = ""
    error: RecognitionError | ArtifactWriteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_text(
    artifact: CroppedArtifact,
    recognizer: TextRecognizer,
    writer: ArtifactWriter | None = None,
) -> RecognitionResult:
    """Run OCR on a cropped artifact.

    The artifact is written to a temporary file for the engine and the file is
    deleted afterwards, whether or not recognition succeeded.

    Args:
        artifact: Encoded crop
        recognizer: OCR engine
        writer: Where to materialize the artifact (temp dir writer if None)

    Returns:
        RecognitionResult with the text or the failure
    """
    writer = writer or ArtifactWriter()

    try:
        image_path = writer.write(artifact)
    except ArtifactWriteError as e:
        logger.warning("Could not materialize artifact for OCR", error=str(e))
        return RecognitionResult(error=e)

    try:
        text = recognizer.recognize(image_path)
    except RecognitionError as e:
        logger.warning("Text recognition failed", path=str(image_path), error=str(e))
        return RecognitionResult(error=e)
    finally:
        writer.delete(image_path)

    logger.debug("Text recognized", path=str(image_path), characters=len(text))
    return RecognitionResult(text=text)
