"""OCR glue for swipecrop.

Hands cropped artifacts to a text recognition engine. The engine is a black
box behind the TextRecognizer protocol; TesseractRecognizer is the bundled
implementation.
"""

from swipecrop.ocr.recognizer import (
    RecognitionResult,
    TesseractRecognizer,
    TextRecognizer,
    read_text,
)

__all__ = [
    "RecognitionResult",
    "TesseractRecognizer",
    "TextRecognizer",
    "read_text",
]
