"""CLI application entry point for swipecrop.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from swipecrop import __version__
from swipecrop.cli.output import (
    console,
    print_error,
    print_gesture_info,
    print_header,
    print_image_info,
    print_recognized_text,
    print_step,
    print_success,
)
from swipecrop.config import (
    CropConfig,
    LoggingConfig,
    OcrConfig,
    OutputConfig,
    SwipeCropSettings,
)
from swipecrop.core import CropPipeline, ImageCropEngine
from swipecrop.domain import CropFailure, FailureKind, FitPolicy, ImageFormat, Size
from swipecrop.exceptions import (
    EncodeError,
    GestureError,
    InvalidGeometryError,
    RecognitionError,
    SwipeCropError,
)
from swipecrop.io import ArtifactWriter, read_gesture, read_image_bytes
from swipecrop.ocr import TesseractRecognizer
from swipecrop.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="swipecrop",
    help="Crop the region of an image that a swipe gesture was drawn over.",
    add_completion=False,
    no_args_is_help=True,
)

_FAILURE_HINTS = {
    FailureKind.DECODE_ERROR: "The input is not an image format that can be read.",
    FailureKind.INVALID_GEOMETRY: "Check the display size and fit policy.",
    FailureKind.INVALID_CROP_REGION: "The gesture does not cover any part of the image.",
    FailureKind.TOO_SMALL: "Draw a larger selection.",
    FailureKind.ENCODE_ERROR: "Try a different output format.",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]SwipeCrop[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def crop(
    image: Annotated[
        Path,
        typer.Argument(
            help="Path to the source image",
            show_default=False,
        ),
    ],
    gesture: Annotated[
        Path,
        typer.Option(
            "--path",
            "-p",
            help="JSON file with the gesture points, in display coordinates",
            show_default=False,
        ),
    ],
    display: Annotated[
        str | None,
        typer.Option(
            "--display",
            "-d",
            help="Display area size as WIDTHxHEIGHT (default: the image's own size)",
        ),
    ] = None,
    fit: Annotated[
        str,
        typer.Option(
            "--fit",
            "-f",
            help="Fit policy (fill|contain|cover|fit_width|fit_height|none|scale_down)",
        ),
    ] = "contain",
    stroke_width: Annotated[
        float | None,
        typer.Option(
            "--stroke-width",
            "-w",
            help="Brush width in display pixels (default: from gesture file, else 16)",
            min=0.0,
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            help="Output format (jpg|jpeg|png)",
        ),
    ] = "jpg",
    quality: Annotated[
        int,
        typer.Option(
            "--quality",
            "-q",
            help="JPEG quality (1-100)",
            min=1,
            max=100,
        ),
    ] = 85,
    min_size: Annotated[
        int,
        typer.Option(
            "--min-size",
            help="Reject crops smaller than this in both dimensions",
            min=1,
        ),
    ] = 32,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: cropped_image_<timestamp>.<ext> in --output-dir)",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            help="Directory for generated output names (default: system temp dir)",
        ),
    ] = None,
    ocr: Annotated[
        bool,
        typer.Option(
            "--ocr",
            help="Run Tesseract on the crop and print the recognized text",
        ),
    ] = False,
    lang: Annotated[
        str,
        typer.Option(
            "--lang",
            help="Tesseract language code(s)",
        ),
    ] = "eng",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Crop the part of IMAGE covered by a recorded swipe gesture.

    The gesture is given in the coordinates of the display area the image was
    shown in. The image is assumed centered in that area and scaled by the
    chosen fit policy.

    Example:
        swipecrop receipt.jpg --path swipe.json --display 400x800 --fit contain

    This will write cropped_image_<timestamp>.jpg to the system temp directory.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if output is not None and output_dir is not None:
        print_error("Cannot use --output and --output-dir together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not image.is_file():
        print_error(
            f"Input image not found: {image}",
            details=f"The file '{image}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    # Validate fit argument
    try:
        policy = FitPolicy(fit.lower())
    except ValueError:
        print_error(
            f"Invalid fit policy: {fit}",
            details="Valid values: " + ", ".join(p.value for p in FitPolicy),
        )
        raise typer.Exit(code=1)

    # Validate format argument
    try:
        image_format = ImageFormat.parse(output_format)
    except EncodeError:
        print_error(
            f"Invalid output format: {output_format}",
            details="Valid values: jpg, jpeg, png",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = SwipeCropSettings(
        crop=CropConfig(fit_policy=policy, min_size=min_size),
        output=OutputConfig(format=image_format, jpeg_quality=quality, output_dir=output_dir),
        ocr=OcrConfig(language=lang),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=not verbose,
    )

    try:
        if not quiet:
            print_step("Loading image")

        raw_image = read_image_bytes(image)
        buffer = ImageCropEngine().decode(raw_image)

        if not quiet:
            print_image_info(
                image_path=str(image),
                width=buffer.width,
                height=buffer.height,
                image_format=buffer.source_format or "unknown",
            )

        recording = read_gesture(gesture)
        if stroke_width is None:
            stroke_width = (
                recording.stroke_width
                if recording.stroke_width is not None
                else settings.crop.stroke_width
            )
        display_size = Size.parse(display) if display else buffer.size

        if not quiet:
            print_step("Resolving gesture")
            print_gesture_info(
                point_count=len(recording.path),
                stroke_width=stroke_width,
                display=f"{display_size.width:g}x{display_size.height:g}",
                fit=policy.value,
            )

        pipeline = CropPipeline(settings, logger=logger)
        result = pipeline.run(
            raw_image=raw_image,
            path=recording.path,
            stroke_width=stroke_width,
            display_size=display_size,
            policy=policy,
        )

        if isinstance(result, CropFailure):
            print_error(result.message, details=_FAILURE_HINTS.get(result.kind))
            raise typer.Exit(code=1)

        writer = ArtifactWriter(settings.output.output_dir)
        output_path = writer.write(result, path=output)

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                width=result.width,
                height=result.height,
                image_format=result.format.value,
            )

        if ocr:
            if not quiet:
                print_step("Reading text")
            recognizer = TesseractRecognizer.from_config(settings.ocr)
            text = recognizer.recognize(output_path)
            if quiet:
                console.print(text)
            else:
                print_recognized_text(text)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GestureError as e:
        print_error(f"Could not read gesture: {e}")
        raise typer.Exit(code=1)
    except InvalidGeometryError as e:
        print_error(str(e), details="Display size must look like 400x300.")
        raise typer.Exit(code=1)
    except RecognitionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except SwipeCropError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "42 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
