"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages for each crop step.
"""


from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]SwipeCrop[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, width: int, height: int, image_format: str) -> None:
    """Print source image information.

    Args:
        image_path: Path to the image file
        width: Image width in pixels
        height: Image height in pixels
        image_format: Decoded format name (e.g., "PNG", "JPEG")
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(image_path)
    line.append(f" ({image_format})")
    console.print(line)
    console.print(f"  {width:,}x{height:,} px")


def print_gesture_info(
    point_count: int,
    stroke_width: float,
    display: str,
    fit: str,
) -> None:
    """Print gesture and display information.

    Args:
        point_count: Number of points in the gesture path
        stroke_width: Brush width in display pixels
        display: Display size as WIDTHxHEIGHT
        fit: Fit policy name
    """
    console.print(
        f"  {point_count} points {SYM_DOT} {stroke_width:g}px stroke "
        f"{SYM_DOT} {display} display {SYM_DOT} {fit}"
    )


def print_success(
    output_path: str,
    file_size: str,
    width: int,
    height: int,
    image_format: str,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        width: Crop width in pixels
        height: Crop height in pixels
        image_format: Output format name
    """
    console.print(f"\n[bold green]{SYM_OK} Cropped[/bold green] {width}x{height} px")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({image_format}, {file_size})")
    console.print(line)


def print_recognized_text(text: str) -> None:
    """Print text read from the crop.

    Args:
        text: Recognized text (may be empty)
    """
    if not text:
        console.print(f"\n{SYM_DOT} No text recognized")
        return
    console.print(Panel(Text(text), title="Recognized text", expand=False))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
