"""SwipeCrop - Turn swipe gestures over a displayed image into pixel-accurate crops.

SwipeCrop takes the path a user drew over an image shown in some display area,
works out which pixels of the original image that path covered (inverting the
fit policy used to display it), crops them and re-encodes the result, ready to
hand to an OCR engine.

Example:
    $ swipecrop receipt.jpg --path swipe.json --display 400x800 --fit contain

This will write cropped_image_<timestamp>.jpg with the selected region.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
