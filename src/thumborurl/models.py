"""Enums and constants describing an image transformation.

Each enum member's value is the literal keyword written into the URL
path, so ``member.value`` is all the serializer needs.
"""

from __future__ import annotations

from enum import Enum

ORIGINAL_SIZE = "orig"
"""Sentinel accepted by ``resize`` to keep the original width or height."""

MAX_TRIM_TOLERANCE = 442
"""Largest Euclidean distance between two RGB colors, rounded up."""


class HorizontalAlign(str, Enum):
    """Horizontal alignment used when resizing crops the image."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    """Vertical alignment used when resizing crops the image."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class TrimPixelColor(str, Enum):
    """Corner whose pixel color is treated as the background for trim."""

    TOP_LEFT = "top-left"
    BOTTOM_RIGHT = "bottom-right"


class ImageFormat(str, Enum):
    """Output formats understood by the ``format`` filter."""

    GIF = "gif"
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"


class FitInStyle(str, Enum):
    """Flavour of fit-in resizing; only the emitted keyword differs."""

    NORMAL = "fit-in"
    """Fit the image inside the box, keeping proportions."""

    FULL = "full-fit-in"
    """Fit so that the smaller side fills the box."""

    ADAPTIVE = "adaptive-fit-in"
    """Swap the box orientation to match the image when that fits better."""
