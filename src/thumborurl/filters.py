"""Image filters understood by the thumbor service.

A filter is a :class:`Filter` value: a name plus already-formatted
arguments.  ``str(filter)`` produces the ``name(arg1,arg2,...)`` call that
goes into the ``filters:`` path segment.  The factory functions below
validate their arguments before building a :class:`Filter`, so an invalid
filter can never reach a builder.

Usage::

    from thumborurl import Thumbor, filters

    url = (
        Thumbor().build_image("a.com/b.png")
        .resize(40, 40)
        .filter(filters.round_corner(5), filters.quality(80))
        .to_url()
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from thumborurl.errors import ThumborInvalidArgumentError
from thumborurl.models import ImageFormat

if TYPE_CHECKING:
    from thumborurl.builder import ThumborUrlBuilder

MAX_BLUR_RADIUS = 150
WHITE = 0xFFFFFF


@dataclass(frozen=True)
class Filter:
    """One filter call.

    Attributes
    ----------
    name:
        Filter name as the service knows it, e.g. ``"round_corner"``.
    args:
        Arguments already rendered to their wire representation.
    """

    name: str
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.name}({','.join(self.args)})"


def _check_range(field: str, value: int, low: int, high: int, label: str = "Amount") -> None:
    if value < low or value > high:
        raise ThumborInvalidArgumentError(
            f"{label} must be between {low} and {high}, inclusive.",
            context={"field": field, "value": value, "constraint": f"{low}..{high}"},
        )


def _check_image_url(image_url: str | None) -> None:
    if not image_url:
        raise ThumborInvalidArgumentError(
            "Image URL must not be blank.",
            context={"field": "image_url", "value": image_url, "constraint": "non-empty"},
        )


def _render(value: Any) -> str:
    # Booleans and floats follow the service's expected spelling.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


# ---------------------------------------------------------------------------
# Color and tone
# ---------------------------------------------------------------------------

def brightness(amount: int) -> Filter:
    """Increase or decrease brightness by *amount* percent (-100 to 100)."""
    _check_range("amount", amount, -100, 100)
    return Filter("brightness", (_render(amount),))


def contrast(amount: int) -> Filter:
    """Increase or decrease contrast by *amount* percent (-100 to 100)."""
    _check_range("amount", amount, -100, 100)
    return Filter("contrast", (_render(amount),))


def noise(amount: int) -> Filter:
    """Add *amount* percent of noise (0 to 100)."""
    _check_range("amount", amount, 0, 100)
    return Filter("noise", (_render(amount),))


def quality(amount: int) -> Filter:
    """Set JPEG output quality to *amount* percent (0 to 100)."""
    _check_range("amount", amount, 0, 100)
    return Filter("quality", (_render(amount),))


def rgb(r: int, g: int, b: int) -> Filter:
    """Shift each color channel by a percentage between -100 and 100."""
    _check_range("r", r, -100, 100, label="Red value")
    _check_range("g", g, -100, 100, label="Green value")
    _check_range("b", b, -100, 100, label="Blue value")
    return Filter("rgb", (_render(r), _render(g), _render(b)))


def grayscale() -> Filter:
    return Filter("grayscale")


def equalize() -> Filter:
    return Filter("equalize")


def fill(color: int) -> Filter:
    """Fill missing parts with *color*, given as ``0xRRGGBB``.

    Any alpha byte is discarded.  Usually combined with fit-in.

    >>> str(fill(0xABFF2020))
    'fill(ff2020)'
    """
    return Filter("fill", (format(color & WHITE, "x"),))


# ---------------------------------------------------------------------------
# Shape and geometry
# ---------------------------------------------------------------------------

def round_corner(radius: int, outer_radius: int = 0, color: int = WHITE) -> Filter:
    """Round the corners, painting the clipped area with *color*.

    Parameters
    ----------
    radius:
        Corner radius in pixels.  Must be at least 1.
    outer_radius:
        Second radius of the corner ellipse.  ``0`` means a circle.
    color:
        Background color as ``0xRRGGBB``.  Defaults to white.

    >>> str(round_corner(10, 15, 0xFF1010))
    'round_corner(10|15,255,16,16)'
    """
    if radius < 1:
        raise ThumborInvalidArgumentError(
            "Radius must be greater than zero.",
            context={"field": "radius", "value": radius, "constraint": ">= 1"},
        )
    if outer_radius < 0:
        raise ThumborInvalidArgumentError(
            "Outer radius must be greater than or equal to zero.",
            context={"field": "outer_radius", "value": outer_radius, "constraint": ">= 0"},
        )
    radii = f"{radius}|{outer_radius}" if outer_radius > 0 else str(radius)
    r = (color & 0xFF0000) >> 16
    g = (color & 0x00FF00) >> 8
    b = color & 0x0000FF
    return Filter("round_corner", (radii, str(r), str(g), str(b)))


def rotate(angle: int) -> Filter:
    """Rotate by *angle* degrees, which must be a multiple of 90."""
    if angle % 90 != 0:
        raise ThumborInvalidArgumentError(
            "Angle must be a multiple of 90.",
            context={"field": "angle", "value": angle, "constraint": "% 90 == 0"},
        )
    return Filter("rotate", (_render(angle),))


def no_upscale() -> Filter:
    """Never enlarge the image beyond its original size."""
    return Filter("no_upscale")


# ---------------------------------------------------------------------------
# Sharpness
# ---------------------------------------------------------------------------

def sharpen(amount: float, radius: float, luminance_only: bool) -> Filter:
    """Wavelet sharpen.

    Typical *amount* values lie in 0.0 to 10.0 and *radius* in 0.0 to 2.0.

    >>> str(sharpen(3, 4, True))
    'sharpen(3.0,4.0,true)'
    """
    return Filter(
        "sharpen",
        (_render(float(amount)), _render(float(radius)), _render(bool(luminance_only))),
    )


def blur(radius: int, sigma: int = 0) -> Filter:
    """Gaussian blur.  *radius* is 1 to 150; *sigma* 0 means "same as radius"."""
    if radius < 1:
        raise ThumborInvalidArgumentError(
            "Radius must be greater than zero.",
            context={"field": "radius", "value": radius, "constraint": ">= 1"},
        )
    if radius > MAX_BLUR_RADIUS:
        raise ThumborInvalidArgumentError(
            f"Radius must be lower or equal than {MAX_BLUR_RADIUS}.",
            context={"field": "radius", "value": radius, "constraint": f"<= {MAX_BLUR_RADIUS}"},
        )
    if sigma < 0:
        raise ThumborInvalidArgumentError(
            "Sigma must be greater than or equal to zero.",
            context={"field": "sigma", "value": sigma, "constraint": ">= 0"},
        )
    return Filter("blur", (_render(radius), _render(sigma)))


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def format_(image_format: ImageFormat) -> Filter:
    """Force the output format."""
    if image_format is None:
        raise ThumborInvalidArgumentError(
            "You must specify an image format.",
            context={"field": "image_format", "constraint": "not None"},
        )
    try:
        value = ImageFormat(image_format).value
    except ValueError as exc:
        raise ThumborInvalidArgumentError(
            f"Unsupported image format: {image_format!r}.",
            context={
                "field": "image_format",
                "value": image_format,
                "constraint": [f.value for f in ImageFormat],
            },
            cause=exc,
        ) from exc
    return Filter("format", (value,))


def strip_icc() -> Filter:
    """Remove the embedded ICC profile."""
    return Filter("strip_icc")


# ---------------------------------------------------------------------------
# Overlays
# ---------------------------------------------------------------------------

def watermark(
    image: str | ThumborUrlBuilder,
    x: int = 0,
    y: int = 0,
    transparency: int = 0,
) -> Filter:
    """Overlay another image.

    Parameters
    ----------
    image:
        Locator of the watermark image, or a builder describing it.  A
        builder is serialized with :meth:`~ThumborUrlBuilder.to_url` right
        away; later changes to it do not affect this filter.
    x, y:
        Position.  Negative values count from the right / bottom edge.
    transparency:
        0 (opaque) to 100 (fully transparent).

    >>> str(watermark("a.png", 20, 20, 50))
    'watermark(a.png,20,20,50)'
    """
    if image is None:
        raise ThumborInvalidArgumentError(
            "Image must not be None.",
            context={"field": "image", "constraint": "not None"},
        )
    image_url = image if isinstance(image, str) else image.to_url()
    _check_image_url(image_url)
    _check_range("transparency", transparency, 0, 100, label="Transparency")
    return Filter(
        "watermark",
        (image_url, _render(x), _render(y), _render(transparency)),
    )


def frame(image_url: str) -> Filter:
    """Overlay a 9-patch frame image."""
    _check_image_url(image_url)
    return Filter("frame", (image_url,))
