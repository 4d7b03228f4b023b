"""thumborurl: build plain and signed URLs for the thumbor image service.

Public re-exports
-----------------

* **Entry point:** :class:`Thumbor`
* **Builder:** :class:`ThumborUrlBuilder`
* **Configuration:** :class:`ThumborConfig`
* **Filters:** the :mod:`thumborurl.filters` module and :class:`Filter`
* **Errors:** Every :class:`ThumborUrlError` subclass and :class:`ErrorCode`
* **Models:** alignment, trim, format and fit-in enums, :data:`ORIGINAL_SIZE`

Usage::

    from thumborurl import Thumbor, filters

    thumbor = Thumbor(key="my-security-key")
    url = (
        thumbor.build_image("a.com/b.png")
        .crop(10, 10, 90, 90)
        .resize(40, 40)
        .filter(filters.round_corner(5))
        .to_url()
    )
"""

from __future__ import annotations

from thumborurl import filters

# ── Builder ────────────────────────────────────────────────────────────
from thumborurl.builder import ThumborUrlBuilder

# ── Configuration ───────────────────────────────────────────────────────
from thumborurl.config import ThumborConfig

# ── Errors ──────────────────────────────────────────────────────────────
from thumborurl.errors import (
    ErrorCode,
    ThumborInvalidArgumentError,
    ThumborInvalidStateError,
    ThumborUrlError,
)
from thumborurl.filters import Filter

# ── Models ──────────────────────────────────────────────────────────────
from thumborurl.models import (
    MAX_TRIM_TOLERANCE,
    ORIGINAL_SIZE,
    FitInStyle,
    HorizontalAlign,
    ImageFormat,
    TrimPixelColor,
    VerticalAlign,
)

# ── Entry point ─────────────────────────────────────────────────────────
from thumborurl.thumbor import Thumbor

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Entry point
    "Thumbor",
    # Builder
    "ThumborUrlBuilder",
    # Configuration
    "ThumborConfig",
    # Filters
    "filters",
    "Filter",
    # Errors
    "ThumborUrlError",
    "ThumborInvalidArgumentError",
    "ThumborInvalidStateError",
    "ErrorCode",
    # Models
    "ORIGINAL_SIZE",
    "MAX_TRIM_TOLERANCE",
    "HorizontalAlign",
    "VerticalAlign",
    "TrimPixelColor",
    "ImageFormat",
    "FitInStyle",
]
