"""Fluent builder for thumbor image URLs.

A :class:`ThumborUrlBuilder` collects the transformation options for one
image and serializes them into a URL path.  Options are set through
chainable methods; the ``to_*`` methods can be called any number of times
and never change the builder.

Path layout, in this fixed order regardless of call order::

    [meta/][trim[:corner[:tolerance]]/][L x T : R x B/]
    [fit-in/][-]W x [-]H[/smart | /halign/valign]/[filters:f1:f2/]image

Unsafe URLs are ``host + "unsafe/" + path``.  Signed URLs replace
``unsafe`` with a URL-safe base64 signature:

* **HMAC-SHA1** (default): the signature covers the whole path, which
  follows it in the clear.
* **Legacy AES-128-ECB**: the path, with the image replaced by its MD5
  digest, is padded with ``{`` and encrypted under the key repeated or
  truncated to 16 bytes.  Only the image follows the signature.
"""

from __future__ import annotations

from thumborurl.config import ThumborConfig
from thumborurl.errors import ThumborInvalidArgumentError, ThumborInvalidStateError
from thumborurl.filters import Filter
from thumborurl.models import (
    MAX_TRIM_TOLERANCE,
    ORIGINAL_SIZE,
    FitInStyle,
    HorizontalAlign,
    TrimPixelColor,
    VerticalAlign,
)
from thumborurl.observability import get_logger
from thumborurl.utils.cipher import AES_BLOCK_SIZE, aes128_ecb_encrypt
from thumborurl.utils.encoding import base64_url_safe
from thumborurl.utils.hashing import hmac_sha1, md5_hex
from thumborurl.utils.padding import normalize_key, right_pad

log = get_logger("thumborurl.builder")

PREFIX_UNSAFE = "unsafe/"
PREFIX_META = "meta/"
PART_SMART = "smart"
PART_TRIM = "trim"
PART_FILTERS = "filters"
LEGACY_PAD = b"{"

Dimension = int | str


class ThumborUrlBuilder:
    """Build the URL for one image.

    Normally obtained from :meth:`thumborurl.Thumbor.build_image` rather
    than constructed directly.

    Parameters
    ----------
    image:
        Locator of the source image, inserted into the path verbatim.
    config:
        Host, key and behaviour switches.  Defaults to an empty
        :class:`ThumborConfig` (unsafe, root-relative URLs).
    """

    def __init__(self, image: str, config: ThumborConfig | None = None) -> None:
        self._config = config or ThumborConfig()
        self.image: str = image

        self.has_resize = False
        self.resize_width: Dimension = 0
        self.resize_height: Dimension = 0
        self.fit_in_style: FitInStyle | None = None
        self.is_flipped_horizontally = False
        self.is_flipped_vertically = False

        self.has_crop = False
        self.crop_top = 0
        self.crop_left = 0
        self.crop_bottom = 0
        self.crop_right = 0

        self.is_smart = False
        self.horizontal_align: HorizontalAlign | None = None
        self.vertical_align: VerticalAlign | None = None

        self.is_trim = False
        self.trim_pixel_color: TrimPixelColor | None = None
        self.trim_color_tolerance = 0

        self.is_legacy = self._config.legacy
        self.filters: list[str] = []

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def key(self) -> str | bytes | None:
        return self._config.key

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def resize(self, width: Dimension, height: Dimension) -> ThumborUrlBuilder:
        """Resize the image to *width* x *height*.

        A dimension of ``0`` scales that axis proportionally;
        :data:`~thumborurl.models.ORIGINAL_SIZE` keeps the original size.
        Calling again replaces the previous size.

        Raises
        ------
        ThumborInvalidArgumentError
            If a dimension is negative or both are zero.
        """
        _check_dimension("width", width)
        _check_dimension("height", height)
        if width == 0 and height == 0:
            raise ThumborInvalidArgumentError(
                "Both width and height must not be zero.",
                context={"field": "width,height", "value": (width, height), "constraint": "not both 0"},
            )
        self.has_resize = True
        self.resize_width = width
        self.resize_height = height
        return self

    def flip_horizontally(self) -> ThumborUrlBuilder:
        """Mirror the image left to right.  Requires :meth:`resize`."""
        self._require_resize("flip_horizontally", "flip")
        self.is_flipped_horizontally = True
        return self

    def flip_vertically(self) -> ThumborUrlBuilder:
        """Mirror the image top to bottom.  Requires :meth:`resize`."""
        self._require_resize("flip_vertically", "flip")
        self.is_flipped_vertically = True
        return self

    def fit_in(self, style: FitInStyle = FitInStyle.NORMAL) -> ThumborUrlBuilder:
        """Fit the image inside the resize box instead of cropping it.

        Requires :meth:`resize`.  *style* only changes the emitted keyword.
        """
        self._require_resize("fit_in", "apply 'fit-in'")
        self.fit_in_style = FitInStyle(style)
        return self

    def crop(self, top: int, left: int, bottom: int, right: int) -> ThumborUrlBuilder:
        """Crop the image to the rectangle between two corner points.

        Raises
        ------
        ThumborInvalidArgumentError
            Unless ``0 <= top < bottom`` and ``0 <= left < right``.
        """
        if top < 0:
            raise ThumborInvalidArgumentError(
                "Top must be greater or equal to zero.",
                context={"field": "top", "value": top, "constraint": ">= 0"},
            )
        if left < 0:
            raise ThumborInvalidArgumentError(
                "Left must be greater or equal to zero.",
                context={"field": "left", "value": left, "constraint": ">= 0"},
            )
        if bottom < 1 or bottom <= top:
            raise ThumborInvalidArgumentError(
                "Bottom must be greater than zero and top.",
                context={"field": "bottom", "value": bottom, "constraint": f"> max(0, {top})"},
            )
        if right < 1 or right <= left:
            raise ThumborInvalidArgumentError(
                "Right must be greater than zero and left.",
                context={"field": "right", "value": right, "constraint": f"> max(0, {left})"},
            )
        self.has_crop = True
        self.crop_top = top
        self.crop_left = left
        self.crop_bottom = bottom
        self.crop_right = right
        return self

    def align(self, *alignments: HorizontalAlign | VerticalAlign) -> ThumborUrlBuilder:
        """Choose which part of the image survives when resizing crops it.

        Accepts a :class:`HorizontalAlign`, a :class:`VerticalAlign`, or one
        of each.  The two axes are independent.  Requires :meth:`resize`.
        """
        self._require_resize("align", "align")
        if not alignments:
            raise ThumborInvalidArgumentError(
                "You must provide at least one alignment.",
                context={"field": "alignments", "constraint": "non-empty"},
            )
        for alignment in alignments:
            if not isinstance(alignment, (HorizontalAlign, VerticalAlign)):
                raise ThumborInvalidArgumentError(
                    f"Not an alignment: {alignment!r}.",
                    context={
                        "field": "alignments",
                        "value": alignment,
                        "constraint": "HorizontalAlign | VerticalAlign",
                    },
                )
        for alignment in alignments:
            if isinstance(alignment, HorizontalAlign):
                self.horizontal_align = alignment
            else:
                self.vertical_align = alignment
        return self

    def smart(self, enabled: bool = True) -> ThumborUrlBuilder:
        """Let the service pick the important region when cropping.

        Requires :meth:`resize`.  While enabled, explicit alignment is kept
        but not emitted; ``smart(False)`` brings it back.
        """
        self._require_resize("smart", "smart align")
        self.is_smart = enabled
        return self

    def trim(
        self,
        pixel_color: TrimPixelColor | None = None,
        color_tolerance: int = 0,
    ) -> ThumborUrlBuilder:
        """Remove surrounding space of the background color.

        Parameters
        ----------
        pixel_color:
            Corner whose color is taken as the background.
        color_tolerance:
            0 to 442.  Euclidean RGB distance within which a pixel still
            counts as background.  A non-zero value needs *pixel_color*.
        """
        if color_tolerance < 0 or color_tolerance > MAX_TRIM_TOLERANCE:
            raise ThumborInvalidArgumentError(
                f"Color tolerance must be between 0 and {MAX_TRIM_TOLERANCE}.",
                context={
                    "field": "color_tolerance",
                    "value": color_tolerance,
                    "constraint": f"0..{MAX_TRIM_TOLERANCE}",
                },
            )
        if color_tolerance > 0 and pixel_color is None:
            raise ThumborInvalidArgumentError(
                "Trim pixel color must be set when using a color tolerance.",
                context={"field": "pixel_color", "constraint": "required when color_tolerance > 0"},
            )
        if pixel_color is not None:
            try:
                pixel_color = TrimPixelColor(pixel_color)
            except ValueError as exc:
                raise ThumborInvalidArgumentError(
                    f"Not a trim pixel color: {pixel_color!r}.",
                    context={"field": "pixel_color", "value": pixel_color, "constraint": "TrimPixelColor"},
                    cause=exc,
                ) from exc
        self.is_trim = True
        self.trim_pixel_color = pixel_color
        self.trim_color_tolerance = color_tolerance
        return self

    def legacy(self) -> ThumborUrlBuilder:
        """Sign with the legacy AES-128-ECB scheme.  Cannot be undone."""
        if not self.is_legacy:
            log.warning(
                "Legacy AES-ECB signing enabled",
                extra={"extra_fields": {"op": "legacy", "image": self.image}},
            )
        self.is_legacy = True
        return self

    def filter(self, *filters: Filter | str) -> ThumborUrlBuilder:
        """Append one or more filters, keeping call order.

        Custom filters can be passed as plain strings such as
        ``"my_filter(1,2,3)"``.

        Raises
        ------
        ThumborInvalidArgumentError
            If no filter is given or one of them is blank.
        """
        if not filters:
            raise ThumborInvalidArgumentError(
                "You must provide at least one filter.",
                context={"field": "filters", "constraint": "non-empty"},
            )
        rendered = []
        for item in filters:
            value = str(item) if item is not None else ""
            if not value.strip():
                raise ThumborInvalidArgumentError(
                    "Filter must not be blank.",
                    context={"field": "filters", "value": item, "constraint": "non-blank"},
                )
            rendered.append(value)
        self.filters.extend(rendered)
        return self

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def assemble_config(self, meta: bool = False) -> str:
        """Return the path after the ``unsafe/`` or signature segment."""
        return self._assemble(meta, hash_image=False)

    def to_url(self) -> str:
        """Signed URL if a key is configured, unsafe URL otherwise."""
        return self.to_url_unsafe() if self.key is None else self.to_url_safe()

    def to_url_unsafe(self) -> str:
        """Plaintext URL, even when a key is configured."""
        url = self.host + PREFIX_UNSAFE + self.assemble_config(False)
        self._log_built("to_url_unsafe", "unsafe", False, url)
        return url

    def to_url_safe(self) -> str:
        """Signed URL.  Raises :class:`ThumborInvalidStateError` without a key."""
        self._require_key("to_url_safe")
        return self._signed(meta=False, op="to_url_safe")

    def to_meta(self) -> str:
        """Signed metadata URL if a key is configured, unsafe otherwise."""
        return self.to_meta_unsafe() if self.key is None else self.to_meta_safe()

    def to_meta_unsafe(self) -> str:
        url = self.host + PREFIX_UNSAFE + self.assemble_config(True)
        self._log_built("to_meta_unsafe", "unsafe", True, url)
        return url

    def to_meta_safe(self) -> str:
        """Signed metadata URL.  Raises :class:`ThumborInvalidStateError` without a key."""
        self._require_key("to_meta_safe")
        return self._signed(meta=True, op="to_meta_safe")

    def __str__(self) -> str:
        return self.to_url()

    def __repr__(self) -> str:
        return f"ThumborUrlBuilder(image={self.image!r}, config={self._config!r})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _assemble(self, meta: bool, hash_image: bool) -> str:
        parts: list[str] = []

        if self.is_trim:
            trim = PART_TRIM
            if self.trim_pixel_color is not None:
                trim += f":{self.trim_pixel_color.value}"
                if self.trim_color_tolerance > 0:
                    trim += f":{self.trim_color_tolerance}"
            parts.append(trim)

        if self.has_crop:
            parts.append(
                f"{self.crop_left}x{self.crop_top}:{self.crop_right}x{self.crop_bottom}"
            )

        if self.has_resize:
            if self.fit_in_style is not None:
                parts.append(self.fit_in_style.value)
            width = ("-" if self.is_flipped_horizontally else "") + str(self.resize_width)
            height = ("-" if self.is_flipped_vertically else "") + str(self.resize_height)
            parts.append(f"{width}x{height}")
            if self.is_smart:
                parts.append(PART_SMART)
            else:
                if self.horizontal_align is not None:
                    parts.append(self.horizontal_align.value)
                if self.vertical_align is not None:
                    parts.append(self.vertical_align.value)

        if self.filters:
            parts.append(":".join([PART_FILTERS, *self.filters]))

        parts.append(md5_hex(self.image) if hash_image else self.image)
        config = "/".join(parts)
        return PREFIX_META + config if meta else config

    def _signed(self, meta: bool, op: str) -> str:
        key = self.key.encode("utf-8") if isinstance(self.key, str) else self.key
        if self.is_legacy:
            config = self._assemble(meta, hash_image=True)
            message = right_pad(config.encode("utf-8"), LEGACY_PAD, AES_BLOCK_SIZE)
            signature = aes128_ecb_encrypt(message, normalize_key(key, AES_BLOCK_SIZE))
            suffix = self.image
            mode = "legacy"
        else:
            config = self._assemble(meta, hash_image=False)
            signature = hmac_sha1(config, key)
            suffix = config
            mode = "hmac"
        url = f"{self.host}{base64_url_safe(signature)}/{suffix}"
        self._log_built(op, mode, meta, url)
        return url

    def _require_resize(self, operation: str, action: str) -> None:
        if not self.has_resize:
            raise ThumborInvalidStateError(
                f"Image must be resized first in order to {action}.",
                context={"operation": operation, "requires": "resize"},
            )

    def _require_key(self, operation: str) -> None:
        if self.key is None:
            raise ThumborInvalidStateError(
                "Cannot build safe URL without a key.",
                context={"operation": operation, "requires": "key"},
            )

    def _log_built(self, op: str, mode: str, meta: bool, url: str) -> None:
        if self._config.debug_log_urls:
            log.debug(
                "URL built",
                extra={"extra_fields": {"op": op, "mode": mode, "meta": meta, "url": url}},
            )


def _check_dimension(name: str, value: Dimension) -> None:
    if value == ORIGINAL_SIZE:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ThumborInvalidArgumentError(
            f"{name.capitalize()} must be a positive number.",
            context={"field": name, "value": value, "constraint": f">= 0 or {ORIGINAL_SIZE!r}"},
        )
