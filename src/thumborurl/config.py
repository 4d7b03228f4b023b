"""Configuration for thumborurl.

:class:`ThumborConfig` captures everything a :class:`~thumborurl.Thumbor`
instance needs to hand to the builders it creates: where the service lives,
the shared signing key, and a few behaviour switches.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from thumborurl.errors import ThumborInvalidArgumentError


@dataclass
class ThumborConfig:
    """Complete configuration for URL generation.

    Every parameter has a default, so an empty config produces unsafe,
    root-relative URLs.

    Parameters
    ----------
    host:
        Prefix for every generated URL.  Normalized to end in exactly one
        ``/``.  ``None`` means the root-relative prefix ``/``.
    key:
        Shared secret of the image service.  When set, :meth:`to_url`
        produces signed URLs.  Never logged.
    legacy:
        Start every builder in legacy mode, signing with AES-128-ECB
        encryption instead of HMAC-SHA1.
    strip_image_urls:
        Drop the ``http://``/``https://`` prefix and any query string or
        fragment from image locators before they enter a URL.
    debug_log_urls:
        Log every generated URL at ``DEBUG`` level.
    """

    # ── Service ─────────────────────────────────────────────────────────
    host: str | None = None

    key: str | bytes | None = None

    # ── Signing ─────────────────────────────────────────────────────────
    legacy: bool = False

    # ── Image locators ──────────────────────────────────────────────────
    strip_image_urls: bool = False

    # ── Debug ───────────────────────────────────────────────────────────
    debug_log_urls: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize after initialization."""
        if self.host is None:
            self.host = "/"
        elif not self.host:
            raise ThumborInvalidArgumentError(
                "Host must not be blank.",
                context={"field": "host", "value": self.host, "constraint": "non-empty"},
            )
        self.host = self.host.rstrip("/") + "/"

        if self.key is not None and len(self.key) == 0:
            raise ThumborInvalidArgumentError(
                "Key must not be blank.",
                context={"field": "key", "constraint": "non-empty"},
            )

    def __repr__(self) -> str:
        """Mask the key to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "key" and val is not None:
                show_tail = isinstance(val, str) and len(val) >= 8
                masked = f"...{val[-4:]}" if show_tail else "****"
                parts.append(f"key='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"ThumborConfig({', '.join(parts)})"
