"""URL-safe base64 encoding for signatures.

The alphabet is ``A-Z a-z 0-9 - _`` and ``=`` padding is kept, which is
what the image service expects in the first path segment.
"""

from __future__ import annotations

import base64

from thumborurl.errors import ThumborInvalidArgumentError

# Largest input whose encoding still fits a signed 32-bit length.
BASE64_UPPER_BOUND = (2**31 - 1) // 4 * 3


def base64_url_safe(data: bytes | bytearray | None) -> str:
    """Base64-encode *data* with the URL-safe alphabet, padding retained.

    Raises
    ------
    ThumborInvalidArgumentError
        If *data* is ``None`` or at least :data:`BASE64_UPPER_BOUND` bytes.

    Examples
    --------
    >>> base64_url_safe(b"test")
    'dGVzdA=='
    >>> base64_url_safe(b"")
    ''
    """
    if data is None:
        raise ThumborInvalidArgumentError(
            "Input bytes must not be None.",
            context={"field": "data", "constraint": "not None"},
        )
    if len(data) >= BASE64_UPPER_BOUND:
        raise ThumborInvalidArgumentError(
            f"Input bytes length must not exceed {BASE64_UPPER_BOUND}.",
            context={"field": "data", "value": len(data), "constraint": f"< {BASE64_UPPER_BOUND}"},
        )
    return base64.urlsafe_b64encode(bytes(data)).decode("ascii")
