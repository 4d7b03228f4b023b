"""MD5 and HMAC-SHA1 helpers.

:func:`md5_hex` hides the image reference inside legacy encrypted URLs.
:func:`hmac_sha1` produces the signature of every modern safe URL.
"""

from __future__ import annotations

import hashlib
import hmac

from thumborurl.errors import ThumborInvalidArgumentError


def md5_hex(data: str) -> str:
    """Return the hex-encoded MD5 digest of *data*.

    The string is encoded as UTF-8 before hashing.

    Parameters
    ----------
    data:
        Non-empty string to hash.

    Returns
    -------
    str
        A 32-character lowercase hexadecimal string.

    Raises
    ------
    ThumborInvalidArgumentError
        If *data* is ``None`` or empty.

    Examples
    --------
    >>> md5_hex("test1")
    '5a105e8b9d40e1329780d62ea2265d8a'
    """
    if not data:
        raise ThumborInvalidArgumentError(
            "Input string must not be blank.",
            context={"field": "data", "value": data, "constraint": "non-empty"},
        )
    return hashlib.md5(data.encode("utf-8")).hexdigest()


def hmac_sha1(message: str | bytes, key: str | bytes) -> bytes:
    """Sign *message* with HMAC-SHA1 using *key* exactly as given.

    Strings are encoded as UTF-8.  No normalization or padding is applied
    to either argument.

    Raises
    ------
    ThumborInvalidArgumentError
        If *key* is empty.  Builders never call this without a key, so this
        signals a programming error rather than bad user input.
    """
    if not key:
        raise ThumborInvalidArgumentError(
            "HMAC key must not be empty.",
            context={"field": "key", "constraint": "non-empty"},
        )
    if isinstance(key, str):
        key = key.encode("utf-8")
    if isinstance(message, str):
        message = message.encode("utf-8")
    return hmac.new(key, message, hashlib.sha1).digest()
