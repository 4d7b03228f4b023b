"""Right padding and key normalization for the legacy AES scheme.

Both helpers work on ``str`` and ``bytes`` alike.  The legacy signer calls
them on UTF-8 bytes so every block handed to the cipher is exactly 16 bytes.
"""

from __future__ import annotations

from typing import AnyStr

from thumborurl.errors import ThumborInvalidArgumentError


def right_pad(value: AnyStr, pad: AnyStr, multiple_of: int) -> AnyStr:
    """Pad *value* on the right with *pad* up to the next multiple.

    A value whose length is already a multiple of *multiple_of* is returned
    unchanged.

    Parameters
    ----------
    value:
        The string or bytes to pad.
    pad:
        A single padding character (or byte) of the same type as *value*.
    multiple_of:
        The length the result must be a multiple of.  Must be at least 2.

    Returns
    -------
    str | bytes
        The padded value.

    Raises
    ------
    ThumborInvalidArgumentError
        If *value* is ``None`` or *multiple_of* is less than 2.

    Examples
    --------
    >>> right_pad("abcde", "X", 6)
    'abcdeX'
    >>> right_pad("abc", "X", 3)
    'abc'
    """
    if value is None:
        raise ThumborInvalidArgumentError(
            "Value to pad must not be None.",
            context={"field": "value", "constraint": "not None"},
        )
    if multiple_of < 2:
        raise ThumborInvalidArgumentError(
            "Multiple must be greater than one.",
            context={"field": "multiple_of", "value": multiple_of, "constraint": ">= 2"},
        )
    needed = -len(value) % multiple_of
    return value + pad * needed


def normalize_key(key: AnyStr, desired_length: int) -> AnyStr:
    """Repeat and/or truncate *key* until it is exactly *desired_length* long.

    Raises
    ------
    ThumborInvalidArgumentError
        If *key* is ``None`` or empty, or *desired_length* is not positive.

    Examples
    --------
    >>> normalize_key("one", 10)
    'oneoneoneo'
    >>> normalize_key("reallylongstring", 10)
    'reallylong'
    """
    if not key:
        raise ThumborInvalidArgumentError(
            "Must supply a non-empty key.",
            context={"field": "key", "constraint": "non-empty"},
        )
    if desired_length <= 0:
        raise ThumborInvalidArgumentError(
            "Desired length must be greater than zero.",
            context={"field": "desired_length", "value": desired_length, "constraint": "> 0"},
        )
    if len(key) >= desired_length:
        return key[:desired_length]
    repeats = -(-desired_length // len(key))
    return (key * repeats)[:desired_length]
