"""Image locator clean-up.

The image service fetches images itself, so the protocol prefix and any
query string or fragment are redundant in the final path and are dropped
when ``strip_image_urls`` is enabled.
"""

from __future__ import annotations

_PROTOCOLS = ("http://", "https://")


def strip_protocol_and_params(url: str | None) -> str | None:
    """Remove a leading ``http://``/``https://`` and anything from ``?`` or ``#``.

    Only a prefix protocol is removed; a URL embedded in the path is kept.

    Examples
    --------
    >>> strip_protocol_and_params("https://hi.com/hi.html?whatup")
    'hi.com/hi.html'
    >>> strip_protocol_and_params("http://hi.com/http://whatever.com")
    'hi.com/http://whatever.com'
    """
    if url is None:
        return None

    for protocol in _PROTOCOLS:
        if url.startswith(protocol):
            url = url[len(protocol):]
            break

    end = len(url)
    for marker in ("?", "#"):
        pos = url.find(marker)
        if pos != -1 and pos < end:
            end = pos
    return url[:end]
