"""Entry point representing one remote thumbor installation.

Usage::

    from thumborurl import Thumbor

    thumbor = Thumbor("http://images.example.com", key="my-security-key")
    url = thumbor.build_image("a.com/b.png").resize(300, 200).to_url()
"""

from __future__ import annotations

from typing import Any

from thumborurl.builder import ThumborUrlBuilder
from thumborurl.config import ThumborConfig
from thumborurl.errors import ThumborInvalidArgumentError
from thumborurl.utils.urls import strip_protocol_and_params


class Thumbor:
    """A thumbor host plus optional signing key.

    Parameters
    ----------
    host:
        Service prefix.  ``None`` produces root-relative URLs.
    key:
        Shared secret.  Without it only unsafe URLs can be built.
    **kwargs:
        All remaining keyword arguments are forwarded to
        :class:`ThumborConfig`.
    """

    def __init__(
        self,
        host: str | None = None,
        key: str | bytes | None = None,
        **kwargs: Any,
    ) -> None:
        self._config = ThumborConfig(host=host, key=key, **kwargs)

    @property
    def host(self) -> str:
        return self._config.host

    @property
    def key(self) -> str | bytes | None:
        return self._config.key

    @property
    def config(self) -> ThumborConfig:
        return self._config

    def build_image(self, image: str) -> ThumborUrlBuilder:
        """Start a new builder for *image* on this host.

        Raises
        ------
        ThumborInvalidArgumentError
            If *image* is blank.
        """
        if not image:
            raise ThumborInvalidArgumentError(
                "Image must not be blank.",
                context={"field": "image", "value": image, "constraint": "non-empty"},
            )
        if self._config.strip_image_urls:
            image = strip_protocol_and_params(image)
        return ThumborUrlBuilder(image, self._config)

    def __repr__(self) -> str:
        return f"Thumbor(config={self._config!r})"
