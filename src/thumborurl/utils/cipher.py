"""AES-128-ECB encryption for legacy safe URLs.

This scheme exists only for servers still configured for the original
encrypted URL format.  ECB without library padding is what those servers
decrypt, so the caller pads the message itself (see
:func:`thumborurl.utils.padding.right_pad`).
"""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from thumborurl.errors import ThumborInvalidArgumentError

AES_BLOCK_SIZE = 16


def aes128_ecb_encrypt(message: bytes, key: bytes) -> bytes:
    """Encrypt *message* under AES-128 in ECB mode with no padding scheme.

    Parameters
    ----------
    message:
        Plaintext whose length is a multiple of 16 bytes.
    key:
        Exactly 16 bytes.

    Raises
    ------
    ThumborInvalidArgumentError
        If *key* is not 16 bytes or *message* is not block aligned.
    """
    if len(key) != AES_BLOCK_SIZE:
        raise ThumborInvalidArgumentError(
            f"AES-128 key must be exactly {AES_BLOCK_SIZE} bytes.",
            context={"field": "key", "value": len(key), "constraint": f"== {AES_BLOCK_SIZE}"},
        )
    if len(message) % AES_BLOCK_SIZE:
        raise ThumborInvalidArgumentError(
            f"Message length must be a multiple of {AES_BLOCK_SIZE}.",
            context={"field": "message", "value": len(message), "constraint": f"% {AES_BLOCK_SIZE} == 0"},
        )
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(message) + encryptor.finalize()
