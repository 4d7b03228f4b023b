from .cipher import aes128_ecb_encrypt
from .encoding import base64_url_safe
from .hashing import hmac_sha1, md5_hex
from .padding import normalize_key, right_pad
from .urls import strip_protocol_and_params

__all__ = [
    "aes128_ecb_encrypt",
    "base64_url_safe",
    "hmac_sha1",
    "md5_hex",
    "normalize_key",
    "right_pad",
    "strip_protocol_and_params",
]
