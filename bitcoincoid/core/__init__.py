"""Core exchange integration modules."""

from .auth import NonceGenerator, build_headers, build_post_data, sign
from .client import ApiError, BitcoinCoIdClient, BitcoinCoIdError, NetworkError

__all__ = [
    "ApiError",
    "BitcoinCoIdClient",
    "BitcoinCoIdError",
    "NetworkError",
    "NonceGenerator",
    "build_headers",
    "build_post_data",
    "sign",
]
