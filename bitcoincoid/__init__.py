"""Python client for the Bitcoin.co.id (Indodax) public and trade APIs."""

from .config import Settings, load_settings
from .core import ApiError, BitcoinCoIdClient, BitcoinCoIdError, NetworkError, NonceGenerator

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BitcoinCoIdClient",
    "BitcoinCoIdError",
    "NetworkError",
    "NonceGenerator",
    "Settings",
    "load_settings",
]
