"""Helpers for signing Bitcoin.co.id trade API requests."""

from __future__ import annotations

import hmac
import threading
import time
from decimal import Decimal
from hashlib import sha512
from typing import Any, Callable, Mapping
from urllib.parse import urlencode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class NonceGenerator:
    """Strictly increasing nonces derived from UTC milliseconds.

    The exchange rejects a nonce that is not larger than the previous one for
    the same key, so two calls inside one millisecond get ``last + 1``.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = int(self._clock() * 1000)
            self._last = max(now, self._last + 1)
            return self._last


def format_value(value: Any) -> Any:
    """Render amounts as plain decimals; ``str(0.00005)`` would give ``5e-05``."""
    if isinstance(value, float):
        value = Decimal(repr(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    return value


def build_post_data(method: str, nonce: int, args: Mapping[str, Any] | None = None) -> str:
    """Return the form-encoded body for a trade API call."""

    post_data: dict[str, Any] = {"method": method, "nonce": nonce}
    if args:
        post_data.update(args)
    return urlencode(sorted((key, format_value(value)) for key, value in post_data.items()))


def sign(secret_key: str, content: str) -> str:
    return hmac.new(secret_key.encode("utf-8"), content.encode("utf-8"), sha512).hexdigest()


def build_headers(api_key: str, secret_key: str, content: str) -> dict[str, str]:
    """Create the authentication headers for an encoded request body."""

    return {
        "Key": api_key,
        "Sign": sign(secret_key, content),
        "Content-Length": str(len(content.encode("utf-8"))),
        "Content-Type": FORM_CONTENT_TYPE,
    }


__all__ = ["FORM_CONTENT_TYPE", "NonceGenerator", "build_headers", "build_post_data", "format_value", "sign"]
