"""REST client wrapper for the Bitcoin.co.id API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

import requests

from . import constants
from .auth import NonceGenerator, build_headers, build_post_data

if TYPE_CHECKING:
    from bitcoincoid.config import EndpointSettings

LOGGER = logging.getLogger(__name__)


class BitcoinCoIdError(RuntimeError):
    """Base exception for Bitcoin.co.id client failures."""


class NetworkError(BitcoinCoIdError):
    """The HTTP request could not be completed."""


class ApiError(BitcoinCoIdError):
    """The exchange answered, but not with a usable response."""

    def __init__(self, message: str, status_code: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def _compact(**kwargs: Any) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


class BitcoinCoIdClient:
    """Lightweight Bitcoin.co.id REST API wrapper.

    Public market data is fetched with plain GET requests. Every trade API call
    is a POST whose form-encoded body is signed with HMAC-SHA512; the exact
    bytes that were signed are the bytes sent.

    Private responses are returned as parsed JSON without looking at the
    ``success`` flag unless ``raise_on_error`` is set, in which case a
    ``success: 0`` envelope raises :class:`ApiError`.
    """

    def __init__(
        self,
        api_key: str,
        secret_key: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
        public_url: str = constants.PUBLIC_API_URL,
        trade_url: str = constants.TRADE_API_URL,
        raise_on_error: bool = False,
        nonce_generator: NonceGenerator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.api_key = api_key
        self.secret_key = secret_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.public_url = public_url
        self.trade_url = trade_url
        self.raise_on_error = raise_on_error
        self.nonce = nonce_generator or NonceGenerator()
        self.logger = logger or LOGGER

    @classmethod
    def from_settings(cls, settings: EndpointSettings, **kwargs: Any) -> BitcoinCoIdClient:
        """Build a client from loaded settings.

        Settings without credentials give a client usable for public calls only.
        """
        return cls(
            getattr(settings, "api_key", ""),
            getattr(settings, "secret_key", ""),
            timeout=settings.timeout,
            public_url=settings.public_api_url,
            trade_url=settings.trade_api_url,
            raise_on_error=settings.raise_on_error,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key='***', trade_url={self.trade_url!r})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def ticker(self, pair: str) -> Any:
        """Ticker information of a pair, e.g. ``btc_idr``."""
        return self.call_public(pair, constants.TICKER_PATH)

    def trades(self, pair: str) -> Any:
        """Recent trades of a pair."""
        return self.call_public(pair, constants.TRADES_PATH)

    def depth(self, pair: str) -> Any:
        """Order book of a pair as ``{"buy": [...], "sell": [...]}``."""
        return self.call_public(pair, constants.DEPTH_PATH)

    # ------------------------------------------------------------------
    # Trade API
    # ------------------------------------------------------------------
    def get_info(self) -> Any:
        """User balances and the server timestamp."""
        return self.call_private(constants.GET_INFO_API)

    def get_order(self, order_id: int | str, pair: str) -> Any:
        """Details of one order."""
        return self.call_private(constants.GET_ORDER_API, {"order_id": order_id, "pair": pair})

    def open_orders(self, pair: str | None = None) -> Any:
        """Current open orders, for one pair or for all of them."""
        return self.call_private(constants.OPEN_ORDERS_API, _compact(pair=pair))

    def order_history(self, pair: str, count: int | None = None, from_: int | None = None) -> Any:
        """Order history of a pair.

        ``from_`` is sent as ``from``. The exchange defaults to ``count=100``
        and ``from=0``.
        """
        args = _compact(pair=pair, count=count)
        if from_ is not None:
            args["from"] = from_
        return self.call_private(constants.ORDER_HISTORY_API, args)

    def trans_history(self) -> Any:
        """Deposits and withdrawals of all currencies."""
        return self.call_private(constants.TRANS_HISTORY_API)

    def trade_history(
        self,
        pair: str,
        count: int | None = None,
        from_id: int | None = None,
        end_id: int | None = None,
        order: str | None = None,
        since: int | None = None,
        end: int | None = None,
    ) -> Any:
        """Executed trades of a pair.

        Args:
            pair: Trading pair, e.g. ``xrp_idr``.
            count: Number of trades to return (exchange default 1000).
            from_id: First trade id.
            end_id: Last trade id.
            order: ``asc`` or ``desc``.
            since: Start time, unix timestamp.
            end: End time, unix timestamp.
        """
        args = _compact(
            pair=pair,
            count=count,
            from_id=from_id,
            end_id=end_id,
            order=order,
            since=since,
            end=end,
        )
        return self.call_private(constants.TRADE_HISTORY_API, args)

    def trade(
        self,
        pair: str,
        type: str,  # noqa: A002 - exchange parameter name
        price: Any,
        idr: Any = None,
        btc: Any = None,
        **amounts: Any,
    ) -> Any:
        """Open a new order.

        ``idr`` is the amount to spend when buying, ``btc`` (or the coin named
        by another keyword, e.g. ``xrp=100``) the amount to sell.
        """
        args = _compact(pair=pair, type=type, price=price, idr=idr, btc=btc, **amounts)
        return self.call_private(constants.TRADE_API, args)

    def cancel_order(self, order_id: int | str, pair: str, type: str) -> Any:  # noqa: A002
        """Cancel an open buy or sell order."""
        return self.call_private(
            constants.CANCEL_ORDER_API,
            {"order_id": order_id, "pair": pair, "type": type},
        )

    def withdraw_coin(
        self,
        currency: str,
        request_id: str,
        withdraw_address: str,
        withdraw_amount: Any,
        withdraw_memo: str | None = None,
    ) -> Any:
        """Withdraw a coin (not IDR) to an external address.

        ``request_id`` is an alphanumeric string (max 255 chars) echoed back to
        the withdrawal callback.
        """
        args = _compact(
            currency=currency,
            request_id=request_id,
            withdraw_address=withdraw_address,
            withdraw_amount=withdraw_amount,
            withdraw_memo=withdraw_memo,
        )
        return self.call_private(constants.WITHDRAW_COIN_API, args)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def call_public(self, pair: str, path: str) -> Any:
        url = f"{self.public_url}{pair}{path}"
        data = self._send("GET", url)
        if isinstance(data, dict) and "error" in data:
            raise ApiError(f"{pair}{path}: {data['error']}", body=data)
        return data

    def call_private(self, method: str, args: Mapping[str, Any] | None = None) -> Any:
        body = build_post_data(method, self.nonce(), args)
        headers = build_headers(self.api_key, self.secret_key, body)
        self.logger.debug("Trade API call %s", method)
        data = self._send("POST", self.trade_url, data=body.encode("utf-8"), headers=headers)
        if self.raise_on_error and isinstance(data, dict) and data.get("success") == 0:
            raise ApiError(f"{method}: {data.get('error', 'unknown error')}", body=data)
        return data

    def _send(
        self,
        method: str,
        url: str,
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        self.logger.debug("HTTP %s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.logger.warning("HTTP %s %s failed: %s", method, url, exc)
            raise NetworkError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise ApiError(
                f"{response.status_code} {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"Invalid JSON response from {url}",
                status_code=response.status_code,
                body=response.text,
            ) from exc


__all__ = ["ApiError", "BitcoinCoIdClient", "BitcoinCoIdError", "NetworkError"]
