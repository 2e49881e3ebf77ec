"""Endpoint locations, private method names and trading pairs."""

from __future__ import annotations

PUBLIC_API_URL = "https://vip.bitcoin.co.id/api/"
TRADE_API_URL = "https://vip.bitcoin.co.id/tapi/"

# Public endpoint suffixes, appended to ``{PUBLIC_API_URL}{pair}``.
TICKER_PATH = "/ticker"
TRADES_PATH = "/trades"
DEPTH_PATH = "/depth"

# Private (trade API) method names.
GET_INFO_API = "getInfo"
GET_ORDER_API = "getOrder"
OPEN_ORDERS_API = "openOrders"
ORDER_HISTORY_API = "orderHistory"
TRANS_HISTORY_API = "transHistory"
TRADE_HISTORY_API = "tradeHistory"
TRADE_API = "trade"
CANCEL_ORDER_API = "cancelOrder"
WITHDRAW_COIN_API = "withdrawCoin"

PRIVATE_METHODS = (
    GET_INFO_API,
    GET_ORDER_API,
    OPEN_ORDERS_API,
    ORDER_HISTORY_API,
    TRANS_HISTORY_API,
    TRADE_HISTORY_API,
    TRADE_API,
    CANCEL_ORDER_API,
    WITHDRAW_COIN_API,
)

# IDR markets
BTC_IDR = "btc_idr"
BCH_IDR = "bch_idr"
BTG_IDR = "btg_idr"
ETH_IDR = "eth_idr"
ETC_IDR = "etc_idr"
LTC_IDR = "ltc_idr"
NXT_IDR = "nxt_idr"
WAVES_IDR = "waves_idr"
XRP_IDR = "xrp_idr"
XZC_IDR = "xzc_idr"

# BTC markets
BTS_BTC = "bts_btc"
DASH_BTC = "drk_btc"
DOGE_BTC = "doge_btc"
ETH_BTC = "eth_btc"
LTC_BTC = "ltc_btc"
NXT_BTC = "nxt_btc"
XLM_BTC = "str_btc"
XEM_BTC = "nem_btc"
XRP_BTC = "xrp_btc"

PAIRS = (
    BTC_IDR,
    BCH_IDR,
    BTG_IDR,
    ETH_IDR,
    ETC_IDR,
    LTC_IDR,
    NXT_IDR,
    WAVES_IDR,
    XRP_IDR,
    XZC_IDR,
    BTS_BTC,
    DASH_BTC,
    DOGE_BTC,
    ETH_BTC,
    LTC_BTC,
    NXT_BTC,
    XLM_BTC,
    XEM_BTC,
    XRP_BTC,
)
