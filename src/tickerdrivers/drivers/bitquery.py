"""Drivers backed by the Bitquery GraphQL API.

Bitquery aggregates DEX trades per trading pair for a time window.  A
concrete driver only has to name the ``network`` and ``protocol`` it covers;
the query, the variables and the mapping into :class:`Ticker` are shared.
"""
from __future__ import annotations

from typing import Any, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ResponseShapeError
from ..http import request
from ..utils.numbers import parse_to_float
from ..utils.time import trailing_window
from .base import Driver, DriverRequirements, Ticker


class QueryWindow(NamedTuple):
    since: str
    till: str


class BitqueryCurrency(BaseModel):
    symbol: Optional[str] = None
    address: Optional[str] = None
    name: Optional[str] = None


class DexTradeRow(BaseModel):
    """One aggregated row of ``dexTrades`` as aliased by :attr:`BitqueryDexDriver.QUERY`.

    Numeric fields are kept raw; Bitquery returns them as numbers or strings
    depending on the field, so they are parsed with :func:`parse_to_float`.
    """

    model_config = ConfigDict(extra="ignore")

    base_currency: BitqueryCurrency = Field(alias="baseCurrency")
    quote_currency: BitqueryCurrency = Field(alias="quoteCurrency")
    base_volume: Any = Field(default=None, alias="baseVolume")
    quote_volume: Any = Field(default=None, alias="quoteVolume")
    open: Any = None
    high: Any = None
    low: Any = None
    close: Any = None

    def to_ticker(self) -> Ticker:
        return Ticker(
            base=self.base_currency.symbol,
            base_name=self.base_currency.name,
            base_reference=self.base_currency.address,
            quote=self.quote_currency.symbol,
            quote_name=self.quote_currency.name,
            quote_reference=self.quote_currency.address,
            base_volume=parse_to_float(self.base_volume),
            quote_volume=parse_to_float(self.quote_volume),
            open=parse_to_float(self.open),
            high=parse_to_float(self.high),
            low=parse_to_float(self.low),
            close=parse_to_float(self.close),
        )


class _Exchange(BaseModel):
    tickers: List[DexTradeRow]


class _Data(BaseModel):
    exchange: _Exchange


class DexTradesResponse(BaseModel):
    """``{"data": {"exchange": {"tickers": [...]}}}``"""

    data: _Data


class BitqueryDexDriver(Driver):
    """Base driver for one DEX protocol on one Bitquery network.

    Limitations
    -----------
    Only trades worth more than ``MINIMUM_VOLUME_IN_USD`` are aggregated and
    a single request is made; results beyond Bitquery's default page size
    are not fetched.
    """

    URL = "https://graphql.bitquery.io"
    MINIMUM_VOLUME_IN_USD = 1000
    MOCK_WINDOW = QueryWindow(
        since="2022-11-17T08:54:31.046Z", till="2022-11-18T08:54:31.046Z"
    )

    # open/close: quote_price at the earliest/latest trade time of the window.
    QUERY = """
query fetchTickers($network: EthereumNetwork!, $protocol: String!, $minimumVolumeInUsd: Float!, $twentyFourHoursAgo: ISO8601DateTime, $now: ISO8601DateTime) {
  exchange: ethereum(network: $network) {
    tickers: dexTrades(
      protocol: {is: $protocol}
      tradeAmountUsd: {gt: $minimumVolumeInUsd}
      time: {since: $twentyFourHoursAgo, till: $now}
    ) {
      baseCurrency {
        symbol
        address
        name
      }
      quoteCurrency {
        symbol
        address
        name
      }
      baseVolume: baseAmount
      quoteVolume: quoteAmount
      open: minimum(of: time, get: quote_price)
      high: maximum(of: quote_price, get: quote_price)
      low: minimum(of: quote_price, get: quote_price)
      close: maximum(of: time, get: quote_price)
    }
  }
}
"""

    requires = DriverRequirements(key=True)
    network: str = ""
    protocol: str = ""

    def query_window(self, is_mocked: bool = False) -> QueryWindow:
        if is_mocked:
            return self.MOCK_WINDOW
        since, till = trailing_window(24)
        return QueryWindow(since=since, till=till)

    def build_variables(self, window: QueryWindow) -> dict[str, Any]:
        return {
            "now": window.till,
            "twentyFourHoursAgo": window.since,
            "minimumVolumeInUsd": self.MINIMUM_VOLUME_IN_USD,
            "network": self.network,
            "protocol": self.protocol,
        }

    async def fetch_tickers(self, is_mocked: bool = False) -> List[Ticker]:
        self.validate()
        window = self.query_window(is_mocked)
        payload = await request(
            "POST",
            self.URL,
            headers={"X-API-KEY": self.key},
            json={"query": self.QUERY, "variables": self.build_variables(window)},
        )
        return self.parse_tickers(payload)

    def parse_tickers(self, payload: Any) -> List[Ticker]:
        """Validate ``payload`` and map every row to a :class:`Ticker`.

        Rows keep the order of the response.
        """

        errors = _graphql_errors(payload)
        try:
            parsed = DexTradesResponse.model_validate(payload)
        except ValidationError as e:
            if errors:
                msg = f"{self.name}: GraphQL errors: {'; '.join(errors)}"
            else:
                msg = f"{self.name}: unexpected response shape ({e.error_count()} errors)"
            raise ResponseShapeError(msg, errors) from e
        if errors:
            self.log.warning("graphql_errors", extra={"errors": errors})
        return [row.to_ticker() for row in parsed.data.exchange.tickers]


def _graphql_errors(payload: Any) -> list[str]:
    if not isinstance(payload, dict):
        return []
    raw = payload.get("errors") or []
    if not isinstance(raw, list):
        raw = [raw]
    return [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in raw]


__all__ = [
    "QueryWindow",
    "BitqueryCurrency",
    "DexTradeRow",
    "DexTradesResponse",
    "BitqueryDexDriver",
]
