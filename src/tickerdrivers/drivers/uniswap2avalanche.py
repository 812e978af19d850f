from __future__ import annotations

from .bitquery import BitqueryDexDriver


class Uniswap2Avalanche(BitqueryDexDriver):
    """Uniswap v2 pairs traded on Avalanche, via Bitquery.

    Requires a Bitquery API key (``BITQUERY_API_KEY``).

    Examples
    --------
    >>> import asyncio
    >>> d = Uniswap2Avalanche("KEY")
    >>> tickers = asyncio.run(d.fetch_tickers())  # doctest: +SKIP
    """

    name = "uniswap2avalanche"
    network = "avalanche"
    protocol = "Uniswap v2"
