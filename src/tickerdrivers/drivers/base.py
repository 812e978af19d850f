"""Common driver contract and the normalized ticker model."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..exceptions import DriverConfigError


class Ticker(BaseModel):
    """Price and volume snapshot of one trading pair over a time window.

    Attributes use snake_case; :meth:`model_dump` with ``by_alias=True``
    produces the camelCase record (``baseName``, ``quoteVolume``...).
    Numeric fields are ``None`` when the source value is not available.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    base: Optional[str] = None
    base_name: Optional[str] = None
    base_reference: Optional[str] = None
    quote: Optional[str] = None
    quote_name: Optional[str] = None
    quote_reference: Optional[str] = None
    base_volume: Optional[float] = None
    quote_volume: Optional[float] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None


@dataclass(frozen=True)
class DriverRequirements:
    """Configuration a driver needs before it can fetch."""

    key: bool = False
    secret: bool = False


class Driver:
    """Base class for per-source ticker drivers.

    Subclasses set ``name`` and ``requires`` and implement
    :meth:`fetch_tickers`.  Credentials are stored as given; call
    :meth:`validate` (or build drivers through
    :func:`tickerdrivers.drivers.create_driver`) to fail fast when one is
    missing.
    """

    name: str = ""
    requires: DriverRequirements = DriverRequirements()

    def __init__(self, key: str | None = None, secret: str | None = None) -> None:
        self.key = key
        self.secret = secret
        self.log = logging.getLogger(self.__class__.__name__)

    def validate(self) -> None:
        missing = [
            field
            for field in ("key", "secret")
            if getattr(self.requires, field) and not getattr(self, field)
        ]
        if missing:
            raise DriverConfigError(
                f"{self.name or self.__class__.__name__} requires: {', '.join(missing)}"
            )

    async def fetch_tickers(self, is_mocked: bool = False) -> List[Ticker]:  # pragma: no cover - abstract
        """Return the tickers of this source.

        ``is_mocked`` selects a fixed query window so recorded responses can
        be replayed deterministically.
        """
        raise NotImplementedError


__all__ = ["Ticker", "DriverRequirements", "Driver"]
