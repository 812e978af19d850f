"""Driver registry.

Drivers are looked up by name and built through :func:`create_driver`,
which resolves credentials and refuses to return a driver whose
requirements are not met.
"""
from __future__ import annotations

from .base import Driver, DriverRequirements, Ticker
from .bitquery import BitqueryDexDriver
from .uniswap2avalanche import Uniswap2Avalanche
from ..config import settings
from ..exceptions import DriverNotFoundError
from ..utils.secrets import get_api_key

DRIVERS: dict[str, type[Driver]] = {
    Uniswap2Avalanche.name: Uniswap2Avalanche,
}


def get_driver_class(name: str) -> type[Driver] | None:
    """Return the driver class registered as ``name`` if available."""

    return DRIVERS.get(name.lower())


def _resolve_key(cls: type[Driver]) -> str | None:
    key = get_api_key(cls.name)
    if key:
        return key
    if issubclass(cls, BitqueryDexDriver):
        return get_api_key("bitquery") or settings.bitquery_api_key
    return None


def create_driver(
    name: str, key: str | None = None, secret: str | None = None
) -> Driver:
    """Instantiate the driver ``name`` and validate its configuration.

    When ``key`` is omitted it is looked up as ``<NAME>_API_KEY`` and, for
    Bitquery drivers, ``BITQUERY_API_KEY`` / :attr:`Settings.bitquery_api_key`.

    Raises
    ------
    DriverNotFoundError
        If no driver is registered under ``name``.
    DriverConfigError
        If a required credential is missing.
    """

    cls = get_driver_class(name)
    if cls is None:
        choices = ", ".join(sorted(DRIVERS))
        raise DriverNotFoundError(f"unknown driver {name!r}, choose one of: {choices}")
    if key is None and cls.requires.key:
        key = _resolve_key(cls)
    driver = cls(key=key, secret=secret)
    driver.validate()
    return driver


__all__ = [
    "Driver",
    "DriverRequirements",
    "Ticker",
    "BitqueryDexDriver",
    "Uniswap2Avalanche",
    "DRIVERS",
    "get_driver_class",
    "create_driver",
]
