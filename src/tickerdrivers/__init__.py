"""Normalized ticker drivers for third party market data APIs."""

__version__ = "0.1.0"

from .drivers import Driver, Ticker, create_driver, get_driver_class  # noqa: E402

__all__ = ["Driver", "Ticker", "create_driver", "get_driver_class", "__version__"]
