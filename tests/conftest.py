import copy
import logging
import sys
import pathlib

import pytest

root_dir = pathlib.Path(__file__).resolve().parents[1]
# Ensure the src package is importable
if str(root_dir / "src") not in sys.path:
    sys.path.append(str(root_dir / "src"))

from tickerdrivers.config import settings  # noqa: E402


BITQUERY_PAYLOAD = {
    "data": {
        "exchange": {
            "tickers": [
                {
                    "baseCurrency": {
                        "symbol": "WAVAX",
                        "address": "0xAAA",
                        "name": "Wrapped AVAX",
                    },
                    "quoteCurrency": {
                        "symbol": "USDC",
                        "address": "0xBBB",
                        "name": "USD Coin",
                    },
                    "baseVolume": "10.5",
                    "quoteVolume": "210.0",
                    "open": "20.0",
                    "high": "21.0",
                    "low": "19.5",
                    "close": "20.5",
                }
            ]
        }
    }
}


@pytest.fixture
def bitquery_payload():
    return copy.deepcopy(BITQUERY_PAYLOAD)


@pytest.fixture(autouse=True)
def isolated_secrets(monkeypatch, tmp_path):
    """Keep real API keys (env, .env, ~/.secrets) out of the tests."""

    monkeypatch.delenv("BITQUERY_API_KEY", raising=False)
    monkeypatch.delenv("UNISWAP2AVALANCHE_API_KEY", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "bitquery_api_key", None)


@pytest.fixture
def fake_request(monkeypatch):
    """Replace the HTTP helper used by Bitquery drivers.

    Returns a function ``install(payload_or_exc)`` giving back the list of
    recorded calls.
    """

    def install(result):
        calls = []

        async def _request(method, url, **kwargs):
            calls.append({"method": method, "url": url, **kwargs})
            if isinstance(result, BaseException):
                raise result
            return result

        monkeypatch.setattr("tickerdrivers.drivers.bitquery.request", _request)
        return calls

    return install


@pytest.fixture
def restore_root_logging():
    """Undo handlers and level changes made by ``setup_logging``."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
