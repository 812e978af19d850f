"""Thin async HTTP helper shared by all drivers."""
from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .config import settings

log = logging.getLogger(__name__)


async def request(
    method: str,
    url: str,
    *,
    headers: Mapping[str, str] | None = None,
    json: Any = None,
    params: Mapping[str, Any] | None = None,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Send one request and return the decoded JSON body.

    A new :class:`httpx.AsyncClient` is opened for the call unless ``client``
    is given, in which case it is used as-is and left open.  Non 2xx
    responses raise :class:`httpx.HTTPStatusError`; transport failures and
    invalid JSON propagate unchanged after being logged.
    """

    timeout = settings.http_timeout if timeout is None else timeout
    try:
        if client is not None:
            resp = await client.request(
                method, url, headers=headers, json=json, params=params, timeout=timeout
            )
            resp.raise_for_status()
            return resp.json()
        async with httpx.AsyncClient(timeout=timeout) as own_client:
            resp = await own_client.request(
                method, url, headers=headers, json=json, params=params
            )
            resp.raise_for_status()
            return resp.json()
    except Exception as e:
        log.error(
            "rest_error", extra={"method": method, "url": url, "err": str(e)}
        )
        raise


__all__ = ["request"]
