"""API key lookup for drivers.

Keys are read, never written: the environment wins, then a local ``.env``
file, then ``~/.secrets``.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional


def _parse_env_file(path: Path) -> Dict[str, str]:
    """Return ``KEY=VALUE`` pairs found in ``path`` (missing file -> ``{}``)."""
    data: Dict[str, str] = {}
    if not path.exists():
        return data
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        data[k.strip()] = v.strip().strip('"')
    return data


def get_secret(
    key: str,
    default: Optional[str] = None,
    env_file: Path = Path(".env"),
    secrets_file: Path = Path("~/.secrets"),
) -> Optional[str]:
    """Look ``key`` up in the environment, then ``env_file``, then ``secrets_file``.

    Empty values are treated as unset.
    """
    val = os.getenv(key)
    if val:
        return val
    for path in (env_file, secrets_file.expanduser()):
        val = _parse_env_file(path).get(key)
        if val:
            return val
    return default


def get_api_key(prefix: str, **kwargs) -> Optional[str]:
    """Return ``<PREFIX>_API_KEY`` via :func:`get_secret`."""
    return get_secret(f"{prefix.upper()}_API_KEY", **kwargs)


__all__ = ["get_secret", "get_api_key"]
