"""Errors raised by drivers and the driver registry."""

from __future__ import annotations


class DriverError(Exception):
    """Base class for all driver related failures."""


class DriverConfigError(DriverError):
    """A driver was created without the configuration it requires.

    Raised before any request is sent, typically because the API key is
    missing or empty.
    """


class DriverNotFoundError(DriverError, KeyError):
    """No driver is registered under the requested name."""

    def __str__(self) -> str:  # KeyError quotes its message otherwise
        return str(self.args[0]) if self.args else ""


class ResponseShapeError(DriverError):
    """The API answered but the payload does not have the expected layout.

    ``errors`` holds the messages of a GraphQL ``errors`` array when the
    payload carried one.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


__all__ = [
    "DriverError",
    "DriverConfigError",
    "DriverNotFoundError",
    "ResponseShapeError",
]
