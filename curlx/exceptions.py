"""Exception hierarchy raised by the HTTP client."""

from __future__ import annotations

__all__ = [
    "RequestException",
    "ConnectionError",
    "Timeout",
    "HTTPError",
    "TooManyRedirects",
]


class RequestException(RuntimeError):
    """Base class for every error raised while performing a request."""

    prefix = ""

    def __init__(self, message: str) -> None:
        self.message = f"{self.prefix}{message}"
        super().__init__(self.message)


class ConnectionError(RequestException):  # noqa: A001 - deliberate public name
    """The host could not be resolved or connected to."""

    prefix = "Connection Error: "


class Timeout(RequestException):
    """The operation did not finish in time."""

    prefix = "Timeout: "


class HTTPError(RequestException):
    """The server answered with an error status."""

    prefix = "HTTP Error: "


class TooManyRedirects(RequestException):
    """The redirect limit was exceeded."""

    prefix = "Too Many Redirects: "