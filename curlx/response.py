"""The result of a performed HTTP request."""

from __future__ import annotations

import json as _json
from dataclasses import dataclass, field
from typing import Any

from curlx.exceptions import HTTPError, RequestException
from curlx.headers import Cookies, Headers

__all__ = ["Response"]


@dataclass
class Response:
    """Status, headers, body and metadata of a completed request."""

    status_code: int = 0
    reason: str = ""
    url: str = ""
    is_redirect: bool = False
    headers: Headers = field(default_factory=Headers)
    body: str = ""
    request_url: str = ""
    request_headers: Headers = field(default_factory=Headers)
    received_cookies: Cookies = field(default_factory=Cookies)
    elapsed_time: float = 0.0
    history: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True for status codes from 200 up to, but not including, 400."""
        return 200 <= self.status_code < 400

    @property
    def text(self) -> str:
        """The response body as text."""
        return self.body

    def raise_for_status(self) -> None:
        """Raise :class:`HTTPError` unless the response is ok."""
        if not self.ok:
            raise HTTPError(f"HTTP Error: {self.status_code}")

    def json(self) -> Any:
        """Decode the body as JSON."""
        try:
            return _json.loads(self.body)
        except ValueError as exc:
            raise RequestException(f"JSON parse error: {exc}") from exc