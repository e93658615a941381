"""Description of a single HTTP request and its options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

from curlx.headers import Cookies, Headers
from curlx.options import Auth, Method, Redirects, parse_auth

__all__ = ["Request"]


def _coerce_method(value: Union[Method, str]) -> Union[Method, str]:
    if isinstance(value, Method):
        return value
    try:
        return Method(value)
    except ValueError:
        return value


@dataclass
class Request:
    """Everything needed to send one request through a session.

    Option fields accept convenient shorthands: plain mappings or header
    lines for ``headers``, mappings for ``cookies``, a ``"user:password"``
    string for ``auth`` and a bool for ``redirects``.
    """

    url: str = ""
    method: Union[Method, str] = Method.GET
    headers: Headers = field(default_factory=Headers)
    body: Union[str, bytes] = ""
    timeout: int = 0
    auth: Auth = field(default_factory=Auth)
    proxy: str = ""
    cookies: Cookies = field(default_factory=Cookies)
    redirects: Redirects = field(default_factory=Redirects)
    verify: bool = True
    params: dict[str, str] = field(default_factory=dict)
    files: list[tuple[str, str]] = field(default_factory=list)
    output_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.url = str(self.url)
        self.method = _coerce_method(self.method)
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)
        else:
            self.headers = self.headers.copy()
        if not isinstance(self.cookies, Cookies):
            self.cookies = Cookies(self.cookies)
        else:
            self.cookies = self.cookies.copy()
        if isinstance(self.auth, str):
            self.auth = parse_auth(self.auth)
        if isinstance(self.redirects, bool):
            self.redirects = Redirects(self.redirects)
        if self.body is None:
            self.body = ""
        self.params = dict(self.params.items() if isinstance(self.params, Mapping) else self.params)
        files: Iterable[tuple[str, str]] = (
            self.files.items() if isinstance(self.files, Mapping) else self.files
        )
        self.files = [(name, path) for name, path in files]
        if self.output_file == "":
            self.output_file = None