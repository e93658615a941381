"""A reusable HTTP session that sends :class:`~curlx.request.Request` objects."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from contextlib import ExitStack
from http.cookiejar import LoadError, MozillaCookieJar
from typing import IO, Any, Optional, Union

import requests
from requests.auth import AuthBase, HTTPBasicAuth, HTTPDigestAuth
from requests.structures import CaseInsensitiveDict

from curlx.exceptions import (
    ConnectionError,
    RequestException,
    Timeout,
    TooManyRedirects,
)
from curlx.headers import Cookies, Headers
from curlx.options import Auth, AuthType, Method, Redirects
from curlx.request import Request
from curlx.response import Response

__all__ = ["url_encode", "build_url", "parse_set_cookie", "Session"]

_UNRESERVED = frozenset(b"-_.~")
_SET_COOKIE = "Set-Cookie:"
_SET_COOKIE_PREFIX_LEN = len("Set-Cookie: ")
_HTTP_VERSIONS = {10: "1.0", 11: "1.1", 20: "2"}
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
_CHUNK_SIZE = 64 * 1024


def url_encode(value: str) -> str:
    """Percent-encode everything except ASCII letters, digits and ``-_.~``.

    Escapes use lower-case hexadecimal digits, one per UTF-8 byte.
    """
    return "".join(
        chr(byte)
        if (chr(byte).isascii() and chr(byte).isalnum()) or byte in _UNRESERVED
        else f"%{byte:02x}"
        for byte in value.encode("utf-8")
    )


def build_url(url: str, params: Optional[Mapping[str, str]]) -> str:
    """Append ``params``, sorted by name, to ``url`` as a query string."""
    if not params:
        return str(url)
    query = "&".join(
        f"{url_encode(name)}={url_encode(params[name])}" for name in sorted(params)
    )
    return f"{url}?{query}"


def parse_set_cookie(line: str) -> Optional[tuple[str, str]]:
    """Extract ``(name, value)`` from a ``Set-Cookie:`` header line.

    Returns ``None`` for other header lines and for cookies without ``=``.
    """
    if not line.startswith(_SET_COOKIE):
        return None
    cookie = line[_SET_COOKIE_PREFIX_LEN:]
    eq = cookie.find("=")
    if eq == -1:
        return None
    semicolon = cookie.find(";", eq)
    value = cookie[eq + 1:] if semicolon == -1 else cookie[eq + 1:semicolon]
    return cookie[:eq], value


def _header_mapping(headers: Headers) -> CaseInsensitiveDict:
    merged: CaseInsensitiveDict = CaseInsensitiveDict()
    for line in headers:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name, value = name.strip(), value.strip()
        if name in merged:
            merged[name] = f"{merged[name]}, {value}"
        else:
            merged[name] = value
    return merged


def _requests_auth(auth: Auth) -> Optional[AuthBase]:
    if auth.type is AuthType.BASIC:
        return HTTPBasicAuth(auth.username, auth.password)
    if auth.type is AuthType.DIGEST:
        return HTTPDigestAuth(auth.username, auth.password)
    return None


def _translate(exc: requests.exceptions.RequestException) -> RequestException:
    message = str(exc)
    if isinstance(exc, requests.exceptions.TooManyRedirects):
        return TooManyRedirects(message)
    if isinstance(exc, requests.exceptions.Timeout):
        return Timeout(message)
    if isinstance(exc, requests.exceptions.ConnectionError):
        return ConnectionError(message)
    return RequestException(message)


def _header_lines(resp: requests.Response) -> Iterator[str]:
    raw = resp.raw
    version = _HTTP_VERSIONS.get(getattr(raw, "version", None), "1.1")
    yield f"HTTP/{version} {resp.status_code} {resp.reason or ''}".rstrip()
    raw_headers = getattr(raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "iteritems"):
        items = raw_headers.iteritems()
    else:
        items = resp.headers.items()
    for name, value in items:
        yield f"{name}: {value}"


class Session:
    """Sends requests over one connection pool and one cookie store.

    Default headers and cookies are merged into every request; the
    request's own values are added after them.
    """

    def __init__(self) -> None:
        self._http = requests.Session()
        self.default_headers = Headers()
        self.default_cookies = Cookies()
        self.cookie_jar_path: Optional[str] = None
        self._closed = False

    def __enter__(self) -> Session:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def set_default_headers(self, headers: Headers) -> None:
        """Replace the headers sent with every request."""
        self.default_headers = headers.copy() if isinstance(headers, Headers) else Headers(headers)

    def set_default_cookies(self, cookies: Cookies) -> None:
        """Replace the cookies sent with every request."""
        self.default_cookies = cookies.copy() if isinstance(cookies, Cookies) else Cookies(cookies)

    def set_cookie_jar(self, path: Union[str, os.PathLike]) -> None:
        """Load cookies from ``path`` if it exists and save them there on close."""
        self.cookie_jar_path = os.fspath(path)
        jar = MozillaCookieJar(self.cookie_jar_path)
        if os.path.exists(self.cookie_jar_path):
            try:
                jar.load(ignore_discard=True, ignore_expires=True)
            except (OSError, LoadError):
                pass
        for cookie in self._http.cookies:
            jar.set_cookie(cookie)
        self._http.cookies = jar  # type: ignore[assignment]

    def close(self) -> None:
        """Save the cookie jar, if one is set, and release connections."""
        if self._closed:
            return
        self._closed = True
        try:
            if self.cookie_jar_path:
                jar = self._http.cookies
                if isinstance(jar, MozillaCookieJar):
                    try:
                        jar.save(ignore_discard=True, ignore_expires=True)
                    except OSError as exc:
                        raise RequestException(
                            f"Failed to save cookie jar: {self.cookie_jar_path}"
                        ) from exc
        finally:
            self._http.close()

    def send(self, request: Request) -> Response:
        """Perform ``request`` and return the completed response."""
        effective_headers = self.default_headers.copy()
        for line in request.headers:
            effective_headers.add_line(line)
        effective_cookies = self.default_cookies.copy()
        for name, value in request.cookies.items():
            effective_cookies.add(name, value)

        method = str(request.method)
        header_map = _header_mapping(effective_headers)
        kwargs: dict[str, Any] = {
            "headers": header_map,
            "cookies": dict(effective_cookies),
            "allow_redirects": request.redirects.allow,
            "timeout": request.timeout or None,
            "verify": request.verify,
            "auth": _requests_auth(request.auth),
        }
        if request.proxy:
            kwargs["proxies"] = {"http": request.proxy, "https": request.proxy}

        with ExitStack() as stack:
            if request.files:
                parts = []
                for field_name, path in request.files:
                    try:
                        handle = stack.enter_context(open(path, "rb"))
                    except OSError as exc:
                        raise RequestException(f"Failed to open upload file: {path}") from exc
                    parts.append((field_name, (os.path.basename(path), handle)))
                kwargs["files"] = parts
                kwargs["data"] = dict(request.params)
            elif request.body:
                kwargs["data"] = request.body
                header_map.setdefault("Content-Type", _FORM_CONTENT_TYPE)

            sink: Optional[IO[bytes]] = None
            if request.output_file is not None:
                try:
                    sink = stack.enter_context(open(request.output_file, "wb"))
                except OSError as exc:
                    raise RequestException(
                        f"Failed to open output file for writing: {request.output_file}"
                    ) from exc

            self._http.max_redirects = request.redirects.max_redirects
            try:
                resp = self._http.request(
                    method,
                    build_url(request.url, request.params),
                    stream=sink is not None,
                    **kwargs,
                )
                if sink is not None:
                    with resp:
                        for chunk in resp.iter_content(_CHUNK_SIZE):
                            sink.write(chunk)
                    body = ""
                elif method == Method.HEAD.value:
                    body = ""
                else:
                    body = resp.text
            except requests.exceptions.RequestException as exc:
                raise _translate(exc) from exc

        chain = [*resp.history, resp]
        response_headers = Headers([line for r in chain for line in _header_lines(r)])
        received = Cookies()
        for line in response_headers:
            parsed = parse_set_cookie(line)
            if parsed is not None:
                received.add(*parsed)

        return Response(
            status_code=resp.status_code,
            reason=resp.reason or "",
            url=resp.url,
            is_redirect=resp.is_redirect,
            headers=response_headers,
            body=body,
            request_url=request.url,
            request_headers=effective_headers,
            received_cookies=received,
            elapsed_time=sum(r.elapsed.total_seconds() for r in chain),
            history=[resp.url] if resp.history else [],
        )

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Headers] = None,
        cookies: Optional[Cookies] = None,
        timeout: int = 0,
        auth: Optional[Auth] = None,
        proxy: str = "",
        redirects: Optional[Redirects] = None,
        verify: bool = True,
    ) -> Response:
        """Send a GET request built from the given options."""
        request = Request(
            url=url,
            method=Method.GET,
            headers=headers if headers is not None else Headers(),
            timeout=timeout,
            auth=auth if auth is not None else Auth(),
            proxy=proxy,
            cookies=cookies if cookies is not None else Cookies(),
            redirects=redirects if redirects is not None else Redirects(),
            verify=verify,
            params=dict(params or {}),
        )
        return self.send(request)