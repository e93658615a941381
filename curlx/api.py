"""One-call helpers that build a request and send it through a session."""

from __future__ import annotations

from typing import Any, Optional, Union

from curlx.options import Method
from curlx.request import Request
from curlx.response import Response
from curlx.session import Session

__all__ = ["get", "post", "put", "delete", "patch", "head", "options"]


def _send(
    method: Union[Method, str],
    url: str,
    session: Optional[Session],
    kwargs: dict[str, Any],
) -> Response:
    request = Request(url=url, method=method, **kwargs)
    if session is not None:
        return session.send(request)
    with Session() as temporary:
        return temporary.send(request)


def get(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send a GET request; keyword options are those of :class:`Request`."""
    return _send(Method.GET, url, session, kwargs)


def post(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send a POST request; keyword options are those of :class:`Request`."""
    return _send(Method.POST, url, session, kwargs)


def put(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send a PUT request; keyword options are those of :class:`Request`."""
    return _send(Method.PUT, url, session, kwargs)


def delete(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send a DELETE request; keyword options are those of :class:`Request`."""
    return _send(Method.DELETE, url, session, kwargs)


def patch(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send a PATCH request; keyword options are those of :class:`Request`."""
    return _send(Method.PATCH, url, session, kwargs)


def head(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send a HEAD request; the response body is always empty."""
    return _send(Method.HEAD, url, session, kwargs)


def options(url: str, *, session: Optional[Session] = None, **kwargs: Any) -> Response:
    """Send an OPTIONS request; keyword options are those of :class:`Request`."""
    return _send(Method.OPTIONS, url, session, kwargs)