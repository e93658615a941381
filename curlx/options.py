"""Request option types: methods, authentication and redirect policy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

__all__ = [
    "Method",
    "AuthType",
    "Auth",
    "parse_auth",
    "Redirects",
    "DEFAULT_MAX_REDIRECTS",
    "Params",
    "Files",
]

DEFAULT_MAX_REDIRECTS = 30

_EMPTY = ""

Params = Dict[str, str]
"""Query parameters or form fields, name to value."""

Files = List[Tuple[str, str]]
"""Upload parts as (field name, file path) pairs."""


class Method(str, Enum):
    """Common HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value


class AuthType(Enum):
    """HTTP authentication schemes."""

    NONE = "none"
    BASIC = "basic"
    DIGEST = "digest"


@dataclass(frozen=True)
class Auth:
    """Credentials for a request.

    When ``type`` is omitted it is ``NONE`` for empty credentials and
    ``BASIC`` otherwise.
    """

    username: str = _EMPTY
    password: str = _EMPTY
    type: Optional[AuthType] = None

    def __post_init__(self) -> None:
        if self.type is None:
            resolved = AuthType.BASIC if (self.username or self.password) else AuthType.NONE
            object.__setattr__(self, "type", resolved)

    def user_pass(self) -> str:
        """Return ``username:password``, or an empty string when no auth is used."""
        if self.type is AuthType.NONE:
            return _EMPTY
        return f"{self.username}:{self.password}"


def parse_auth(text: str) -> Auth:
    """Build basic credentials from a ``user:password`` string."""
    user, _, rest = text.partition(":")
    return Auth(user, rest, AuthType.BASIC)


@dataclass(frozen=True)
class Redirects:
    """Redirect policy; the limit defaults to 30 when allowed and 0 otherwise."""

    allow: bool = True
    max_redirects: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_redirects is None:
            limit = DEFAULT_MAX_REDIRECTS if self.allow else 0
            object.__setattr__(self, "max_redirects", limit)