"""Ordered request/response header lines and a cookie collection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Union

__all__ = ["Headers", "Cookies"]

_HeaderSource = Union[Mapping[str, str], Iterable[Union[str, "tuple[str, str]"]], None]


class Headers:
    """An ordered list of raw ``Name: value`` header lines."""

    def __init__(self, source: _HeaderSource = None) -> None:
        self._lines: list[str] = []
        if source is None:
            return
        if isinstance(source, Mapping):
            for key, value in source.items():
                self.add(key, value)
            return
        for item in source:
            if isinstance(item, str):
                self.add_line(item)
            else:
                key, value = item
                self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Append a header built from a name and a value."""
        self._lines.append(f"{key}: {value}")

    def add_line(self, line: str) -> None:
        """Append a header line verbatim."""
        self._lines.append(line)

    def remove(self, name: str) -> None:
        """Remove every line that starts with ``name``."""
        self._lines = [line for line in self._lines if not line.startswith(name)]

    def get(self, name: str) -> str | None:
        """Return the value of the first line starting with ``name`` that has a colon."""
        for line in self._lines:
            if line.startswith(name):
                colon = line.find(":")
                if colon != -1:
                    return line[colon + 2:]
        return None

    def copy(self) -> Headers:
        return Headers(list(self._lines))

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f"Headers({self._lines!r})"

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)


class Cookies(Mapping[str, str]):
    """A name-to-value cookie collection."""

    def __init__(
        self,
        source: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        self._cookies: dict[str, str] = {}
        if source is None:
            return
        pairs = source.items() if isinstance(source, Mapping) else source
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Set a cookie, replacing any existing one with the same name."""
        self._cookies[key] = value

    def remove(self, name: str) -> None:
        """Drop a cookie if present."""
        self._cookies.pop(name, None)

    def get(self, name: str) -> str | None:  # type: ignore[override]
        """Return a cookie's value, or ``None`` if it is not set."""
        return self._cookies.get(name)

    def copy(self) -> Cookies:
        return Cookies(self._cookies)

    def __getitem__(self, name: str) -> str:
        return self._cookies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __repr__(self) -> str:
        return f"Cookies({self._cookies!r})"

    def __str__(self) -> str:
        return "".join(f"{key}={value}\n" for key, value in self._cookies.items())