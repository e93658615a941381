import pytest

from curlx.headers import Cookies, Headers


def test_add_builds_line_and_get_returns_value():
    headers = Headers()
    headers.add("Accept", "application/json")
    assert list(headers) == ["Accept: application/json"]
    assert headers.get("Accept") == "application/json"


def test_add_line_is_kept_verbatim():
    headers = Headers()
    headers.add_line("X-Custom: abc")
    assert list(headers) == ["X-Custom: abc"]
    assert headers.get("X-Custom") == "abc"


def test_get_matches_by_prefix():
    headers = Headers([("Content-Type", "text/plain")])
    assert headers.get("Content") == "text/plain"


def test_get_missing_returns_none():
    headers = Headers({"Accept": "*/*"})
    assert headers.get("Authorization") is None


def test_get_skips_lines_without_colon():
    headers = Headers(["X-Flag", "X-Flag-Extra: on"])
    assert headers.get("X-Flag") == "on"


def test_get_returns_first_match():
    headers = Headers()
    headers.add("Set-Cookie", "a=1")
    headers.add("Set-Cookie", "b=2")
    assert headers.get("Set-Cookie") == "a=1"


def test_remove_drops_all_lines_with_prefix():
    headers = Headers()
    headers.add("X-One", "1")
    headers.add("Accept", "*/*")
    headers.add("X-One-More", "2")
    headers.remove("X-One")
    assert list(headers) == ["Accept: */*"]
    assert len(headers) == 1


def test_remove_missing_leaves_headers_unchanged():
    headers = Headers({"Accept": "*/*"})
    before = list(headers)
    headers.remove("Nope")
    assert list(headers) == before


def test_str_writes_one_line_per_header():
    headers = Headers([("A", "1"), ("B", "2")])
    assert str(headers) == "A: 1\nB: 2\n"


def test_copy_is_independent():
    headers = Headers({"A": "1"})
    clone = headers.copy()
    clone.add("B", "2")
    assert headers == Headers({"A": "1"})
    assert len(clone) == 2


def test_mixed_constructor_items():
    headers = Headers(["Raw: line", ("Key", "value")])
    assert list(headers) == ["Raw: line", "Key: value"]


def test_cookies_add_and_get():
    cookies = Cookies()
    cookies.add("session", "token")
    assert cookies.get("session") == "token"
    assert cookies["session"] == "token"


def test_cookies_add_replaces_existing():
    cookies = Cookies({"name": "first"})
    cookies.add("name", "second")
    assert cookies.get("name") == "second"
    assert len(cookies) == 1


def test_cookies_get_missing_returns_none():
    assert Cookies().get("absent") is None


def test_cookies_remove():
    cookies = Cookies([("a", "1"), ("b", "2")])
    cookies.remove("a")
    cookies.remove("missing")
    assert dict(cookies) == {"b": "2"}


def test_cookies_missing_item_raises_key_error():
    with pytest.raises(KeyError):
        Cookies()["absent"]


def test_cookies_str_lists_pairs():
    cookies = Cookies({"a": "1", "b": "2"})
    assert str(cookies) == "a=1\nb=2\n"


def test_cookies_copy_is_independent():
    cookies = Cookies({"a": "1"})
    clone = cookies.copy()
    clone.add("b", "2")
    assert dict(cookies) == {"a": "1"}
    assert dict(clone) == {"a": "1", "b": "2"}