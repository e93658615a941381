# curlx

A small HTTP client library built around a reusable `Session`. It supports
query parameters, request bodies, file uploads, headers, cookies, Basic or
Digest authentication, proxies, TLS verification, timeouts and redirect
limits. Transfer failures raise exceptions from a single hierarchy.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## One-off requests

`curlx.api` provides `get`, `post`, `put`, `delete`, `patch`, `head` and
`options`. Each function builds a `curlx.request.Request` from its keyword
arguments and sends it. If you do not pass `session=`, the function opens a
temporary session and closes it when the request is done.

```python
from curlx.api import get, post

response = get("https://api.example.com/items", params={"page": "2"})
response.raise_for_status()
items = response.json()

created = post(
    "https://api.example.com/items",
    body='{"name": "widget"}',
    headers={"Content-Type": "application/json", "Authorization": "Bearer token"},
)
```

The keyword options are the fields of `Request`:

| Option        | Meaning                                                          |
|---------------|------------------------------------------------------------------|
| `headers`     | a `Headers`, a mapping, or an iterable of lines or `(name, value)` pairs |
| `cookies`     | a `Cookies` or a mapping                                         |
| `params`      | query parameters, name to value                                  |
| `body`        | request body, `str` or `bytes`                                   |
| `files`       | uploads as `(field name, file path)` pairs, or a mapping         |
| `auth`        | an `Auth`, or a `"user:password"` string                         |
| `redirects`   | a `Redirects`, or a bool                                         |
| `timeout`     | seconds; `0` means no timeout                                    |
| `proxy`       | proxy URL used for both http and https                           |
| `verify`      | verify TLS certificates (default `True`)                         |
| `output_file` | path to stream the response body to                              |

The query parameters are percent-encoded and appended to the URL, sorted by
name. Only ASCII letters, digits and `-_.~` are left unencoded, and escapes
use lower-case hex. `curlx.session.url_encode` and `curlx.session.build_url`
expose this encoding.

If `files` is given, the request is sent as multipart form data. Each file
becomes one part, and `params` are sent as form fields in addition to being
appended to the URL. Otherwise a non-empty `body` is sent as is. Unless you
set a `Content-Type` header, the body is sent as
`application/x-www-form-urlencoded`.

If `output_file` is given, the body is streamed to that file and
`Response.body` is empty. A `HEAD` request always returns an empty body.

## Sessions

A `Session` holds default headers and cookies that are merged into every
request it sends. Headers given with a request are added after the defaults.
Cookies given with a request replace defaults that have the same name.
`Session` is a context manager, and `close()` releases its connections.

```python
from curlx.headers import Cookies, Headers
from curlx.request import Request
from curlx.session import Session

defaults = Headers()
defaults.add("Accept", "application/json")

session_cookies = Cookies()
session_cookies.add("session", "token")

with Session() as session:
    session.set_default_headers(defaults)
    session.set_default_cookies(session_cookies)
    session.set_cookie_jar("cookies.txt")

    profile = session.get("https://api.example.com/profile")
    result = session.send(Request("https://api.example.com/items", method="DELETE"))
```

`set_cookie_jar(path)` loads cookies from a Mozilla-format cookie file if one
exists. The session's cookies are saved to that file when the session is
closed.

### Headers and cookies

`Headers` keeps raw `Name: value` lines in the order they were added.

- `add(key, value)` appends a `key: value` line.
- `add_line(line)` appends a line exactly as given.
- `get(name)` returns the value of the first line that starts with `name`, or `None`.
- `remove(name)` drops every line that starts with `name`.

`Cookies` is a read-only mapping of names to values. It has `add`, `get` and
`remove`, and `get` returns `None` when the name is missing. `str()` of
either class gives one line per entry.

## Responses

A `curlx.response.Response` has these fields:

- `status_code` and `reason`
- `url`, the final URL
- `headers`, the status and header lines of every response in the redirect chain
- `body`
- `request_url` and `request_headers`, the URL and the merged headers that were sent
- `received_cookies`, the name and value from each `Set-Cookie` line
- `elapsed_time` in seconds
- `history`, which holds the final URL if any redirect was followed

`ok` is true for status codes from 200 to 399. `text` returns the body.
`raise_for_status()` raises `HTTPError` when `ok` is false, and `json()`
decodes the body.

## Authentication

```python
from curlx.api import get
from curlx.options import Auth, AuthType

password = "password"
response = get(
    "https://api.example.com/private",
    auth=Auth("user", password, AuthType.DIGEST),
)
```

If you give credentials to `Auth` without a type, it uses Basic
authentication. An empty `Auth()` sends no credentials. `parse_auth` builds
Basic credentials from a `user:pass` string. If the string has no colon, the
whole text is the user name and the password is empty.

## Redirects

Redirects are followed by default, up to 30 hops. Pass a `Redirects` to change
this:

```python
from curlx.api import get
from curlx.options import Redirects

no_follow = get("https://example.com/old", redirects=Redirects(False))
short = get("https://example.com/old", redirects=Redirects(True, 5))
```

## Errors

Every error derives from `curlx.exceptions.RequestException`:

| Exception          | Raised when                                                   |
|--------------------|---------------------------------------------------------------|
| `ConnectionError`  | the host cannot be resolved or connected to                   |
| `Timeout`          | the transfer times out                                        |
| `TooManyRedirects` | the redirect limit is exceeded                                |
| `HTTPError`        | `raise_for_status()` sees a status outside 200–399            |
| `RequestException` | any other transfer failure; an upload or output file that cannot be opened; a cookie jar that cannot be saved; invalid JSON in `json()` |

```python
from curlx.api import get
from curlx.exceptions import ConnectionError, HTTPError, Timeout

try:
    get("https://api.example.com/health").raise_for_status()
except (ConnectionError, Timeout):
    print("service unreachable")
except HTTPError as error:
    print(error)
```

## What it does not do

- curlx is a library only. It has no command-line program.
- `received_cookies` keeps only each cookie's name and value. Attributes such as `Path` or `Expires` are dropped.
- `history` does not list each redirect hop. It holds only the final URL.