"""HTTP fetching of asset sources for combination."""

from __future__ import annotations

import http.client
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Mapping

from .constants import HTTP_TIMEOUT_SEC, USER_AGENT
from .types import FetchStatus


@dataclass(frozen=True)
class FetchResult:
    path: str
    status: FetchStatus
    content: str = ""
    error: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.ok


def authorization_from(request: Any) -> str | None:
    """Pull the Authorization credential off an inbound request.

    Accepts an object with a ``headers`` mapping, a plain header mapping, or a
    WSGI environ (``HTTP_AUTHORIZATION``).
    """
    if request is None:
        return None
    headers = getattr(request, "headers", request)
    if isinstance(headers, Mapping):
        for key in ("Authorization", "authorization", "HTTP_AUTHORIZATION"):
            value = headers.get(key)
            if value:
                return value
    environ = getattr(request, "environ", None)
    if isinstance(environ, Mapping):
        return environ.get("HTTP_AUTHORIZATION") or None
    return None


def _decode(body: bytes, charset: str | None) -> str:
    try:
        return body.decode(charset or "utf-8", "replace")
    except LookupError:
        return body.decode("utf-8", "replace")


class FetchClient:
    def __init__(self, host: str, base_path: str = "", timeout: float = HTTP_TIMEOUT_SEC) -> None:
        self.host = host.rstrip("/")
        self.base_path = base_path
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"{self.host}{self.base_path}{path}"

    def fetch(self, path: str, authorization: str | None = None) -> FetchResult:
        url = self.url_for(path)
        req = urllib.request.Request(url)
        req.add_header("User-Agent", USER_AGENT)
        if authorization:
            req.add_header("Authorization", authorization)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                code = resp.status
                if code != 200:
                    return FetchResult(path, FetchStatus.empty, status_code=code)
                body = resp.read()
                charset = resp.headers.get_content_charset()
        except urllib.error.HTTPError as e:
            return FetchResult(path, FetchStatus.empty, status_code=e.code)
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            print(f"[fetch fail] {url}: {e!r}")
            return FetchResult(path, FetchStatus.error, error=repr(e))
        return FetchResult(path, FetchStatus.ok, _decode(body, charset), status_code=code)
