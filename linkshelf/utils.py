"""Utility functions for the bookmark shelf."""

import re
import hashlib
from datetime import datetime, timezone
from typing import NoReturn
from urllib.parse import urlsplit, urlunsplit, parse_qsl, urlencode

from rich.console import Console
from rich.text import Text

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_HAS_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_URI_PARTS = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?")
_URI_ILLEGAL = re.compile(r"[^a-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]", re.I)
_URI_BAD_ESCAPE = re.compile(r"%[^0-9a-f]|%[0-9a-f][^0-9a-f]|%[0-9a-f]?$", re.I)
_IP_LITERAL = re.compile(r"(?:^|@)\[[0-9a-f:.]+\](?::\d*)?$", re.I)
_WWW = re.compile(r"^www\.(?!www\.)[a-z0-9\-]{1,63}\.")

DEFAULT_PORTS = {"http": 80, "https": 443}


def die(msg: str, code: int = 1) -> NoReturn:
    err(msg)
    raise SystemExit(code)


def err(msg: str) -> None:
    err_console.print(Text.assemble(("x", "red"), " ", (msg, "bold")), soft_wrap=True)


def info(msg: str) -> None:
    console.print(Text.assemble((">", "green"), " ", (msg, "bold")), soft_wrap=True)


def iso_now() -> str:
    # ISO-8601 with local offset, no microseconds
    return datetime.now(timezone.utc).astimezone().replace(microsecond=0).isoformat()


def is_uri(value: str) -> bool:
    """Loose RFC 3986 check: a scheme plus an authority or a path, legal characters only."""
    if not value or _URI_ILLEGAL.search(value) or _URI_BAD_ESCAPE.search(value):
        return False
    m = _URI_PARTS.match(value)
    scheme, authority, path = m.group(1), m.group(2), m.group(3)
    if not scheme or not re.fullmatch(r"[a-z][a-z0-9+\-.]*", scheme, re.I):
        return False
    try:
        urlsplit(value).port
    except ValueError:
        return False
    if authority:
        if ("[" in authority or "]" in authority) and not _IP_LITERAL.search(authority):
            return False
        return path == "" or path.startswith("/")
    if scheme.lower() in DEFAULT_PORTS:
        return False
    return bool(path) and not path.startswith("//")


def normalize_url(url: str) -> str:
    """Canonical form of ``url`` used for deduplication.

    Lowercases scheme and host, strips ``www.``, the default port, the
    fragment, ``utm_*`` parameters and the trailing slash, and sorts the
    query string.
    """
    url = url.strip()
    if url.startswith("//"):
        url = "http:" + url
    elif not _HAS_SCHEME.match(url):
        url = "http://" + url

    u = urlsplit(url)
    scheme = u.scheme.lower()

    netloc = u.netloc
    if netloc:
        host = (u.hostname or "").lower()
        if _WWW.match(host):
            host = host[4:]
        try:
            port = u.port
        except ValueError:
            port = None
        if port is not None and DEFAULT_PORTS.get(scheme) == port:
            port = None
        userinfo = netloc.rpartition("@")[0]
        netloc = f"{userinfo}@{host}" if userinfo else host
        if port is not None:
            netloc = f"{netloc}:{port}"

    path = re.sub(r"/{2,}", "/", u.path).rstrip("/")

    q = [(k, v) for k, v in parse_qsl(u.query, keep_blank_values=True) if not k.lower().startswith("utm_")]
    q.sort(key=lambda kv: kv[0])
    query = urlencode(q)

    return urlunsplit((scheme, netloc, path, query, ""))


def hash_url(url: str) -> str:
    """Stable dedup key: MD5 of the normalized URL."""
    return hashlib.md5(normalize_url(url).encode("utf-8")).hexdigest()


def truncate(s: str, length: int = 40, omission: str = "...") -> str:
    if len(s) <= length:
        return s
    return s[: max(length - len(omission), 0)] + omission
