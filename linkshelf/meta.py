"""Fetch a page and pull default metadata (the title) out of it."""

import re
import threading
import logging
from typing import Dict, Any, Optional, Union

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 5.0
MAX_BODY = 2 * 1024 * 1024
HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; linkshelf bookmark manager)"}

_META_TITLES = (
    {"property": "og:title"},
    {"name": "twitter:title"},
    {"property": "twitter:title"},
    {"name": "title"},
)


def _clean(s: Optional[str]) -> str:
    return re.sub(r"\s+", " ", s or "").strip()


def extract_title(html: Union[str, bytes]) -> Optional[str]:
    """Best available document title, or None.

    Order: Open Graph, Twitter card, <meta name="title">, <title>, first <h1>.
    """
    soup = BeautifulSoup(html, "html.parser")
    for attrs in _META_TITLES:
        tag = soup.find("meta", attrs=attrs)
        if tag and _clean(tag.get("content")):
            return _clean(tag.get("content"))
    if soup.title and _clean(soup.title.get_text()):
        return _clean(soup.title.get_text())
    h1 = soup.find("h1")
    if h1 and _clean(h1.get_text()):
        return _clean(h1.get_text())
    return None


def _read_body(resp: requests.Response) -> bytes:
    chunks = []
    size = 0
    for chunk in resp.iter_content(chunk_size=16384):
        chunks.append(chunk)
        size += len(chunk)
        if size >= MAX_BODY:
            break
    return b"".join(chunks)


def fetch_item_meta(url: str, timeout: float = FETCH_TIMEOUT) -> Dict[str, Any]:
    """GET ``url`` and return ``{"url", "title"}``.

    The request runs on a daemon thread and the caller waits at most
    ``timeout`` seconds for it, DNS, connect and body included. When the
    wait expires, or the request fails at the network level, the response is
    closed and only ``{"url": url}`` comes back. HTTP error statuses are not
    failures: their body is still searched for a title.

    Args:
        url: Page to fetch.
        timeout: Overall deadline in seconds.

    Returns:
        A metadata dict holding ``url`` and, when one was found, ``title``.
    """
    result: Dict[str, Any] = {}
    done = threading.Event()

    def run() -> None:
        try:
            resp = requests.get(url, headers=HEADERS, timeout=timeout, stream=True)
            result["resp"] = resp
            try:
                result["body"] = _read_body(resp)
            finally:
                resp.close()
        except Exception as e:
            result["error"] = e
        finally:
            done.set()

    threading.Thread(target=run, name="fetch-meta", daemon=True).start()
    if not done.wait(timeout):
        resp = result.get("resp")
        if resp is not None:
            resp.close()
        logger.debug("fetch timed out after %.1fs for %s", timeout, url)
        return {"url": url}

    error = result.get("error")
    if error is not None:
        if not isinstance(error, requests.RequestException):
            raise error
        logger.debug("fetch failed for %s: %s", url, error)
        return {"url": url}

    body = result["body"]
    logger.debug("fetched %s (status %s, %d bytes)", url, result["resp"].status_code, len(body))
    meta: Dict[str, Any] = {"url": url}
    title = extract_title(body)
    if title:
        meta["title"] = title
    return meta
