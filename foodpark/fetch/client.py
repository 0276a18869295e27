# foodpark/fetch/client.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from foodpark.config import DEFAULT_USER_AGENT
from foodpark.exceptions import FetchError

log = logging.getLogger(__name__)

FETCH_ACCEPT = "text/html, */*"
MAX_REDIRECTS = 5

# --------------------------------------------------------------------------------------------------
# Results
# --------------------------------------------------------------------------------------------------


@dataclass
class FetchedPage:
    status: int
    url: str
    effective_url: str
    content_type: str | None
    text: str


# --------------------------------------------------------------------------------------------------
# Client
# --------------------------------------------------------------------------------------------------


class PageFetcher:
    """
    Small wrapper around httpx for pulling the trading page.

    Any transport error or non-2xx status becomes a FetchError; there is no
    retry, a failed fetch simply fails the run.
    """

    def __init__(
        self,
        *,
        user_agent: str | None = None,
        timeout_s: float = 10.0,
        connect_timeout_s: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self._client = httpx.Client(
            headers={"User-Agent": self.user_agent, "Accept": FETCH_ACCEPT},
            timeout=httpx.Timeout(timeout_s, connect=connect_timeout_s),
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            transport=transport,
        )

    def fetch(self, url: str) -> FetchedPage:
        log.debug("GET %s", url)
        try:
            resp = self._client.get(url)
        except httpx.RequestError as exc:
            raise FetchError(f"Failed to fetch {url}: {type(exc).__name__}: {exc}") from exc

        status = int(resp.status_code)
        if not 200 <= status < 300:
            raise FetchError(f"Failed to fetch {url}: HTTP {status}")

        log.info("Fetched %s (%d bytes)", resp.url, len(resp.content))
        return FetchedPage(
            status=status,
            url=url,
            effective_url=str(resp.url),
            content_type=resp.headers.get("Content-Type"),
            text=resp.text,
        )

    # ----------------------------------------------------------------------------------
    # Context manager
    # ----------------------------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> PageFetcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def fetch_page(
    url: str,
    *,
    user_agent: str | None = None,
    timeout_s: float = 10.0,
    connect_timeout_s: float = 5.0,
) -> FetchedPage:
    """
    Convenience wrapper: one client, one GET.

    Usage:
        from foodpark.fetch import fetch_page
        page = fetch_page("https://www.foodparkcam.com/whos-trading")
    """
    with PageFetcher(
        user_agent=user_agent,
        timeout_s=timeout_s,
        connect_timeout_s=connect_timeout_s,
    ) as fetcher:
        return fetcher.fetch(url)


__all__ = ["FetchedPage", "PageFetcher", "fetch_page"]
