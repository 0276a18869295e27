"""
Page fetcher: a thin httpx client for the trading page.

Public API:
  - fetch_page(url, *, user_agent=None, timeout_s=10.0, connect_timeout_s=5.0) -> FetchedPage
  - PageFetcher, FetchedPage
"""

from .client import (
    FetchedPage,
    PageFetcher,
    fetch_page,
)

__all__ = [
    "FetchedPage",
    "PageFetcher",
    "fetch_page",
]
